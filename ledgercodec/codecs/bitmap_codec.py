# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
Codec of flag sets, written as the bitwise or of the flags' masks in a `u32`.

>>> permissions = bitmap_codec({'READ': 1, 'WRITE': 2})
>>> permissions.encode({'READ'}).hex()
'01000000'
>>> sorted(permissions.decode('03000000'))
['READ', 'WRITE']

Bits that no flag claims are an error, they mean the peer knows flags this side doesn't:

>>> try:
...     permissions.decode('04000000')
... except ValueError as e:
...     print(*e.args)
bitmask contains unknown flags: 0b100
"""

from __future__ import annotations

from collections.abc import Collection, Mapping

from structlog import get_logger
from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.encoding.int import decode_int, encode_int
from ledgercodec.serialization.exceptions import UnknownFlagBits

logger = get_logger()

BITMAP_BYTE_SIZE = 4
MAX_MASK = (1 << (8 * BITMAP_BYTE_SIZE)) - 1


class BitmapCodec(Codec[frozenset[str]]):
    """ Codec of sets of flag names, each flag is bound to a mask and no two masks share a bit.

    Any collection of names (set, list, ...) is accepted when encoding, decoding gives a `frozenset`.
    """

    __slots__ = ('_masks',)

    _masks: dict[str, int]

    def __init__(self, masks: Mapping[str, int]) -> None:
        used = 0
        for name, mask in masks.items():
            if not isinstance(mask, int) or isinstance(mask, bool):
                raise TypeError(f'mask of {name!r} must be an int')
            if not 0 < mask <= MAX_MASK:
                raise ValueError(f'mask of {name!r} must be a non-zero u32: {mask}')
            if used & mask:
                raise ValueError(f'mask of {name!r} overlaps other flags: 0b{used & mask:b}')
            used |= mask
        self._masks = dict(masks)
        logger.debug('bitmap schema built', flags=len(self._masks))

    @property
    def masks(self) -> dict[str, int]:
        return dict(self._masks)

    @override
    def _check_value(self, value: Collection[str], /, *, deep: bool) -> None:
        if not isinstance(value, Collection) or isinstance(value, (str, bytes)):
            raise TypeError('expected a collection of flag names')
        for name in value:
            if name not in self._masks:
                raise ValueError(f'unknown flag {name!r}')

    @override
    def _serialize(self, serializer: Serializer, value: Collection[str], /) -> None:
        bits = 0
        for name in value:
            bits |= self._masks[name]
        encode_int(serializer, bits, length=BITMAP_BYTE_SIZE, signed=False)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> frozenset[str]:
        bits = decode_int(deserializer, length=BITMAP_BYTE_SIZE, signed=False)
        remainder = bits
        flags = set()
        for name, mask in self._masks.items():
            if bits & mask == mask:
                flags.add(name)
                remainder &= ~mask
        if remainder:
            raise UnknownFlagBits(remainder)
        return frozenset(flags)


def bitmap_codec(masks: Mapping[str, int]) -> BitmapCodec:
    return BitmapCodec(masks)
