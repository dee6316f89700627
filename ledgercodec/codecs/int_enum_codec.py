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

from __future__ import annotations

from enum import IntEnum
from typing import Generic, TypeVar

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.codecs.enum_codec import MAX_DISCRIMINANT
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.encoding.int import decode_int, encode_int
from ledgercodec.serialization.exceptions import UnknownDiscriminant

E = TypeVar('E', bound=IntEnum)


class IntEnumCodec(Codec[E], Generic[E]):
    """ Codec of `IntEnum` members, the member's value is the one-byte discriminant.

    >>> class Level(IntEnum):
    ...     DEBUG = 0
    ...     ERROR = 3
    >>> IntEnumCodec(Level).encode(Level.ERROR).hex()
    '03'
    >>> IntEnumCodec(Level).decode('00')
    <Level.DEBUG: 0>
    """

    __slots__ = ('_enum_class',)

    _enum_class: type[E]

    def __init__(self, enum_class: type[E]) -> None:
        for member in enum_class:
            if not 0 <= member.value <= MAX_DISCRIMINANT:
                raise ValueError(f'{member!r} does not fit in one byte')
        self._enum_class = enum_class

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._enum_class):
            raise TypeError(f'expected {self._enum_class.__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: E, /) -> None:
        encode_int(serializer, int(value), length=1, signed=False)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> E:
        int_value = decode_int(deserializer, length=1, signed=False)
        try:
            return self._enum_class(int_value)
        except ValueError:
            raise UnknownDiscriminant(int_value, self._enum_class.__name__) from None
