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

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.encoding.int import decode_int, encode_int


class SizedIntCodec(Codec[int]):
    """ Codec of `int` values with a fixed size and signedness, little-endian on the wire.
    """

    __slots__ = ('_byte_size', '_signed')

    _byte_size: int
    _signed: bool

    def __init__(self, byte_size: int, *, signed: bool) -> None:
        if byte_size <= 0:
            raise ValueError('byte_size must be positive')
        self._byte_size = byte_size
        self._signed = signed

    def __repr__(self) -> str:
        prefix = 'I' if self._signed else 'U'
        return f'{prefix}{self._byte_size * 8}'

    @property
    def upper_bound(self) -> int:
        if self._signed:
            return 2**(self._byte_size * 8 - 1) - 1
        else:
            return 2**(self._byte_size * 8) - 1

    @property
    def lower_bound(self) -> int:
        if self._signed:
            return -(2**(self._byte_size * 8 - 1))
        else:
            return 0

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        if value > self.upper_bound:
            raise ValueError(f'{value} is above the upper bound of {self!r}')
        if value < self.lower_bound:
            raise ValueError(f'{value} is below the lower bound of {self!r}')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)


U8 = SizedIntCodec(1, signed=False)
U16 = SizedIntCodec(2, signed=False)
U32 = SizedIntCodec(4, signed=False)
U64 = SizedIntCodec(8, signed=False)
U128 = SizedIntCodec(16, signed=False)
I8 = SizedIntCodec(1, signed=True)
I16 = SizedIntCodec(2, signed=True)
I32 = SizedIntCodec(4, signed=True)
I64 = SizedIntCodec(8, signed=True)
I128 = SizedIntCodec(16, signed=True)
