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

from typing import Optional

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.conf.get_settings import get_global_settings
from ledgercodec.serialization import Buffer, Deserializer, Serializer
from ledgercodec.serialization.encoding.bytes import decode_bytes, encode_bytes

_BYTES_LIKE = (bytes, bytearray, memoryview)


class BytesCodec(Codec[bytes]):
    """ Codec of byte sequences of any length, with a compact length prefix.

    Any bytes-like value can be encoded, decoding always gives `bytes`. `strict` applies to the length prefix, see
    `CompactCodec`.
    """

    __slots__ = ('_strict',)

    _strict: bool

    def __init__(self, *, strict: Optional[bool] = None) -> None:
        self._strict = get_global_settings().STRICT_COMPACT_DECODING if strict is None else strict

    @override
    def _check_value(self, value: Buffer, /, *, deep: bool) -> None:
        if not isinstance(value, _BYTES_LIKE):
            raise TypeError('expected bytes-like')

    @override
    def _serialize(self, serializer: Serializer, value: Buffer, /) -> None:
        encode_bytes(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bytes:
        return decode_bytes(deserializer, strict=self._strict)


class FixedBytesCodec(Codec[bytes]):
    """ Codec of byte sequences of a size known by both sides, written raw with no prefix.
    """

    __slots__ = ('_size',)

    _size: int

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError('size cannot be negative')
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    @override
    def _check_value(self, value: Buffer, /, *, deep: bool) -> None:
        if not isinstance(value, _BYTES_LIKE):
            raise TypeError('expected bytes-like')
        size = memoryview(value).nbytes
        if size != self._size:
            raise ValueError(f'expected exactly {self._size} bytes, got {size}')

    @override
    def _serialize(self, serializer: Serializer, value: Buffer, /) -> None:
        serializer.write_bytes(memoryview(value).cast('B'))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bytes:
        return bytes(deserializer.read_bytes(self._size))


def fixed_bytes_codec(size: int) -> FixedBytesCodec:
    return FixedBytesCodec(size)


BYTES_VEC = BytesCodec()
