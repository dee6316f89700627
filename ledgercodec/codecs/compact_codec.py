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

from typing import Optional

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.conf.get_settings import get_global_settings
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.encoding.compact import MAX_COMPACT, decode_compact, encode_compact


class CompactCodec(Codec[int]):
    """ Codec of unsigned `int` values using the variable-length compact encoding.

    `strict` selects whether non-minimal encodings are rejected when decoding. When left as `None` the
    `STRICT_COMPACT_DECODING` setting decides, read once when the codec is built.
    """

    __slots__ = ('_strict',)

    _strict: bool

    def __init__(self, *, strict: Optional[bool] = None) -> None:
        self._strict = get_global_settings().STRICT_COMPACT_DECODING if strict is None else strict

    @property
    def strict(self) -> bool:
        return self._strict

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        if value < 0:
            raise ValueError('compact integers cannot be negative')
        if value > MAX_COMPACT:
            raise ValueError('too big to encode as compact')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_compact(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_compact(deserializer, strict=self._strict)


COMPACT = CompactCodec()
