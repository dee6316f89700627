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
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.encoding.utf8 import decode_utf8, encode_utf8


class StrCodec(Codec[str]):
    """ Codec of `str` values, as the length-prefixed UTF-8 bytes.

    `strict` applies to the length prefix, see `CompactCodec`.
    """

    __slots__ = ('_strict',)

    _strict: bool

    def __init__(self, *, strict: Optional[bool] = None) -> None:
        self._strict = get_global_settings().STRICT_COMPACT_DECODING if strict is None else strict

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> None:
        encode_utf8(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> str:
        return decode_utf8(deserializer, strict=self._strict)


STR = StrCodec()
