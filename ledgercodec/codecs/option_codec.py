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

from typing import Optional, TypeVar

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.compound_encoding.optional import decode_optional, encode_optional

V = TypeVar('V')


class OptionCodec(Codec[Optional[V]]):
    """ Codec of a value that is either `V` or `None`.
    """

    __slots__ = ('_value',)

    _value: Codec[V]

    def __init__(self, codec: Codec[V]) -> None:
        self._value = codec

    @override
    def _check_value(self, value: Optional[V], /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Optional[V], /) -> None:
        encode_optional(serializer, value, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Optional[V]:
        return decode_optional(deserializer, self._value.deserialize)


def option_codec(codec: Codec[V]) -> OptionCodec[V]:
    return OptionCodec(codec)
