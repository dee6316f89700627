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

from collections.abc import Sequence
from typing import Any, Iterable

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple


class TupleCodec(Codec[tuple]):
    """ Codec of fixed-length heterogeneous tuples, the members are concatenated with no prefix.

    Lists of the right length are accepted when encoding, decoding always gives a `tuple`.
    """

    __slots__ = ('_members',)

    _members: tuple[Codec[Any], ...]

    def __init__(self, members: Iterable[Codec[Any]]) -> None:
        self._members = tuple(members)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, (tuple, list)):
            raise TypeError('expected tuple')
        if len(value) != len(self._members):
            raise ValueError(f'expected a tuple of {len(self._members)} items, got {len(value)}')
        if deep:
            for member, item in zip(self._members, value):
                member._check_value(item, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Sequence[Any], /) -> None:
        encode_tuple(serializer, tuple(value), tuple(member.serialize for member in self._members))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple:
        return decode_tuple(deserializer, tuple(member.deserialize for member in self._members))


def tuple_codec(members: Iterable[Codec[Any]]) -> TupleCodec:
    return TupleCodec(members)
