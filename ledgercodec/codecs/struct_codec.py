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

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Generic, TypeVar

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.compound_encoding.struct import decode_struct, encode_struct

T = TypeVar('T')


class StructCodec(Codec[T], Generic[T]):
    """ Codec of records with named fields, written in an explicit field order with no names on the wire.

    The field order is part of the wire format, so it is always given explicitly and never taken from the iteration
    order of the field mapping.

    When encoding, fields are read from a `Mapping` by key or from any other object by attribute. When decoding, the
    value is built by calling `factory` with the fields as keyword arguments.
    """

    __slots__ = ('_fields', '_factory')

    _fields: tuple[tuple[str, Codec[Any]], ...]
    _factory: Callable[..., T]

    def __init__(
        self,
        field_order: Sequence[str],
        fields: Mapping[str, Codec[Any]],
        *,
        factory: Callable[..., T],
    ) -> None:
        if isinstance(field_order, str):
            raise TypeError('field_order must be a sequence of field names')
        if len(set(field_order)) != len(field_order):
            raise ValueError('field_order has repeated names')
        if set(field_order) != set(fields):
            missing = sorted(set(fields) - set(field_order))
            unknown = sorted(set(field_order) - set(fields))
            raise ValueError(f'field_order does not match the fields: missing={missing} unknown={unknown}')
        self._fields = tuple((name, fields[name]) for name in field_order)
        self._factory = factory

    @property
    def field_order(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._fields)

    def _get_field(self, value: Any, name: str) -> Any:
        if isinstance(value, Mapping):
            try:
                return value[name]
            except KeyError:
                raise TypeError(f'missing field {name!r}') from None
        try:
            return getattr(value, name)
        except AttributeError:
            raise TypeError(f'missing field {name!r}') from None

    @override
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        # fields are looked up when serializing, the decoded value is whatever the factory built
        if not deep:
            return
        for name, codec in self._fields:
            codec._check_value(self._get_field(value, name), deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        values = {name: self._get_field(value, name) for name, _ in self._fields}
        encode_struct(serializer, values, [(name, codec.serialize) for name, codec in self._fields])

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        fields = decode_struct(deserializer, [(name, codec.deserialize) for name, codec in self._fields])
        return self._factory(**fields)


def struct_codec(
    field_order: Sequence[str],
    fields: Mapping[str, Codec[Any]],
    *,
    factory: Callable[..., Any] = dict,
) -> StructCodec[Any]:
    """ Build a codec of records, by default decoded as a `dict`.

    >>> from ledgercodec.codecs import STR, U8
    >>> account = struct_codec(['name', 'age'], {'age': U8, 'name': STR})
    >>> account.encode({'age': 30, 'name': 'ana'}).hex()
    '0c616e611e'
    >>> account.decode('0c616e611e')
    {'name': 'ana', 'age': 30}
    """
    return StructCodec(field_order, fields, factory=factory)
