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
Codecs of tagged unions: a closed set of variants, each with a tag, a one-byte discriminant and an optional payload.

The discriminants are declared by the caller and never derived from the order of the variants, so the wire format
survives reordering the declaration.

>>> from ledgercodec.codecs import STR, U32
>>> schema = EnumSchema.from_dict({'Empty': 0, 'Amount': (1, U32), 'Note': (5, STR)}, name='Payload')
>>> payload = enum_codec(schema)
>>> payload.encode(Variant('Amount', 7)).hex()
'0107000000'
>>> payload.encode(Variant('Empty')).hex()
'00'
>>> payload.decode('050c666f6f')
Variant(kind='Note', value='foo')

When no variant carries a payload the values can simply be the tags:

>>> level = literal_union_codec(EnumSchema.from_dict({'Debug': 0, 'Info': 1, 'Error': 2}))
>>> level.encode('Error').hex()
'02'
>>> level.decode('01')
'Info'
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, NamedTuple, Optional, Union

from structlog import get_logger
from typing_extensions import Self, override

from ledgercodec.codecs.codec import Codec
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.compound_encoding import Decoder
from ledgercodec.serialization.compound_encoding.enum import decode_enum, encode_enum

logger = get_logger()

MAX_DISCRIMINANT = 0xff


class Variant(NamedTuple):
    """ A value of a tagged union, `value` is `None` for variants without payload."""
    kind: Hashable
    value: Any = None


class EnumVariantSpec(NamedTuple):
    tag: Hashable
    discriminant: int
    codec: Optional[Codec[Any]]


class EnumSchema:
    """ The table of variants of a tagged union.

    It is validated once, when built: tags must be unique, and discriminants must be unique and fit in one byte.
    """

    __slots__ = ('_variants', '_by_tag', '_by_discriminant', '_decoders', 'name')

    _variants: tuple[EnumVariantSpec, ...]
    _by_tag: dict[Hashable, EnumVariantSpec]
    _by_discriminant: dict[int, EnumVariantSpec]
    _decoders: dict[int, Optional[Decoder[Any]]]
    name: Optional[str]

    def __init__(
        self,
        variants: Iterable[tuple[Hashable, int, Optional[Codec[Any]]]],
        *,
        name: Optional[str] = None,
    ) -> None:
        self.name = name
        self._variants = tuple(EnumVariantSpec(*variant) for variant in variants)
        self._by_tag = {}
        self._by_discriminant = {}
        for spec in self._variants:
            if not isinstance(spec.discriminant, int) or isinstance(spec.discriminant, bool):
                raise TypeError(f'discriminant of {spec.tag!r} must be an int')
            if not 0 <= spec.discriminant <= MAX_DISCRIMINANT:
                raise ValueError(f'discriminant of {spec.tag!r} does not fit in one byte: {spec.discriminant}')
            if spec.codec is not None and not isinstance(spec.codec, Codec):
                raise TypeError(f'payload of {spec.tag!r} must be a codec or None')
            if spec.tag in self._by_tag:
                raise ValueError(f'repeated variant tag {spec.tag!r}')
            if spec.discriminant in self._by_discriminant:
                other = self._by_discriminant[spec.discriminant]
                raise ValueError(f'variants {other.tag!r} and {spec.tag!r} share discriminant {spec.discriminant}')
            self._by_tag[spec.tag] = spec
            self._by_discriminant[spec.discriminant] = spec
        self._decoders = {
            spec.discriminant: spec.codec.deserialize if spec.codec is not None else None
            for spec in self._variants
        }
        logger.debug('enum schema built', name=name, variants=len(self._variants))

    @classmethod
    def from_dict(
        cls,
        variants: Mapping[Hashable, Union[int, tuple[int], tuple[int, Optional[Codec[Any]]]]],
        *,
        name: Optional[str] = None,
    ) -> Self:
        """ Build a schema from `{tag: discriminant}`, `{tag: (discriminant,)}` or `{tag: (discriminant, payload)}`
        items, the first two forms being variants without payload.
        """
        rows: list[tuple[Hashable, int, Optional[Codec[Any]]]] = []
        for tag, spec in variants.items():
            if isinstance(spec, tuple):
                if len(spec) == 1:
                    rows.append((tag, spec[0], None))
                elif len(spec) == 2:
                    rows.append((tag, spec[0], spec[1]))
                else:
                    raise ValueError(f'variant {tag!r} must be (discriminant,) or (discriminant, payload)')
            else:
                rows.append((tag, spec, None))
        return cls(rows, name=name)

    def __iter__(self) -> Iterator[EnumVariantSpec]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def by_tag(self, tag: Hashable) -> EnumVariantSpec:
        try:
            return self._by_tag[tag]
        except (KeyError, TypeError):
            raise ValueError(f'unknown variant {tag!r}') from None

    def by_discriminant(self, discriminant: int) -> EnumVariantSpec:
        return self._by_discriminant[discriminant]

    def is_unit_only(self) -> bool:
        """ Whether no variant carries a payload."""
        return all(spec.codec is None for spec in self._variants)

    def decoders(self) -> Mapping[int, Optional[Decoder[Any]]]:
        """ Payload decoder of each discriminant, built once with the schema and shared by every decode."""
        return self._decoders


class EnumCodec(Codec[Variant]):
    """ Discriminated union codec, values are `Variant(kind, value)`.
    """

    __slots__ = ('_schema',)

    _schema: EnumSchema

    def __init__(self, schema: EnumSchema) -> None:
        self._schema = schema

    @property
    def schema(self) -> EnumSchema:
        return self._schema

    @override
    def _check_value(self, value: Variant, /, *, deep: bool) -> None:
        if not isinstance(value, Variant):
            raise TypeError('expected Variant')
        spec = self._schema.by_tag(value.kind)
        if spec.codec is None:
            if value.value is not None:
                raise ValueError(f'variant {spec.tag!r} has no payload')
        elif deep:
            spec.codec._check_value(value.value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Variant, /) -> None:
        spec = self._schema.by_tag(value.kind)
        encoder = spec.codec.serialize if spec.codec is not None else None
        encode_enum(serializer, spec.discriminant, value.value, encoder)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Variant:
        discriminant, payload = decode_enum(deserializer, self._schema.decoders(), enum_name=self._schema.name)
        return Variant(self._schema.by_discriminant(discriminant).tag, payload)


class LiteralUnionCodec(Codec[Hashable]):
    """ Codec of unions without payloads, values are the bare tags and only the discriminant goes on the wire.
    """

    __slots__ = ('_schema',)

    _schema: EnumSchema

    def __init__(self, schema: EnumSchema) -> None:
        if not schema.is_unit_only():
            raise TypeError('a literal union cannot have variants with payload')
        self._schema = schema

    @property
    def schema(self) -> EnumSchema:
        return self._schema

    @override
    def _check_value(self, value: Hashable, /, *, deep: bool) -> None:
        self._schema.by_tag(value)

    @override
    def _serialize(self, serializer: Serializer, value: Hashable, /) -> None:
        encode_enum(serializer, self._schema.by_tag(value).discriminant, None, None)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Hashable:
        discriminant, _ = decode_enum(deserializer, self._schema.decoders(), enum_name=self._schema.name)
        return self._schema.by_discriminant(discriminant).tag


def enum_codec(schema: EnumSchema) -> EnumCodec:
    return EnumCodec(schema)


def literal_union_codec(schema: EnumSchema) -> LiteralUnionCodec:
    return LiteralUnionCodec(schema)
