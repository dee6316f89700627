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
Codecs of homogeneous sequences, all of them written as a compact length followed by the items.

`vec_codec` keeps the order of the items. `sorted_set_codec` puts the items in canonical form before encoding: sorted
by the comparator, with every run of equal items collapsed to the last of them. Two inputs holding the same items,
in any order and with any repetition, encode to the same bytes:

>>> from ledgercodec.codecs import U8
>>> accounts = sorted_set_codec(U8)
>>> accounts.encode([3, 1, 2, 1]).hex()
'0c010203'
>>> accounts.encode([1, 2, 3]) == accounts.encode([2, 3, 3, 1])
True
>>> accounts.decode('0c010203')
[1, 2, 3]

Decoding doesn't normalize again, the bytes are expected to come from a canonical encoder.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.codecs.wrapped_codec import WrappedCodec
from ledgercodec.conf.get_settings import get_global_settings
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.compound_encoding.collection import decode_collection, encode_collection
from ledgercodec.utils.compare import Comparator, natural_compare, to_sorted_set

T = TypeVar('T')
R = TypeVar('R')


class VecCodec(Codec[R], Generic[T, R]):
    """ Codec of sequences that keep their order, decoded with `builder` (a `list` by default).

    `max_length` bounds the length prefix accepted when decoding and `strict` applies to that prefix. When left as
    `None` they come from the `MAX_COLLECTION_LENGTH` and `STRICT_COMPACT_DECODING` settings, read once here.
    """

    __slots__ = ('_item', '_builder', '_max_length', '_strict')

    _item: Codec[T]
    _builder: Callable[[Iterable[T]], R]
    _max_length: Optional[int]
    _strict: bool

    def __init__(
        self,
        item: Codec[T],
        *,
        builder: Callable[[Iterable[T]], R],
        max_length: Optional[int] = None,
        strict: Optional[bool] = None,
    ) -> None:
        settings = get_global_settings()
        self._item = item
        self._builder = builder
        self._max_length = settings.MAX_COLLECTION_LENGTH if max_length is None else max_length
        self._strict = settings.STRICT_COMPACT_DECODING if strict is None else strict

    @property
    def item(self) -> Codec[T]:
        return self._item

    @property
    def max_length(self) -> Optional[int]:
        return self._max_length

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, Collection) or isinstance(value, (str, bytes, bytearray)):
            raise TypeError('expected a collection')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Collection[T], /) -> None:
        encode_collection(serializer, value, self._item.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> R:
        return decode_collection(
            deserializer,
            self._item.deserialize,
            self._builder,
            max_length=self._max_length,
            strict=self._strict,
        )


def vec_codec(item: Codec[T], builder: Callable[[Iterable[T]], Any] = list) -> VecCodec[T, Any]:
    return VecCodec(item, builder=builder)


def sorted_set_codec(
    item: Codec[T],
    compare: Optional[Comparator[T]] = None,
    builder: Callable[[list[T]], Any] = list,
) -> WrappedCodec[Any, list[T]]:
    """ Build a codec of sets that are written in canonical order.

    `compare` defaults to the natural ordering of the items. Any iterable is accepted when encoding, the decoded value
    is `builder` applied to the list of items.
    """
    cmp = compare if compare is not None else natural_compare
    return VecCodec(item, builder=list).wrap(
        to_base=lambda items: to_sorted_set(items, cmp),
        from_base=builder,
    )
