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
Codecs of key-ordered maps, written as a canonical sorted set of `(key, value)` entries compared by key only.

When a key is repeated, the entry given last wins, like inserting the entries one by one into a dict:

>>> from ledgercodec.codecs import STR, U8
>>> balances = sorted_map_codec(STR, U8)
>>> balances.encode([('c', 2), ('a', 2), ('a', 5), ('b', 3)]) == balances.encode({'a': 5, 'b': 3, 'c': 2})
True
>>> balances.decode(balances.encode({'b': 3, 'a': 5}))
{'a': 5, 'b': 3}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Generic, NamedTuple, Optional, TypeVar, Union

from ledgercodec.codecs.codec import Codec
from ledgercodec.codecs.collection_codec import VecCodec
from ledgercodec.codecs.tuple_codec import tuple_codec
from ledgercodec.codecs.wrapped_codec import WrappedCodec
from ledgercodec.utils.compare import Comparator, natural_compare, to_sorted_set

K = TypeVar('K')
V = TypeVar('V')


class MapEntry(NamedTuple, Generic[K, V]):
    key: K
    value: V


def _to_entries(value: Union[Mapping[K, V], Iterable[tuple[K, V]]]) -> list[MapEntry[K, V]]:
    if isinstance(value, (str, bytes)):
        raise TypeError('expected a mapping or an iterable of pairs')
    pairs = value.items() if isinstance(value, Mapping) else value
    entries = []
    for pair in pairs:
        key, item = pair
        entries.append(MapEntry(key, item))
    return entries


def map_entry_codec(key: Codec[K], value: Codec[V]) -> WrappedCodec[MapEntry[K, V], tuple]:
    return tuple_codec([key, value]).wrap(
        to_base=tuple,
        from_base=lambda pair: MapEntry(*pair),
    )


def sorted_map_codec(
    key: Codec[K],
    value: Codec[V],
    compare: Optional[Comparator[K]] = None,
    builder: Callable[[list[MapEntry[K, V]]], Any] = dict,
) -> WrappedCodec[Any, list[MapEntry[K, V]]]:
    """ Build a codec of maps that are written sorted by key.

    Encoding accepts a `Mapping` or an iterable of `(key, value)` pairs. The decoded value is `builder` applied to the
    list of entries, a `dict` by default.
    """
    key_cmp = compare if compare is not None else natural_compare

    def by_key(a: MapEntry[K, V], b: MapEntry[K, V]) -> int:
        return key_cmp(a.key, b.key)

    return VecCodec(map_entry_codec(key, value), builder=list).wrap(
        to_base=lambda pairs: to_sorted_set(_to_entries(pairs), by_key),
        from_base=builder,
    )
