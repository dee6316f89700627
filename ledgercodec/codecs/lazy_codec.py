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
Lazy codecs make it possible to declare types that refer to each other.

A codec can only be built from codecs that already exist, so two types that contain each other can't both be built
eagerly. A lazy codec holds a supplier instead, and calls it on every use to get the actual codec:

>>> from ledgercodec.codecs import U8, option_codec, tuple_codec
>>> node = tuple_codec([U8, option_codec(lazy_codec(lambda: node))])
>>> node.encode((1, (2, None))).hex()
'01010200'
>>> node.decode('01010200')
(1, (2, None))

The result of the supplier is not cached, callers that resolve a lazy codec in a hot loop should keep the resolved
codec themselves.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.serialization import Deserializer, Serializer

T = TypeVar('T')


class LazyCodec(Codec[T]):
    __slots__ = ('_supplier',)

    _supplier: Callable[[], Codec[T]]

    def __init__(self, supplier: Callable[[], Codec[T]]) -> None:
        self._supplier = supplier

    def resolve(self) -> Codec[T]:
        codec = self._supplier()
        if not isinstance(codec, Codec):
            raise TypeError(f'lazy codec supplier returned {codec!r} instead of a codec')
        return codec

    @override
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        self.resolve()._check_value(value, deep=deep)

    @override
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        self.resolve()._serialize(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        return self.resolve()._deserialize(deserializer)


def lazy_codec(supplier: Callable[[], Codec[T]]) -> LazyCodec[T]:
    """ Build a codec that resolves `supplier()` every time it is used."""
    return LazyCodec(supplier)
