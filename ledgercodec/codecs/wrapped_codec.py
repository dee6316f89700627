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

from typing import Callable, Generic, TypeVar

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.serialization import Deserializer, Serializer

T = TypeVar('T')
U = TypeVar('U')


class WrappedCodec(Codec[U], Generic[U, T]):
    """ Codec of `U` values that go on the wire as the `T` of a base codec.

    Built with `Codec.wrap`. The conversion functions are expected to be inverses of each other and total over the
    values this codec will see.
    """

    __slots__ = ('_base', '_to_base', '_from_base')

    _base: Codec[T]
    _to_base: Callable[[U], T]
    _from_base: Callable[[T], U]

    def __init__(self, base: Codec[T], *, to_base: Callable[[U], T], from_base: Callable[[T], U]) -> None:
        self._base = base
        self._to_base = to_base
        self._from_base = from_base

    @property
    def base(self) -> Codec[T]:
        return self._base

    @override
    def _check_value(self, value: U, /, *, deep: bool) -> None:
        # the value can only be checked after the conversion, which serialize already does
        if deep:
            self._base.check_value(self._to_base(value))

    @override
    def _serialize(self, serializer: Serializer, value: U, /) -> None:
        self._base.serialize(serializer, self._to_base(value))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> U:
        return self._from_base(self._base.deserialize(deserializer))
