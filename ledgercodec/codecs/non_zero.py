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
A wrapper that guarantees its value is not zero.

The check happens when the wrapper is built, which also covers decoding: a zero read from the wire is rejected.

>>> from ledgercodec.codecs import U32
>>> NonZero(5).value
5
>>> try:
...     NonZero(0)
... except ValueError as e:
...     print(*e.args)
value cannot be zero

>>> amount = NonZero.with_codec(U32)
>>> amount.encode(NonZero(7)).hex()
'07000000'
>>> amount.decode('07000000')
NonZero(7)
>>> try:
...     amount.decode('00000000')
... except ValueError as e:
...     print(*e.args)
value cannot be zero
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Callable, Generic, TypeVar

from ledgercodec.codecs.codec import Codec
from ledgercodec.codecs.wrapped_codec import WrappedCodec
from ledgercodec.serialization.exceptions import InvariantViolation

T = TypeVar('T')
U = TypeVar('U')


def _is_zero(value: Any) -> bool:
    is_zero = getattr(value, 'is_zero', None)
    if callable(is_zero):
        return bool(is_zero())
    if isinstance(value, Number):
        return value == 0
    raise TypeError(f'cannot tell whether {value!r} is zero')


class NonZero(Generic[T]):
    """ Holds a number (or any object with an `is_zero()` method) that is not zero.
    """

    __slots__ = ('_value',)

    _value: T

    def __init__(self, value: T) -> None:
        if _is_zero(value):
            raise InvariantViolation('value cannot be zero')
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def map(self, fn: Callable[[T], U]) -> NonZero[U]:
        """ Apply `fn` to the value, the result goes through the same check, so a zero raises `InvariantViolation`."""
        return NonZero(fn(self._value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonZero):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((NonZero, self._value))

    def __repr__(self) -> str:
        return f'NonZero({self._value!r})'

    @staticmethod
    def with_codec(codec: Codec[T]) -> WrappedCodec[NonZero[T], T]:
        """ Build a codec of `NonZero` values that are written as the base codec writes the bare value."""
        return codec.wrap(to_base=_unwrap, from_base=NonZero)


def _unwrap(value: NonZero[T]) -> T:
    if not isinstance(value, NonZero):
        raise TypeError('expected NonZero')
    return value.value
