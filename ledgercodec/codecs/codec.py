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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, Union, final

from ledgercodec.serialization import Buffer, Deserializer, Serializer
from ledgercodec.utils.hex import parse_hex

if TYPE_CHECKING:
    from ledgercodec.codecs.lazy_codec import LazyCodec
    from ledgercodec.codecs.wrapped_codec import WrappedCodec

T = TypeVar('T')
U = TypeVar('U')
C = TypeVar('C')

CODEC_ATTRIBUTE = '__codec__'


class Codec(ABC, Generic[T]):
    """ A codec pairs the encoding and decoding of values of type `T` with the wire format.

    Codecs are built once, when the types of a data model are declared, and are immutable afterwards: they hold no
    state besides the codecs and schema they were built from, so sharing one between threads is safe.

    Larger codecs are built by composing smaller ones, either with the factories of this package (`tuple_codec`,
    `struct_codec`, `vec_codec`, ...) or with `Codec.wrap`, which maps a codec of `T` into a codec of `U`.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeError or ValueError if the value cannot be encoded by this codec.

        The check is deep, for compound values every member is checked too.
        """
        # XXX: subclasses must implement Codec._check_value, not Codec.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Write the value to the serializer.

        The value is checked while it is being serialized, so calling check_value before is not needed.
        """
        # XXX: subclasses must implement Codec._serialize, not Codec.serialize
        self._check_value(value, deep=False)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        """ Read a value from the deserializer, consuming exactly the bytes that belong to it.
        """
        # XXX: subclasses must implement Codec._deserialize, not Codec.deserialize
        value = self._deserialize(deserializer)
        self._check_value(value, deep=False)
        return value

    @final
    def encode(self, value: T, /) -> bytes:
        """ Encode a value to bytes.

        Raises TypeError or ValueError for values that don't fit this codec, nothing is returned in that case.
        """
        serializer = Serializer.build_bytes_serializer()
        self.serialize(serializer, value)
        return bytes(serializer.finalize())

    @final
    def decode(self, data: Union[Buffer, str], /) -> T:
        """ Decode a value from bytes, or from a string of hex digits.

        The whole input must belong to the value, `TrailingDataError` is raised when anything is left over.
        """
        if isinstance(data, str):
            data = parse_hex(data)
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.deserialize(deserializer)
        deserializer.finalize()
        return value

    @final
    def wrap(self, *, to_base: Callable[[U], T], from_base: Callable[[T], U]) -> WrappedCodec[U, T]:
        """ Derive a codec of `U` that is encoded as this codec's `T`.

        `to_base` is applied before encoding and `from_base` after decoding, errors raised by either propagate as they
        are.
        """
        from ledgercodec.codecs.wrapped_codec import WrappedCodec
        return WrappedCodec(self, to_base=to_base, from_base=from_base)

    @staticmethod
    def lazy(supplier: Callable[[], Codec[U]]) -> LazyCodec[U]:
        """ Alias of `lazy_codec`, the supplier is called on every use to get the actual codec."""
        from ledgercodec.codecs.lazy_codec import LazyCodec
        return LazyCodec(supplier)

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Codec.check_value`.

        When `deep=False` the members of compound values are not checked, `Codec.serialize` relies on that because
        each member is checked when it is serialized.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, the value has already been "shallow checked".

        Compound codecs should pass the member's `Codec.serialize` as an `Encoder`, not `Codec._serialize`, so members
        get checked too.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `deserialize`."""
        raise NotImplementedError


def define_codec(codec: Union[Codec[Any], Callable[[Any], Codec[Any]]]) -> Callable[[C], C]:
    """ Class decorator that attaches a codec to a class, under the `__codec__` attribute.

    The argument can also be a function that takes the class and returns the codec, which is how a codec that needs
    to build instances of the class being decorated is declared:

    >>> from ledgercodec.codecs import U8, struct_codec
    >>> @define_codec(lambda cls: struct_codec(['x', 'y'], {'x': U8, 'y': U8}, factory=cls))
    ... class Point:
    ...     def __init__(self, x, y):
    ...         self.x, self.y = x, y
    >>> get_codec(Point).encode(Point(1, 2)).hex()
    '0102'
    >>> get_codec(Point).decode('0304').y
    4
    """
    def decorator(container: C) -> C:
        resolved = codec if isinstance(codec, Codec) else codec(container)
        setattr(container, CODEC_ATTRIBUTE, resolved)
        return container
    return decorator


def get_codec(container: Any) -> Codec[Any]:
    """ Return the codec attached to `container` with `define_codec`, a codec is returned as it is."""
    if isinstance(container, Codec):
        return container
    codec = getattr(container, CODEC_ATTRIBUTE, None)
    if not isinstance(codec, Codec):
        raise TypeError(f'{container!r} has no codec defined')
    return codec
