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
A collection is any value that has a known size and is iterable.

Layout: [N: compact][value_0]...[value_N-1]

>>> from ledgercodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, ['foo', 'π'], encode_utf8)
>>> bytes(se.finalize()).hex()
'080c666f6f08cf80'

Breakdown of the result:

    08: 2 as a compact integer, the total length
    0c666f6f: 'foo' with length prefix
    08cf80: 'π' with length prefix

The builder can be any collection that can be initialized with an `Iterable[T]`:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('080c666f6f08cf80'))
>>> decode_collection(de, decode_utf8, tuple)
('foo', 'π')
>>> de.finalize()

The announced length is checked against a maximum before any item is decoded:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0c'))
>>> try:
...     decode_collection(de, decode_utf8, list, max_length=2)
... except ValueError as e:
...     print(*e.args)
collection length 3 is above the maximum of 2
"""

from collections.abc import Collection, Iterable
from typing import Callable, Optional, TypeVar

from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.encoding.compact import decode_compact, encode_compact
from ledgercodec.serialization.exceptions import TooLongError

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R')


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_compact(serializer, len(values))
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    max_length: Optional[int] = None,
    strict: bool = True,
) -> R:
    """ Decodes a length-prefixed collection.

    A `max_length` of `None` accepts any length, `strict` applies to the compact length prefix.
    """
    length = decode_compact(deserializer, strict=strict)
    if max_length is not None and length > max_length:
        raise TooLongError(f'collection length {length} is above the maximum of {max_length}')
    return builder(decoder(deserializer) for _ in range(length))
