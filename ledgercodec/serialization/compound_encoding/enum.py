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
A tagged union is encoded as a single discriminant byte followed by the payload of the variant, when it has one.

Layout: [discriminant: u8][payload]

>>> from ledgercodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_enum(se, 1, 'foo', encode_utf8)
>>> encode_enum(se, 0, None, None)
>>> bytes(se.finalize()).hex()
'010c666f6f00'

>>> decoders = {0: None, 1: decode_utf8}
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010c666f6f00'))
>>> decode_enum(de, decoders)
(1, 'foo')
>>> decode_enum(de, decoders)
(0, None)

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('07'))
>>> try:
...     decode_enum(de, decoders, enum_name='Example')
... except ValueError as e:
...     print(*e.args)
unknown discriminant 7 for Example
"""

from collections.abc import Mapping
from typing import Any, Optional

from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.exceptions import UnknownDiscriminant

from . import Decoder, Encoder


def encode_enum(serializer: Serializer, discriminant: int, payload: Any, encoder: Optional[Encoder[Any]]) -> None:
    serializer.write_byte(discriminant)
    if encoder is not None:
        encoder(serializer, payload)


def decode_enum(
    deserializer: Deserializer,
    decoders: Mapping[int, Optional[Decoder[Any]]],
    *,
    enum_name: Optional[str] = None,
) -> tuple[int, Any]:
    """ Decodes the discriminant and the payload that it selects.

    Variants without payload map to a `None` decoder and decode to `(discriminant, None)`.
    """
    discriminant = deserializer.read_byte()
    if discriminant not in decoders:
        raise UnknownDiscriminant(discriminant, enum_name)
    decoder = decoders[discriminant]
    payload = decoder(deserializer) if decoder is not None else None
    return discriminant, payload
