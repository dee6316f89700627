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
Only fixed-length heterogeneous tuples (`tuple[A, B, C]`) are handled here, homogeneous sequences use the collection
encoder.

There is no prefix, the encoding of `(a, b, c)` is the encoding of `a` followed by `b` followed by `c`.

>>> from ledgercodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from ledgercodec.serialization.encoding.bool import encode_bool, decode_bool
>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, ('foo', True), (encode_utf8, encode_bool))
>>> bytes(se.finalize()).hex()
'0c666f6f01'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0c666f6f01'))
>>> decode_tuple(de, (decode_utf8, decode_bool))
('foo', True)
"""

from typing import Any

from typing_extensions import TypeVarTuple, Unpack

from ledgercodec.serialization import Deserializer, Serializer

from . import Decoder, Encoder

Ts = TypeVarTuple('Ts')


def encode_tuple(serializer: Serializer, values: tuple[Unpack[Ts]], encoders: tuple[Encoder[Any], ...]) -> None:
    if len(values) != len(encoders):
        raise ValueError(f'expected a tuple of {len(encoders)} items, got {len(values)}')
    for value, encoder in zip(values, encoders):
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...]) -> tuple[Unpack[Ts]]:
    return tuple(decoder(deserializer) for decoder in decoders)
