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
A struct is a tuple whose members have names: the fields are concatenated in the given order, with no prefix and no
field names on the wire.

>>> from ledgercodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from ledgercodec.serialization.encoding.bool import encode_bool, decode_bool
>>> se = Serializer.build_bytes_serializer()
>>> encode_struct(se, {'admin': True, 'name': 'foo'}, [('name', encode_utf8), ('admin', encode_bool)])
>>> bytes(se.finalize()).hex()
'0c666f6f01'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0c666f6f01'))
>>> decode_struct(de, [('name', decode_utf8), ('admin', decode_bool)])
{'name': 'foo', 'admin': True}
"""

from collections.abc import Mapping, Sequence
from typing import Any

from ledgercodec.serialization import Deserializer, Serializer

from . import Decoder, Encoder


def encode_struct(
    serializer: Serializer,
    values: Mapping[str, Any],
    fields: Sequence[tuple[str, Encoder[Any]]],
) -> None:
    for name, encoder in fields:
        encoder(serializer, values[name])


def decode_struct(deserializer: Deserializer, fields: Sequence[tuple[str, Decoder[Any]]]) -> dict[str, Any]:
    return {name: decoder(deserializer) for name, decoder in fields}
