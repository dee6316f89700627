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
Strings are the length-prefixed byte encoding of their UTF-8 form.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 18666f6f626172
>>> encode_utf8(se, 'π')  # writes 08cf80
>>> bytes(se.finalize()).hex()
'18666f6f62617208cf80'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('18666f6f62617208cf80'))
>>> decode_utf8(de)
'foobar'
>>> decode_utf8(de)
'π'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('04ff'))
>>> try:
...     decode_utf8(de)
... except ValueError as e:
...     print(*e.args)
invalid utf-8 string
"""

from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.exceptions import BadDataError

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str) -> None:
    assert isinstance(value, str)
    encode_bytes(serializer, value.encode('utf-8'))


def decode_utf8(deserializer: Deserializer, *, strict: bool = True) -> str:
    data = decode_bytes(deserializer, strict=strict)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise BadDataError('invalid utf-8 string') from e
