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
Byte sequences are prefixed with their length as a compact integer.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # prepends 10, the compact form of 4
>>> bytes(se.finalize()).hex()
'1074657374'

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test' * 16)  # 64 bytes no longer fit the single byte mode, prepends 0101
>>> bytes(se.finalize())[:6].hex()
'010174657374'

>>> de = Deserializer.build_bytes_deserializer(b'\x10testfoo')
>>> decode_bytes(de)
b'test'
>>> bytes(de.read_all())
b'foo'

>>> de = Deserializer.build_bytes_deserializer(b'\x10tes')
>>> try:
...     decode_bytes(de)
... except ValueError as e:
...     print(*e.args)
not enough bytes to read: wanted 4, have 3
"""

from ledgercodec.serialization import Buffer, Deserializer, Serializer

from .compact import decode_compact, encode_compact


def encode_bytes(serializer: Serializer, data: Buffer) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    The prefix counts bytes, so buffers with wider items (a memoryview of an `array('I')` for instance) are written
    byte by byte. This modules's docstring has more details and examples.
    """
    assert isinstance(data, (bytes, bytearray, memoryview))
    view = memoryview(data).cast('B')
    encode_compact(serializer, view.nbytes)
    serializer.write_bytes(view)


def decode_bytes(deserializer: Deserializer, *, strict: bool = True) -> bytes:
    size = decode_compact(deserializer, strict=strict)
    return bytes(deserializer.read_bytes(size))
