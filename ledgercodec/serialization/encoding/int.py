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

"""
Fixed-size integers, the width and signedness are parametrized.

The wire format is little-endian two's complement, with no padding or prefix.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 1, length=2, signed=False)  # writes 0100
>>> encode_int(se, 1234, length=4, signed=False)  # writes d2040000
>>> encode_int(se, -2, length=1, signed=True)  # writes fe
>>> bytes(se.finalize()).hex()
'0100d2040000fe'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0100d2040000fe'))
>>> decode_int(de, length=2, signed=False)
1
>>> decode_int(de, length=4, signed=False)
1234
>>> decode_int(de, length=1, signed=True)
-2
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_int(se, 256, length=1, signed=False)
... except ValueError as e:
...     print(*e.args)
256 does not fit in 1 unsigned byte(s)
"""

from ledgercodec.serialization import Deserializer, Serializer


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='little', signed=signed)
    except OverflowError:
        kind = 'signed' if signed else 'unsigned'
        raise ValueError(f'{number} does not fit in {length} {kind} byte(s)')
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='little', signed=signed)
