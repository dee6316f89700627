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
This module implements the "compact" variable-length encoding of unsigned integers.

The two least significant bits of the first byte select the mode:

- `0b00`: single byte, the value is the upper six bits, for values below 2**6
- `0b01`: two bytes little-endian, the value is the upper fourteen bits, for values below 2**14
- `0b10`: four bytes little-endian, the value is the upper thirty bits, for values below 2**30
- `0b11`: the upper six bits of the first byte hold `n - 4`, followed by the value in `n` little-endian bytes, with
  `4 <= n <= 67`, so the largest value is 2**536 - 1

The encoder always picks the shortest form:

>>> se = Serializer.build_bytes_serializer()
>>> encode_compact(se, 0)  # writes 00
>>> encode_compact(se, 255)  # writes fd03
>>> encode_compact(se, 65535)  # writes feff0300
>>> encode_compact(se, 2**40)  # writes 0b000000000001
>>> bytes(se.finalize()).hex()
'00fd03feff03000b000000000001'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00fd03feff03000b000000000001'))
>>> decode_compact(de, strict=True)
0
>>> decode_compact(de, strict=True)
255
>>> decode_compact(de, strict=True)
65535
>>> decode_compact(de, strict=True) == 2**40
True
>>> de.finalize()

Any other form is rejected when decoding strictly, here a zero written with two bytes:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0100'))
>>> try:
...     decode_compact(de, strict=True)
... except ValueError as e:
...     print(*e.args)
non-canonical compact encoding of 0 in 2 bytes

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0100'))
>>> decode_compact(de, strict=False)
0
"""

from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.exceptions import NonCanonicalError

SINGLE_BYTE_LIMIT = 1 << 6
TWO_BYTE_LIMIT = 1 << 14
FOUR_BYTE_LIMIT = 1 << 30
MAX_BIG_INT_BYTES = 67
MAX_COMPACT = (1 << (8 * MAX_BIG_INT_BYTES)) - 1


def encode_compact(serializer: Serializer, value: int) -> None:
    """ Encodes an unsigned integer using the shortest compact form.

    This modules's docstring has more details and examples.
    """
    if value < 0:
        raise ValueError('compact integers cannot be negative')
    if value < SINGLE_BYTE_LIMIT:
        serializer.write_byte(value << 2)
    elif value < TWO_BYTE_LIMIT:
        serializer.write_bytes(((value << 2) | 0b01).to_bytes(2, byteorder='little'))
    elif value < FOUR_BYTE_LIMIT:
        serializer.write_bytes(((value << 2) | 0b10).to_bytes(4, byteorder='little'))
    elif value <= MAX_COMPACT:
        n = (value.bit_length() + 7) // 8
        serializer.write_byte(((n - 4) << 2) | 0b11)
        serializer.write_bytes(value.to_bytes(n, byteorder='little'))
    else:
        raise ValueError('too big to encode as compact')


def decode_compact(deserializer: Deserializer, *, strict: bool = True) -> int:
    """ Decodes a compact unsigned integer.

    When `strict` is true a value that is not in its shortest form raises `NonCanonicalError`.
    """
    first = deserializer.read_byte()
    mode = first & 0b11
    if mode == 0b00:
        return first >> 2

    if mode == 0b01:
        size = 2
        value = (first | (deserializer.read_byte() << 8)) >> 2
        canonical = value >= SINGLE_BYTE_LIMIT
    elif mode == 0b10:
        size = 4
        rest = bytes(deserializer.read_bytes(3))
        value = int.from_bytes(bytes([first]) + rest, byteorder='little') >> 2
        canonical = value >= TWO_BYTE_LIMIT
    else:
        n = (first >> 2) + 4
        size = n + 1
        data = bytes(deserializer.read_bytes(n))
        value = int.from_bytes(data, byteorder='little')
        # the top byte must be used, otherwise a smaller n would do
        canonical = value >= FOUR_BYTE_LIMIT and data[-1] != 0

    if strict and not canonical:
        raise NonCanonicalError(f'non-canonical compact encoding of {value} in {size} bytes')
    return value
