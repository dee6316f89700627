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
Helpers for the hex form accepted by `Codec.decode`.

>>> parse_hex('0x0b00 0000 0001')
b'\x0b\x00\x00\x00\x00\x01'
>>> to_hex(b'\x0b\x00\x01', sep=' ')
'0b 00 01'
"""

import re

from ledgercodec.serialization.exceptions import BadDataError

_WHITESPACE_RE = re.compile(r'\s+')


def parse_hex(text: str) -> bytes:
    """Parse a hex string, an optional `0x` prefix and any whitespace are ignored.

    Raises `BadDataError` when what remains is not an even-length run of hex digits.
    """
    cleaned = _WHITESPACE_RE.sub('', text)
    if cleaned[:2] in ('0x', '0X'):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise BadDataError(f'invalid hex string: {text!r}') from e


def to_hex(data: bytes, sep: str = '') -> str:
    if not sep:
        return bytes(data).hex()
    return bytes(data).hex(sep)
