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

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError, TrailingDataError
from .types import Buffer


class BytesDeserializer(Deserializer):
    """Deserializer over an in-memory byte sequence.

    Reads return slices of a memoryview of the input, so they never copy, and the position is a plain offset.
    """

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data)
        self._pos = 0

    def remaining(self) -> int:
        return len(self._view) - self._pos

    def _take(self, n: int, *, exact: bool, consume: bool) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        available = self.remaining()
        if exact and available < n:
            raise OutOfDataError(f'not enough bytes to read: wanted {n}, have {available}')
        end = self._pos + min(n, available)
        chunk = self._view[self._pos:end]
        if consume:
            self._pos = end
        return chunk

    @override
    def finalize(self) -> None:
        left = self.remaining()
        if left:
            raise TrailingDataError(f'trailing data: {left} bytes left')
        del self._view

    @override
    def is_empty(self) -> bool:
        return self.remaining() == 0

    @override
    def peek_byte(self) -> int:
        return self._take(1, exact=True, consume=False)[0]

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        return self._take(n, exact=exact, consume=False)

    @override
    def read_byte(self) -> int:
        return self._take(1, exact=True, consume=True)[0]

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        return self._take(n, exact=exact, consume=True)

    @override
    def read_all(self) -> memoryview:
        return self._take(self.remaining(), exact=True, consume=True)
