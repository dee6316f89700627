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


class SerializationError(Exception):
    """Base class for every error raised by the codec framework."""


class DecodeError(SerializationError, ValueError):
    """The input bytes could not be decoded into a value.

    These errors are deterministic: decoding the same input again will always fail the same way.
    """


class OutOfDataError(DecodeError):
    """Input ended before the value was complete."""


class TrailingDataError(DecodeError):
    """Input has bytes left after the value was fully decoded."""


class BadDataError(DecodeError):
    """Input bytes are malformed for the expected type."""


class NonCanonicalError(BadDataError):
    """A compact integer was not encoded in its shortest form."""


class UnknownDiscriminant(DecodeError):
    """An enum discriminant byte is not part of the schema."""

    def __init__(self, discriminant: int, enum_name: str | None = None) -> None:
        self.discriminant = discriminant
        self.enum_name = enum_name
        where = f' for {enum_name}' if enum_name else ''
        super().__init__(f'unknown discriminant {discriminant}{where}')


class UnknownFlagBits(DecodeError):
    """A bitmask has bits set that are not mapped to any known flag."""

    def __init__(self, bits: int) -> None:
        self.bits = bits
        super().__init__(f'bitmask contains unknown flags: 0b{bits:b}')


class TooLongError(DecodeError):
    """A decoded length prefix is above the configured maximum."""


class InvariantViolation(SerializationError, ValueError):
    """A value breaks an invariant enforced by its wrapper, like a zero given to NonZero."""


class ConfigurationError(SerializationError):
    """The codec settings can't be loaded, for instance when a second, different settings file is requested."""
