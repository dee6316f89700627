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

from typing import Any, NoReturn

from typing_extensions import override

from ledgercodec.codecs.codec import Codec
from ledgercodec.serialization import Deserializer, Serializer
from ledgercodec.serialization.exceptions import BadDataError


class NullCodec(Codec[None]):
    """ Codec of the unit value `None`, it takes no bytes on the wire.
    """

    __slots__ = ()

    @override
    def _check_value(self, value: None, /, *, deep: bool) -> None:
        if value is not None:
            raise TypeError('expected None')

    @override
    def _serialize(self, serializer: Serializer, value: None, /) -> None:
        pass

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> None:
        return None


class NeverCodec(Codec[NoReturn]):
    """ Codec of a type with no values, any attempt to use it fails.
    """

    __slots__ = ()

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        raise TypeError('no value can be encoded as never')

    @override
    def _serialize(self, serializer: Serializer, value: Any, /) -> None:
        raise TypeError('no value can be encoded as never')

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> NoReturn:
        raise BadDataError('no value can be decoded as never')


NULL = NullCodec()
NEVER = NeverCodec()
