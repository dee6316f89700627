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

from pathlib import Path
from typing import Optional

from pydantic import field_validator

from ledgercodec.utils.pydantic import BaseModel


class CodecSettings(BaseModel):
    # Reject compact integers that are not in their shortest encoding. The reference peer rejects them, so turning
    # this off only makes sense for inspecting payloads produced by buggy encoders.
    STRICT_COMPACT_DECODING: bool = True

    # Maximum number of items accepted from the length prefix of a decoded collection (Vec, sorted set, sorted map).
    # Items can take zero bytes (unit types), so a small payload can announce a huge collection. Unset means no limit,
    # which is what the reference peer does; a limit makes decoding reject longer, otherwise valid, encodings.
    MAX_COLLECTION_LENGTH: Optional[int] = None

    @field_validator('MAX_COLLECTION_LENGTH')
    @classmethod
    def _validate_max_collection_length(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError('MAX_COLLECTION_LENGTH must not be negative')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: str, custom_root: Optional[Path] = None) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        from ledgercodec.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(
            cls,
            filepath=filepath,
            custom_root=custom_root or Path(__file__).parent,
        )
