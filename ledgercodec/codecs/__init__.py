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

from ledgercodec.codecs.bitmap_codec import BitmapCodec, bitmap_codec
from ledgercodec.codecs.bool_codec import BOOL, BoolCodec
from ledgercodec.codecs.bytes_codec import BYTES_VEC, BytesCodec, FixedBytesCodec, fixed_bytes_codec
from ledgercodec.codecs.codec import Codec, define_codec, get_codec
from ledgercodec.codecs.collection_codec import VecCodec, sorted_set_codec, vec_codec
from ledgercodec.codecs.compact_codec import COMPACT, CompactCodec
from ledgercodec.codecs.enum_codec import (
    EnumCodec,
    EnumSchema,
    EnumVariantSpec,
    LiteralUnionCodec,
    Variant,
    enum_codec,
    literal_union_codec,
)
from ledgercodec.codecs.int_enum_codec import IntEnumCodec
from ledgercodec.codecs.lazy_codec import LazyCodec, lazy_codec
from ledgercodec.codecs.map_codec import MapEntry, sorted_map_codec
from ledgercodec.codecs.non_zero import NonZero
from ledgercodec.codecs.null_codec import NEVER, NULL, NeverCodec, NullCodec
from ledgercodec.codecs.option_codec import OptionCodec, option_codec
from ledgercodec.codecs.sized_int_codec import I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, SizedIntCodec
from ledgercodec.codecs.str_codec import STR, StrCodec
from ledgercodec.codecs.struct_codec import StructCodec, struct_codec
from ledgercodec.codecs.tuple_codec import TupleCodec, tuple_codec
from ledgercodec.codecs.wrapped_codec import WrappedCodec

__all__ = [
    'BOOL',
    'BYTES_VEC',
    'COMPACT',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'NEVER',
    'NULL',
    'STR',
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
    'BitmapCodec',
    'BoolCodec',
    'BytesCodec',
    'Codec',
    'CompactCodec',
    'EnumCodec',
    'EnumSchema',
    'EnumVariantSpec',
    'FixedBytesCodec',
    'IntEnumCodec',
    'LazyCodec',
    'LiteralUnionCodec',
    'MapEntry',
    'NeverCodec',
    'NonZero',
    'NullCodec',
    'OptionCodec',
    'SizedIntCodec',
    'StrCodec',
    'StructCodec',
    'TupleCodec',
    'Variant',
    'VecCodec',
    'WrappedCodec',
    'bitmap_codec',
    'define_codec',
    'enum_codec',
    'fixed_bytes_codec',
    'get_codec',
    'lazy_codec',
    'literal_union_codec',
    'option_codec',
    'sorted_map_codec',
    'sorted_set_codec',
    'struct_codec',
    'tuple_codec',
    'vec_codec',
]
