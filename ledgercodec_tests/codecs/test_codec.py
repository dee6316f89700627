from array import array
from dataclasses import dataclass
from datetime import date

import pytest

from ledgercodec.codecs import (
    BOOL,
    BYTES_VEC,
    COMPACT,
    NEVER,
    NULL,
    STR,
    U8,
    U16,
    U32,
    U128,
    Codec,
    define_codec,
    fixed_bytes_codec,
    get_codec,
    option_codec,
    struct_codec,
    tuple_codec,
    vec_codec,
)
from ledgercodec.serialization import BadDataError, DecodeError, OutOfDataError, TrailingDataError
from ledgercodec_tests import unittest


@dataclass(frozen=True)
class Asset:
    name: str
    amount: int
    frozen: bool


ASSET = struct_codec(
    ['name', 'amount', 'frozen'],
    {'amount': U128, 'frozen': BOOL, 'name': STR},
    factory=Asset,
)


class CodecTestCase(unittest.TestCase):
    def test_scalars(self) -> None:
        self.assertRoundTrip(U8, 7, '07')
        self.assertRoundTrip(U16, 258, '0201')
        self.assertRoundTrip(BOOL, True, '01')
        self.assertRoundTrip(BOOL, False, '00')
        self.assertRoundTrip(STR, '', '00')
        self.assertRoundTrip(STR, 'hathor', '18686174686f72')
        self.assertRoundTrip(STR, 'áéíóúçãõ')
        self.assertRoundTrip(BYTES_VEC, b'\x01\x02', '080102')
        self.assertRoundTrip(COMPACT, 2**40, '0b000000000001')
        self.assertRoundTrip(NULL, None, '')

    def test_fixed_bytes(self) -> None:
        hash_codec = fixed_bytes_codec(4)
        self.assertRoundTrip(hash_codec, b'\xde\xad\xbe\xef', 'deadbeef')
        with self.assertRaises(ValueError):
            hash_codec.encode(b'\x00')
        with self.assertRaises(OutOfDataError):
            hash_codec.decode('dead')

    def test_bytes_accepts_bytes_like(self) -> None:
        self.assertEqual(BYTES_VEC.encode(bytearray(b'ab')), BYTES_VEC.encode(b'ab'))
        self.assertEqual(BYTES_VEC.encode(memoryview(b'ab')), BYTES_VEC.encode(b'ab'))
        self.assertIsInstance(BYTES_VEC.decode('086162'), bytes)

    def test_struct_from_dataclass(self) -> None:
        asset = Asset(name='rose', amount=10**20, frozen=False)
        data = self.assertRoundTrip(ASSET, asset)
        # name, then amount, then frozen: the order of the field mapping doesn't matter
        self.assertEqual(data[:5], b'\x10rose')
        self.assertEqual(data[-1], 0)
        self.assertEqual(len(data), 5 + 16 + 1)

    def test_struct_from_mapping(self) -> None:
        codec = struct_codec(['b', 'a'], {'a': U8, 'b': U8})
        self.assertEqual(codec.encode({'a': 1, 'b': 2}).hex(), '0201')
        self.assertEqual(codec.decode('0201'), {'b': 2, 'a': 1})

    def test_struct_field_order_must_match(self) -> None:
        with self.assertRaises(ValueError):
            struct_codec(['a'], {'a': U8, 'b': U8})
        with self.assertRaises(ValueError):
            struct_codec(['a', 'b', 'c'], {'a': U8, 'b': U8})
        with self.assertRaises(ValueError):
            struct_codec(['a', 'a'], {'a': U8})
        with self.assertRaises(TypeError):
            struct_codec('ab', {'a': U8, 'b': U8})

    def test_struct_missing_field(self) -> None:
        codec = struct_codec(['a', 'b'], {'a': U8, 'b': U8})
        with self.assertRaises(TypeError):
            codec.encode({'a': 1})
        with self.assertRaises(TypeError):
            codec.encode(object())

    def test_tuple(self) -> None:
        codec = tuple_codec([STR, U32, option_codec(BOOL)])
        self.assertRoundTrip(codec, ('x', 1, None), '047801000000' + '00')
        self.assertRoundTrip(codec, ('x', 1, True), '047801000000' + '0101')
        self.assertEqual(codec.encode(['x', 1, None]), codec.encode(('x', 1, None)))
        with self.assertRaises(ValueError):
            codec.encode(('x', 1))
        with self.assertRaises(TypeError):
            codec.encode('abc')

    def test_option(self) -> None:
        codec = option_codec(U16)
        self.assertRoundTrip(codec, None, '00')
        self.assertRoundTrip(codec, 0, '010000')
        with self.assertRaises(BadDataError):
            codec.decode('020000')

    def test_vec_keeps_order(self) -> None:
        codec = vec_codec(U8)
        self.assertRoundTrip(codec, [3, 1, 2], '0c030102')
        self.assertRoundTrip(codec, [], '00')
        self.assertEqual(vec_codec(U8, builder=tuple).decode('0c030102'), (3, 1, 2))

    def test_wrap(self) -> None:
        day = U32.wrap(to_base=date.toordinal, from_base=date.fromordinal)
        self.assertRoundTrip(day, date(2024, 2, 29))
        self.assertEqual(day.encode(date(1, 1, 1)).hex(), '01000000')

    def test_wrap_propagates_conversion_errors(self) -> None:
        names = {'alice': 1}
        codec = U8.wrap(to_base=lambda name: names[name], from_base=lambda i: {1: 'alice'}[i])
        with self.assertRaises(KeyError):
            codec.encode('bob')
        with self.assertRaises(KeyError):
            codec.decode('02')

    def test_check_value_is_deep(self) -> None:
        codec = vec_codec(tuple_codec([U8, STR]))
        codec.check_value([(1, 'a')])
        with self.assertRaises(ValueError):
            codec.check_value([(1, 'a'), (256, 'b')])
        with self.assertRaises(TypeError):
            codec.check_value([(1, 2)])

    def test_encode_failure_returns_nothing(self) -> None:
        codec = tuple_codec([U8, U8])
        with self.assertRaises(ValueError):
            codec.encode((1, 300))

    def test_never(self) -> None:
        with self.assertRaises(TypeError):
            NEVER.encode(None)
        with self.assertRaises(BadDataError):
            NEVER.decode(b'')
        # an option of never can only be absent
        self.assertRoundTrip(option_codec(NEVER), None, '00')

    def test_null(self) -> None:
        with self.assertRaises(TypeError):
            NULL.encode(0)
        with self.assertRaises(TrailingDataError):
            NULL.decode('00')


def test_decode_hex_forms():
    assert U32.decode('0x01000000') == 1
    assert U32.decode('0X01000000') == 1
    assert U32.decode('01 00\n00 00') == 1
    assert U32.decode(bytearray(b'\x01\x00\x00\x00')) == 1
    assert U32.decode(memoryview(b'\x01\x00\x00\x00')) == 1


@pytest.mark.parametrize('data', ['0x0', 'zz', '010', 'g1'])
def test_decode_bad_hex(data):
    with pytest.raises(BadDataError):
        U8.decode(data)


@pytest.mark.parametrize('codec, data', [
    (U32, '010203'),
    (STR, '0c6162'),
    (BOOL, ''),
    (vec_codec(U16), '080100'),
    (option_codec(U8), '01'),
])
def test_decode_truncated(codec, data):
    with pytest.raises(OutOfDataError):
        codec.decode(data)


@pytest.mark.parametrize('codec, data', [
    (U8, '0102'),
    (BOOL, '0000'),
    (STR, '0461ff'),
    (option_codec(U8), '0000'),
])
def test_decode_trailing(codec, data):
    with pytest.raises(TrailingDataError):
        codec.decode(data)


@pytest.mark.parametrize('codec, data', [
    (BOOL, '02'),
    (STR, '04ff'),
    (option_codec(U8), '0700'),
])
def test_decode_malformed(codec, data):
    with pytest.raises(BadDataError):
        codec.decode(data)


def test_decode_errors_are_value_errors():
    with pytest.raises(ValueError):
        U8.decode('')
    with pytest.raises(DecodeError):
        U8.decode('0000')


def test_decode_rejects_other_types():
    with pytest.raises(TypeError):
        U8.decode(7)


def test_define_and_get_codec():
    @define_codec(lambda cls: struct_codec(['x', 'y'], {'x': U8, 'y': U8}, factory=cls))
    @dataclass
    class Point:
        x: int
        y: int

    codec = get_codec(Point)
    assert isinstance(codec, Codec)
    assert codec.encode(Point(1, 2)).hex() == '0102'
    assert codec.decode('0102') == Point(1, 2)
    # instances find the codec through their class
    assert get_codec(Point(0, 0)) is codec
    # codecs are returned as they are
    assert get_codec(U8) is U8


def test_define_codec_with_codec_instance():
    @define_codec(U8.wrap(to_base=lambda level: level.value, from_base=lambda value: Level(value)))
    class Level:
        def __init__(self, value: int) -> None:
            self.value = value

    assert get_codec(Level).encode(Level(3)) == b'\x03'
    assert get_codec(Level).decode('05').value == 5


def test_get_codec_without_codec():
    with pytest.raises(TypeError):
        get_codec(object())


def test_bytes_prefix_counts_bytes_of_wide_buffers():
    data = memoryview(array('I', [1, 2]))
    raw = data.tobytes()
    assert len(raw) == 8
    encoded = BYTES_VEC.encode(data)
    assert encoded == b'\x20' + raw
    assert BYTES_VEC.decode(encoded) == raw
    assert fixed_bytes_codec(8).encode(data) == raw
    with pytest.raises(ValueError):
        fixed_bytes_codec(2).encode(data)
