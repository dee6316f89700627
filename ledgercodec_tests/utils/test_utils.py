import pytest

from ledgercodec.serialization import BadDataError
from ledgercodec.utils.compare import natural_compare, to_sorted_set
from ledgercodec.utils.hex import parse_hex, to_hex
from ledgercodec.utils.yaml import merge_dicts


@pytest.mark.parametrize('text, expected', [
    ('', b''),
    ('0x', b''),
    ('00', b'\x00'),
    ('0xff', b'\xff'),
    ('DEAD beef', b'\xde\xad\xbe\xef'),
    ('  0x01\n02\t', b'\x01\x02'),
])
def test_parse_hex(text, expected):
    assert parse_hex(text) == expected


@pytest.mark.parametrize('text', ['0', 'xyz', '0x0g', '0xx00'])
def test_parse_bad_hex(text):
    with pytest.raises(BadDataError):
        parse_hex(text)


def test_to_hex():
    assert to_hex(b'\x01\xab') == '01ab'
    assert to_hex(b'\x01\xab', sep=':') == '01:ab'
    assert to_hex(memoryview(b'\x00')) == '00'


def test_natural_compare():
    assert natural_compare(1, 2) < 0
    assert natural_compare(2, 1) > 0
    assert natural_compare(b'a', b'a') == 0
    assert natural_compare('b', 'a') == 1


def test_to_sorted_set():
    assert to_sorted_set([], natural_compare) == []
    assert to_sorted_set([2, 2, 2], natural_compare) == [2]
    assert to_sorted_set(iter([5, 3, 4]), natural_compare) == [3, 4, 5]


def test_to_sorted_set_keeps_last_of_equal_run():
    pairs = [('k', 1), ('j', 0), ('k', 2), ('k', 3)]
    result = to_sorted_set(pairs, lambda a, b: natural_compare(a[0], b[0]))
    assert result == [('j', 0), ('k', 3)]


def test_merge_dicts():
    base = {'a': 1, 'nested': {'x': 1, 'y': 2}}
    override = {'nested': {'y': 3}, 'b': 2}
    assert merge_dicts(base, override) == {'a': 1, 'b': 2, 'nested': {'x': 1, 'y': 3}}
    # inputs are left untouched
    assert base == {'a': 1, 'nested': {'x': 1, 'y': 2}}
    assert merge_dicts({'a': {'x': 1}}, {'a': 2}) == {'a': 2}
