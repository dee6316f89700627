from itertools import permutations

import pytest

from ledgercodec.codecs import COMPACT, NULL, STR, U8, U32, sorted_map_codec, sorted_set_codec, tuple_codec, vec_codec
from ledgercodec.serialization import TooLongError
from ledgercodec.utils.compare import natural_compare


@pytest.mark.parametrize('items', list(permutations(['carol', 'alice', 'bob'])))
def test_set_encoding_ignores_order(items):
    codec = sorted_set_codec(STR)
    assert codec.encode(list(items)) == codec.encode(['alice', 'bob', 'carol'])
    assert codec.decode(codec.encode(list(items))) == ['alice', 'bob', 'carol']


def test_set_encoding_ignores_duplicates():
    codec = sorted_set_codec(U32)
    assert codec.encode([7, 7]) == codec.encode([7])
    assert codec.encode([3, 1, 3, 2, 1]) == codec.encode([1, 2, 3])
    assert codec.encode([1, 2, 3]).hex() == '0c' + '01000000' + '02000000' + '03000000'


def test_set_accepts_any_iterable():
    codec = sorted_set_codec(U8)
    assert codec.encode({2, 1}) == codec.encode((1, 2)) == codec.encode(iter([2, 1, 2]))


def test_set_builder():
    codec = sorted_set_codec(U8, builder=frozenset)
    assert codec.decode('080102') == frozenset({1, 2})


def test_set_custom_comparator():
    def by_length(a: str, b: str) -> int:
        return natural_compare(len(a), len(b))

    codec = sorted_set_codec(STR, by_length)
    # 'bb' and 'cc' are equal under the comparator, the last one given is kept
    assert codec.decode(codec.encode(['ccc', 'bb', 'a', 'cc'])) == ['a', 'cc', 'ccc']


def test_set_dedup_keeps_last_occurrence():
    codec = sorted_set_codec(tuple_codec([U8, STR]), lambda a, b: natural_compare(a[0], b[0]))
    decoded = codec.decode(codec.encode([(1, 'first'), (0, 'zero'), (1, 'second')]))
    assert decoded == [(0, 'zero'), (1, 'second')]


def test_set_rejects_mixed_types():
    codec = sorted_set_codec(U8)
    with pytest.raises(TypeError):
        codec.encode([1, 'a'])


def test_decoding_does_not_normalize():
    codec = sorted_set_codec(U8)
    assert codec.decode('0c030103') == [3, 1, 3]


def test_map_later_keys_win():
    codec = sorted_map_codec(STR, U8)
    map1 = {'a': 5, 'b': 3, 'c': 2}
    map2 = [('c', 2), ('a', 2), ('a', 5), ('b', 3)]
    assert codec.encode(map1) == codec.encode(map2)
    assert codec.encode(map1).hex() == '0c' + '046105' + '046203' + '046302'
    assert codec.decode(codec.encode(map2)) == map1


@pytest.mark.parametrize('pairs', list(permutations([(3, 'c'), (1, 'a'), (2, 'b')])))
def test_map_encoding_ignores_order(pairs):
    codec = sorted_map_codec(U8, STR)
    assert codec.encode(list(pairs)) == codec.encode({1: 'a', 2: 'b', 3: 'c'})


def test_map_keys_only_are_compared():
    codec = sorted_map_codec(U8, STR)
    assert codec.encode([(1, 'b'), (1, 'a')]) == codec.encode({1: 'a'})


def test_map_builder_and_comparator():
    reverse = sorted_map_codec(U8, U8, lambda a, b: natural_compare(b, a), builder=list)
    assert reverse.encode({1: 10, 2: 20}).hex() == '08' + '0214' + '010a'
    assert reverse.decode('08' + '0214' + '010a') == [(2, 20), (1, 10)]


def test_map_rejects_bad_input():
    codec = sorted_map_codec(STR, U8)
    with pytest.raises(TypeError):
        codec.encode('abc')
    with pytest.raises(ValueError):
        codec.encode([('a', 1, 2)])
    with pytest.raises(ValueError):
        codec.encode({'a': 256})


def test_collection_length_limit():
    # unittests.yml allows 4096 items per collection
    codec = vec_codec(NULL)
    assert codec.decode(COMPACT.encode(4096)) == [None] * 4096
    with pytest.raises(TooLongError):
        codec.decode(COMPACT.encode(4097))
    with pytest.raises(TooLongError):
        sorted_set_codec(U8).decode(COMPACT.encode(2**32))
