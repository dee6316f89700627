import doctest
import importlib

import pytest

DOCTEST_MODULES = [
    'ledgercodec.codecs.bitmap_codec',
    'ledgercodec.codecs.codec',
    'ledgercodec.codecs.collection_codec',
    'ledgercodec.codecs.enum_codec',
    'ledgercodec.codecs.int_enum_codec',
    'ledgercodec.codecs.lazy_codec',
    'ledgercodec.codecs.map_codec',
    'ledgercodec.codecs.non_zero',
    'ledgercodec.codecs.struct_codec',
    'ledgercodec.serialization.compound_encoding.collection',
    'ledgercodec.serialization.compound_encoding.enum',
    'ledgercodec.serialization.compound_encoding.optional',
    'ledgercodec.serialization.compound_encoding.struct',
    'ledgercodec.serialization.compound_encoding.tuple',
    'ledgercodec.serialization.encoding.bool',
    'ledgercodec.serialization.encoding.bytes',
    'ledgercodec.serialization.encoding.compact',
    'ledgercodec.serialization.encoding.int',
    'ledgercodec.serialization.encoding.utf8',
    'ledgercodec.utils.compare',
    'ledgercodec.utils.hex',
    'ledgercodec.utils.yaml',
]


@pytest.mark.parametrize('module_name', DOCTEST_MODULES)
def test_doctests(module_name):
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
