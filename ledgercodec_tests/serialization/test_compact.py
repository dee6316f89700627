import pytest

from ledgercodec.conf.settings import CodecSettings
from ledgercodec.serialization import Deserializer, NonCanonicalError, OutOfDataError, Serializer


def _encode(n: int) -> bytes:
    from ledgercodec.serialization.encoding.compact import encode_compact
    se = Serializer.build_bytes_serializer()
    encode_compact(se, n)
    return bytes(se.finalize())


def _decode(data: bytes, *, strict: bool = True) -> int:
    from ledgercodec.serialization.encoding.compact import decode_compact
    de = Deserializer.build_bytes_deserializer(data)
    n = decode_compact(de, strict=strict)
    de.finalize()
    return n


def _do_round_trip_test_with_size(n: int, encoded_size: int) -> None:
    encoded_n = _encode(n)
    assert len(encoded_n) == encoded_size
    assert _decode(encoded_n) == n


KNOWN_VECTORS = [
    (0, '00'),
    (1, '04'),
    (42, 'a8'),
    (63, 'fc'),
    (64, '0101'),
    (255, 'fd03'),
    (16383, 'fdff'),
    (16384, '02000100'),
    (65535, 'feff0300'),
    (2**30 - 1, 'feffffff'),
    (2**30, '0300000040'),
    (2**32 - 1, '03ffffffff'),
    (2**32, '070000000001'),
    (2**40, '0b000000000001'),
    (2**536 - 1, 'ff' * 68),
]


@pytest.mark.parametrize('n, expected_hex', KNOWN_VECTORS)
def test_known_vectors(n, expected_hex):
    assert _encode(n).hex() == expected_hex
    assert _decode(bytes.fromhex(expected_hex)) == n


def gen_size_test_cases():
    test_cases = []
    for n in (0, 1, 63):
        test_cases.append((n, 1))
    for n in (64, 1000, 2**14 - 1):
        test_cases.append((n, 2))
    for n in (2**14, 100000, 2**30 - 1):
        test_cases.append((n, 4))
    # big-integer mode, one prefix byte plus the minimal number of bytes
    for size in range(4, 68):
        n_lo = max(1 << (8 * (size - 1)), 2**30)
        n_hi = (1 << (8 * size)) - 1
        test_cases.append((n_lo, size + 1))
        test_cases.append((n_hi, size + 1))
    return test_cases


@pytest.mark.parametrize('n, encoded_size', gen_size_test_cases())
def test_round_trip_with_size(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size)


def test_encode_out_of_range():
    with pytest.raises(ValueError):
        _encode(-1)
    with pytest.raises(ValueError):
        _encode(2**536)


NON_CANONICAL = [
    ('0100', 0),
    ('fd00', 63),
    ('02000000', 0),
    ('02010000', 64),
    ('03ffffff3f', 2**30 - 1),
    ('070000004000', 2**30),
]


@pytest.mark.parametrize('data_hex, value', NON_CANONICAL)
def test_non_canonical_rejected_when_strict(data_hex, value):
    with pytest.raises(NonCanonicalError):
        _decode(bytes.fromhex(data_hex), strict=True)


@pytest.mark.parametrize('data_hex, value', NON_CANONICAL)
def test_non_canonical_accepted_when_lenient(data_hex, value):
    assert _decode(bytes.fromhex(data_hex), strict=False) == value


def test_codec_strictness_comes_from_settings(monkeypatch):
    from ledgercodec.codecs import CompactCodec, compact_codec

    assert CompactCodec().strict is True
    with pytest.raises(NonCanonicalError):
        CompactCodec().decode('0100')

    monkeypatch.setattr(compact_codec, 'get_global_settings', lambda: CodecSettings(STRICT_COMPACT_DECODING=False))
    lenient = CompactCodec()
    strict = CompactCodec(strict=True)
    monkeypatch.undo()

    # the setting is read when the codec is built, not when decoding
    assert lenient.strict is False
    assert lenient.decode('0100') == 0
    with pytest.raises(NonCanonicalError):
        strict.decode('0100')


@pytest.mark.parametrize('data_hex', ['', '01', '020000', '03000000', 'ff'])
def test_truncated(data_hex):
    with pytest.raises(OutOfDataError):
        _decode(bytes.fromhex(data_hex))
