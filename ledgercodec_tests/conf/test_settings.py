import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from ledgercodec.codecs import U8, VecCodec, vec_codec
from ledgercodec.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH
from ledgercodec.conf.get_settings import (
    CONFIG_YAML_ENV_VAR,
    _load_settings_singleton,
    _reset_settings_singleton,
    get_global_settings,
    get_settings_source,
)
from ledgercodec.conf.settings import CodecSettings
from ledgercodec.serialization import ConfigurationError, SerializationError, TooLongError


def test_global_settings_come_from_env_var():
    settings = get_global_settings()
    assert get_settings_source() == os.environ[CONFIG_YAML_ENV_VAR]
    assert get_global_settings() is settings


def test_unittests_settings():
    settings = CodecSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
    assert settings.STRICT_COMPACT_DECODING is True
    assert settings.MAX_COLLECTION_LENGTH == 4096


def test_default_settings():
    settings = CodecSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH)
    assert settings == CodecSettings()
    assert settings.MAX_COLLECTION_LENGTH is None


def test_loading_a_different_source_fails():
    get_global_settings()
    with pytest.raises(ConfigurationError, match='loading config twice with a different file'):
        _load_settings_singleton(DEFAULT_SETTINGS_FILEPATH + '.other')


def test_extends(tmp_path: Path) -> None:
    (tmp_path / 'base.yml').write_text('STRICT_COMPACT_DECODING: false\nMAX_COLLECTION_LENGTH: 10\n')
    (tmp_path / 'child.yml').write_text('extends: base.yml\nMAX_COLLECTION_LENGTH: 20\n')
    settings = CodecSettings.from_yaml(filepath=str(tmp_path / 'child.yml'))
    assert settings.STRICT_COMPACT_DECODING is False
    assert settings.MAX_COLLECTION_LENGTH == 20


def test_extends_packaged_file(tmp_path: Path) -> None:
    # names not found next to the file are looked up among the packaged settings
    (tmp_path / 'custom.yml').write_text('extends: default.yml\nSTRICT_COMPACT_DECODING: false\n')
    settings = CodecSettings.from_yaml(filepath=str(tmp_path / 'custom.yml'))
    assert settings.STRICT_COMPACT_DECODING is False
    assert settings.MAX_COLLECTION_LENGTH is None


def test_empty_file(tmp_path: Path) -> None:
    (tmp_path / 'empty.yml').write_text('')
    assert CodecSettings.from_yaml(filepath=str(tmp_path / 'empty.yml')) == CodecSettings()


def test_unknown_key(tmp_path: Path) -> None:
    (tmp_path / 'bad.yml').write_text('MAX_LENGTH: 10\n')
    with pytest.raises(ValidationError):
        CodecSettings.from_yaml(filepath=str(tmp_path / 'bad.yml'))


def test_negative_length() -> None:
    with pytest.raises(ValidationError):
        CodecSettings(MAX_COLLECTION_LENGTH=-1)


def test_not_a_mapping(tmp_path: Path) -> None:
    (tmp_path / 'list.yml').write_text('- 1\n- 2\n')
    with pytest.raises(ValueError):
        CodecSettings.from_yaml(filepath=str(tmp_path / 'list.yml'))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        CodecSettings.from_yaml(filepath=str(tmp_path / 'missing.yml'))


def test_settings_are_frozen() -> None:
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.MAX_COLLECTION_LENGTH = 1  # type: ignore[misc]


def test_codecs_read_settings_when_built(monkeypatch, tmp_path: Path) -> None:
    codec = vec_codec(U8)
    assert codec.max_length == 4096
    assert codec.decode('00') == []

    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(tmp_path / 'other.yml'))
    # decoding never goes back to the settings
    assert codec.decode('0401') == [1]
    with pytest.raises(ConfigurationError) as exc_info:
        vec_codec(U8)
    assert isinstance(exc_info.value, SerializationError)


def test_no_collection_limit_by_default(monkeypatch) -> None:
    from ledgercodec.codecs import collection_codec

    monkeypatch.setattr(collection_codec, 'get_global_settings', lambda: CodecSettings())
    codec = vec_codec(U8)
    assert codec.max_length is None
    data = bytes.fromhex('214e') + bytes(5000)  # 5000 as a compact integer
    assert codec.decode(data) == [0] * 5000

    limited = VecCodec(U8, builder=list, max_length=10)
    with pytest.raises(TooLongError):
        limited.decode(data)


@pytest.fixture
def fresh_settings():
    get_global_settings()
    source = get_settings_source()
    _reset_settings_singleton()
    yield
    _reset_settings_singleton()
    _load_settings_singleton(source)


def test_reload_after_reset(fresh_settings, monkeypatch) -> None:
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
    settings = get_global_settings()
    assert get_settings_source() == DEFAULT_SETTINGS_FILEPATH
    assert settings.MAX_COLLECTION_LENGTH is None
