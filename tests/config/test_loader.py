from pathlib import Path

import pytest

from bundlekit import Bundle, Kind
from bundlekit.config import (
    ConfigValidationError,
    bind_config_file,
    bind_config_values,
    get_config,
    load_config_file,
)
from bundlekit.settings import settings


def test_load_yaml_json_toml(tmp_path: Path):
    yaml_file = tmp_path / 'settings.yaml'
    yaml_file.write_text('BundleSettings:\n  infer_long_integers: true\n', encoding='utf-8')
    json_file = tmp_path / 'settings.json'
    json_file.write_text('{"warn_on_kind_mismatch": true}', encoding='utf-8')
    toml_file = tmp_path / 'settings.toml'
    toml_file.write_text('[BundleSettings]\nwarn_on_kind_mismatch = false\n', encoding='utf-8')

    assert load_config_file(yaml_file) == {'BundleSettings': {'infer_long_integers': True}}
    assert load_config_file(json_file) == {'warn_on_kind_mismatch': True}
    assert load_config_file(toml_file) == {'BundleSettings': {'warn_on_kind_mismatch': False}}


def test_load_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config_file(tmp_path / 'missing.yaml')

    ini_file = tmp_path / 'settings.ini'
    ini_file.write_text('[x]', encoding='utf-8')
    with pytest.raises(RuntimeError, match='Unsupported config file type'):
        load_config_file(ini_file)

    list_file = tmp_path / 'settings.json'
    list_file.write_text('[1, 2]', encoding='utf-8')
    with pytest.raises(RuntimeError, match='mapping at the top level'):
        load_config_file(list_file)


def test_bind_config_file_updates_settings(tmp_path: Path):
    config_file = tmp_path / 'settings.yml'
    config_file.write_text('BundleSettings.infer_long_integers: true\n', encoding='utf-8')

    bind_config_file(config_file)

    assert get_config()['BundleSettings.infer_long_integers'] is True
    assert settings.infer_long_integers is True


def test_bind_config_file_validates(tmp_path: Path):
    bind_config_values(warn_on_kind_mismatch=False)
    before = dict(get_config())

    config_file = tmp_path / 'settings.json'
    config_file.write_text('{"BundleSettings": {"infer_long_integers": "no"}}', encoding='utf-8')

    with pytest.raises(ConfigValidationError):
        bind_config_file(config_file)

    assert dict(get_config()) == before
    b = Bundle()
    b.put('n', 3)
    assert b.kind_of('n') is Kind.INT
