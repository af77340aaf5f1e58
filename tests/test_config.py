"""Tests for generator configuration loading."""

import json

import pytest

from chaincode_builder.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults():
    config = load_config()
    assert config == GeneratorConfig()
    assert config.default_asset_type == "Asset"
    assert config.default_init_message == "Initializing the chaincode"
    assert config.sample_record_count == 3
    assert config.custom == {}


def test_file_then_overrides(tmp_path):
    path = write_json(
        tmp_path / "config.json",
        {"default_asset_type": "Car", "sample_record_count": 5, "team": "ledger"},
    )
    config = load_config({"sample_record_count": 2}, config_file=path)

    assert config.default_asset_type == "Car"
    assert config.sample_record_count == 2
    assert config.custom == {"team": "ledger"}


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "absent.json")


def test_non_json_suffix(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("a: 1", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be JSON"):
        load_config(config_file=path)


def test_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(config_file=path)


def test_non_object(tmp_path):
    path = write_json(tmp_path / "config.json", [1, 2])
    with pytest.raises(ConfigError, match="JSON object"):
        load_config(config_file=path)


def test_validation_warnings():
    manager = ConfigManager()
    warnings = manager.validate_config(
        GeneratorConfig(default_asset_type="car", sample_record_count=-1, max_blank_lines="2")
    )
    assert len(warnings) == 3
    assert "not exported" in warnings[0]


def test_save_round_trip(tmp_path):
    manager = ConfigManager()
    config = load_config({"default_asset_type": "Deed", "owner_team": "ops"})
    path = tmp_path / "saved.json"

    manager.save_config(config, path)

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["owner_team"] == "ops"
    assert "custom" not in saved
    assert load_config(config_file=path) == config


def test_unknown_log_level_warns():
    manager = ConfigManager()
    assert manager.validate_config(GeneratorConfig(log_level="debug")) == []
    assert manager.validate_config(GeneratorConfig(log_level="chatty")) == [
        "Unknown log_level 'chatty'; using WARNING"
    ]
