"""Test configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from layered_i18n.core.config_loader import get_nested, load_config

PROJECT_CONFIG = Path(__file__).parent.parent.parent / "config" / "base.yaml"


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    monkeypatch.delenv("LAYERED_I18N_ENV", raising=False)
    monkeypatch.delenv("STRICT_CONFIG", raising=False)


def test_project_config_parses():
    """Test that the shipped config/base.yaml parses correctly."""
    cfg = load_config(PROJECT_CONFIG)
    assert isinstance(cfg, dict)
    assert cfg["default_locale"] == "en"
    assert cfg["locale_paths"] == ["locales"]


def test_defaults_are_filled_in(write_yaml):
    config_path = write_yaml("config.yaml", {"locale_paths": ["locales"]})

    cfg = load_config(config_path)

    assert cfg["default_locale"] == "en"
    assert cfg["file_pattern"] == "**/*.yml"
    assert cfg["logging"]["level"] == "INFO"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_empty_config_file(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")

    cfg = load_config(config_path)

    assert cfg["locale_paths"] == []


def test_environment_overlay(write_yaml, monkeypatch):
    config_path = write_yaml(
        "config.yaml",
        {"default_locale": "en", "logging": {"level": "INFO", "backup_count": 5}},
    )
    write_yaml("envs/prod.yaml", {"default_locale": "fr", "logging": {"level": "warning"}})
    monkeypatch.setenv("LAYERED_I18N_ENV", "prod")

    cfg = load_config(config_path)

    assert cfg["default_locale"] == "fr"
    assert cfg["logging"]["level"] == "WARNING"
    assert cfg["logging"]["backup_count"] == 5


def test_env_var_expansion(write_yaml, monkeypatch):
    monkeypatch.setenv("LOCALE_ROOT", "/srv/locales")
    config_path = write_yaml("config.yaml", {"locale_paths": ["${LOCALE_ROOT}/app", "$UNSET_VAR_X"]})

    cfg = load_config(config_path)

    assert cfg["locale_paths"] == ["/srv/locales/app", "$UNSET_VAR_X"]


def test_single_path_is_wrapped(write_yaml):
    config_path = write_yaml("config.yaml", {"locale_paths": "locales"})
    assert load_config(config_path)["locale_paths"] == ["locales"]


def test_invalid_config_raises(write_yaml):
    config_path = write_yaml("config.yaml", {"logging": {"level": "LOUD"}})
    with pytest.raises(ValidationError):
        load_config(config_path)


def test_empty_locale_rejected(write_yaml):
    config_path = write_yaml("config.yaml", {"default_locale": "  "})
    with pytest.raises(ValidationError):
        load_config(config_path)


def test_validation_can_be_skipped(write_yaml, monkeypatch):
    monkeypatch.setenv("STRICT_CONFIG", "0")
    config_path = write_yaml("config.yaml", {"logging": {"level": "LOUD"}})

    cfg = load_config(config_path)

    assert cfg == {"logging": {"level": "LOUD"}}


def test_get_nested():
    config = {"logging": {"level": "INFO"}}
    assert get_nested(config, "logging.level") == "INFO"
    assert get_nested(config, "logging.file", default="i18n.log") == "i18n.log"
    assert get_nested(config, "logging.level.deeper") is None
