"""Pytest configuration."""

import sys
from pathlib import Path

import pytest
import yaml

# Add project root to path (two levels up from this file)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from layered_i18n.core.loader import StaticLoader  # noqa: E402
from layered_i18n.core.store import LocaleStore, reset_store  # noqa: E402


@pytest.fixture
def write_yaml(tmp_path):
    """Write a mapping as YAML under tmp_path and return the file path."""

    def _write(relative: str, data) -> Path:
        file_path = tmp_path / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def loader():
    """In-memory loader with an English/French base and an override path."""
    return StaticLoader(
        {
            "base": [
                {"en": {"greeting": {"hello": "Hi", "bye": "Bye"}, "k": "hi"}},
                {"fr": {"greeting": {"hello": "Salut"}, "k": "salut"}},
            ],
            "override": [
                {"en": {"greeting": {"bye": "Goodbye"}}},
            ],
        }
    )


@pytest.fixture
def store(loader):
    return LocaleStore("base", "override", loader=loader)


@pytest.fixture(autouse=True)
def _clean_global_store():
    reset_store()
    yield
    reset_store()
