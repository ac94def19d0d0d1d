"""
Tests for `repositories/store_config.py`.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from repositories.store_config import DEFAULT_DATA_DIR, DEFAULT_DATA_FILE, StoreConfig, load_store_config


def test_defaults_when_environment_is_empty(monkeypatch) -> None:
    monkeypatch.delenv("VENDING_DATA_DIR", raising=False)
    monkeypatch.delenv("VENDING_DATA_FILE", raising=False)

    config = load_store_config(env_file=None)

    assert config.data_dir == DEFAULT_DATA_DIR
    assert config.file_name == DEFAULT_DATA_FILE
    assert config.path == DEFAULT_DATA_DIR / "vending_data.json"


def test_environment_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("VENDING_DATA_DIR", str(tmp_path / "kiosk"))
    monkeypatch.setenv("VENDING_DATA_FILE", "inventory.json")

    config = load_store_config(env_file=None)

    assert config.path == tmp_path / "kiosk" / "inventory.json"


def test_env_file_is_read(monkeypatch, tmp_path: Path) -> None:
    # setenv first so teardown removes whatever load_dotenv writes.
    for name in ("VENDING_DATA_DIR", "VENDING_DATA_FILE"):
        monkeypatch.setenv(name, "unused")
        monkeypatch.delenv(name)
    env_file = tmp_path / ".env"
    env_file.write_text(f"VENDING_DATA_DIR={tmp_path / 'from-env'}\n", encoding="utf-8")

    config = load_store_config(env_file=env_file)

    assert config.data_dir == tmp_path / "from-env"
    assert config.file_name == DEFAULT_DATA_FILE


@pytest.mark.parametrize("file_name", ["", "nested/file.json", "../escape.json"])
def test_file_name_must_be_plain(file_name: str, tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        StoreConfig(data_dir=tmp_path, file_name=file_name)
