import os
from pathlib import Path

import pytest

from adventure.presentation.cli import config


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    assert config.load_config(tmp_path / "missing.json") == {"text_display_mode": "instant", "color": True}


def test_load_config_leaves_the_disk_untouched(tmp_path: Path) -> None:
    path = tmp_path / "the_adventure" / "config.json"
    config.load_config(path)
    assert not path.parent.exists()
    assert not hasattr(config, "save_config")


def test_load_config_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert config.load_config(path) == {"text_display_mode": "instant", "color": True}


def test_load_config_normalizes_values(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"text_display_mode": "turbo", "color": "yes"}', encoding="utf-8")
    assert config.load_config(path) == {"text_display_mode": "instant", "color": True}


@pytest.mark.skipif(os.name == "nt", reason="POSIX config location")
def test_user_data_dir_on_posix(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config.Path, "home", lambda: tmp_path)
    assert config.get_default_config_path() == tmp_path / ".config" / "the_adventure" / "config.json"


def test_debug_flag_requires_exact_value(monkeypatch) -> None:
    monkeypatch.setenv("ADVENTURE_DEBUG", "true")
    assert config.debug_enabled() is False
    monkeypatch.setenv("ADVENTURE_DEBUG", "1")
    assert config.debug_enabled() is True
