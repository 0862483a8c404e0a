"""Tests for configuration loading"""

import logging

import pytest

from othello_rules import settings as settings_mod
from othello_rules.errors import ConfigError
from othello_rules.settings import DisplaySettings, Settings, ensure_config, load_settings


def test_missing_file_gives_defaults(tmp_path):
    s = load_settings(tmp_path / "nope.toml")
    assert s == Settings()
    assert s.logging.level == "INFO"
    assert s.display.player1 == "X"


def test_packaged_defaults_match_model_defaults():
    assert load_settings(settings_mod.DEFAULTS_PATH) == Settings()


def test_partial_file_is_merged_with_defaults(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[logging]\nlevel = "debug"\n\n[display]\nplayer2 = "@"\n', encoding="utf-8")
    s = load_settings(path)
    assert s.logging.level == "DEBUG"
    assert s.logging.level_no == logging.DEBUG
    assert s.logging.overwrite is True
    assert s.display.player2 == "@"
    assert s.display.empty == "."


@pytest.mark.parametrize(
    "body",
    [
        '[logging]\nlevel = "LOUD"\n',
        '[display]\nempty = ".."\n',
        '[display]\nplayer1 = "7"\n',
        '[display]\nplayer1 = "O"\n',
        '[logging\n',
    ],
)
def test_invalid_files_raise_config_error(tmp_path, body):
    path = tmp_path / "config.toml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)


def test_display_glyphs_validated_directly():
    with pytest.raises(ValueError):
        DisplaySettings(empty=" ")


def test_ensure_config_writes_defaults_once(tmp_path, monkeypatch):
    home = tmp_path / "home"
    monkeypatch.setattr(settings_mod, "CONFIG_HOME", home)
    monkeypatch.setattr(settings_mod, "CONFIG_PATH", home / "config.toml")
    assert ensure_config() is True
    assert (home / "config.toml").read_text(encoding="utf-8") == settings_mod.DEFAULTS_PATH.read_text(encoding="utf-8")
    assert ensure_config() is False
    assert load_settings() == Settings()


def test_unreadable_files_raise_config_error(tmp_path):
    binary = tmp_path / "binary.toml"
    binary.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(ConfigError):
        load_settings(binary)
    with pytest.raises(ConfigError):
        load_settings(tmp_path)


def test_ensure_config_failure_raises_config_error(tmp_path, monkeypatch):
    blocker = tmp_path / "home"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setattr(settings_mod, "CONFIG_HOME", blocker)
    monkeypatch.setattr(settings_mod, "CONFIG_PATH", blocker / "config.toml")
    with pytest.raises(ConfigError):
        ensure_config()
