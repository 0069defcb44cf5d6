# tests/test_utils.py
"""End-to-end tests for utils (load_config, log) with cache/env handling."""

from __future__ import annotations

import json
from importlib import import_module

import pytest

LC = import_module("motley_hue.utils.load_config")
LOG = import_module("motley_hue.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via MOTLEY_HUE_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("MOTLEY_HUE_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("MOTLEY_HUE_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("MOTLEY_HUE_DATA_DIR", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    monkeypatch.delenv("MOTLEY_HUE_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()
    clear_config_cache()


# ---------- load_config tests ----------
def test_load_config_cache_hit_until_cleared(tmp_data_dir):
    p = tmp_data_dir / "settings.json"
    p.write_text(json.dumps({"named_palettes": ["css4"]}), encoding="utf-8")

    out1 = load_config("settings")
    assert out1 == {"named_palettes": ["css4"]}
    assert load_config("settings") is out1

    p.write_text(json.dumps({"named_palettes": ["xkcd"]}), encoding="utf-8")
    clear_config_cache()
    assert load_config("settings") == {"named_palettes": ["xkcd"]}


def test_load_config_validator_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    assert load_config("settings", validator=validator) == {"alpha": 1, "beta": "ok"}

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_rejects_non_object(tmp_data_dir):
    (tmp_data_dir / "list.json").write_text(json.dumps(["css4", "xkcd"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError, match="expected a JSON object"):
        load_config("list")


def test_load_config_validator_failure_is_parse_error(tmp_data_dir):
    (tmp_data_dir / "bad.json").write_text(json.dumps({"x": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError, match="validator failed"):
        load_config("bad", validator=validator)


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_load_config_explicit_base_dir_beats_env(tmp_data_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    (other / "x.json").write_text(json.dumps({"src": "explicit"}), encoding="utf-8")
    (tmp_data_dir / "x.json").write_text(json.dumps({"src": "env"}), encoding="utf-8")
    assert load_config("x", base_dir=other) == {"src": "explicit"}
    assert load_config("x") == {"src": "env"}


def test_package_data_dir_is_discovered():
    assert load_config("motley_hue")["keyword_metric"] == "lab"


def test_generic_data_dir_env_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    assert load_config("motley_hue")["keyword_metric"] == "lab"


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    import os

    monkeypatch.setenv("MOTLEY_HUE_DATA_DIR", "/previous")
    with LC.temp_data_dir(tmp_path):
        assert os.environ["MOTLEY_HUE_DATA_DIR"] == str(tmp_path)
    assert os.environ["MOTLEY_HUE_DATA_DIR"] == "/previous"


# ---------- log.debug tests ----------
def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("MOTLEY_HUE_DEBUG_TOPICS", "conversion")
    LOG.reload_topics()

    LOG.debug("hello on conversion", topic="conversion")
    LOG.debug("should be silent", topic="combination")

    captured = capsys.readouterr()
    assert "hello on conversion" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("MOTLEY_HUE_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="warning")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "m2" in captured.err
    assert "[bar][WARNING]" in captured.err


def test_log_debug_silent_without_topics(capsys):
    LOG.debug("nobody listens", topic="combination")
    assert capsys.readouterr().err == ""


def test_log_enabled_matches_trimmed_lowercase_topics(monkeypatch):
    monkeypatch.setenv("MOTLEY_HUE_DEBUG_TOPICS", " Conversion , ")
    LOG.reload_topics()

    assert LOG.enabled("conversion")
    assert LOG.enabled(" CONVERSION")
    assert not LOG.enabled("combination")
    assert set(LOG.TOPICS) == {"conversion", "combination"}
