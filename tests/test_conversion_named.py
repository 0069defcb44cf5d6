# tests/test_conversion_named.py
"""
named color tests
=================

Does: Validate name normalization, CSS4/XKCD lookup, nearest-name search
      with both metrics, and settings validation from the package config.
"""

from __future__ import annotations

import importlib
import json

import pytest

pytest.importorskip("matplotlib")
pytest.importorskip("webcolors")

named = importlib.import_module("motley_hue.conversion.named")
load_config = importlib.import_module("motley_hue.utils.load_config")
models = importlib.import_module("motley_hue.models")

RGB = models.RGB


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    monkeypatch.delenv("MOTLEY_HUE_DATA_DIR", raising=False)
    load_config.clear_config_cache()
    yield
    load_config.clear_config_cache()


# ──────────────────────────────────────────────────────────────────────────────
# Normalization & distances
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "raw,expect",
    [
        ("Red", "red"),
        ("  Dark-Slate_Gray ", "dark slate gray"),
        ("acid   green", "acid green"),
    ],
)
def test_normalize_color_name(raw, expect):
    assert named.normalize_color_name(raw) == expect


def test_distances_zero_on_identity_and_symmetric():
    a, b = RGB(120, 100, 90), RGB(121, 99, 88)
    assert named.rgb_distance(a, a) == 0.0
    assert named.lab_distance(a, a) == 0.0
    assert named.lab_distance(a, b) == pytest.approx(named.lab_distance(b, a))
    assert named.rgb_distance(RGB(0, 0, 0), RGB(255, 255, 255)) == pytest.approx(
        (3 * 255 ** 2) ** 0.5
    )


# ──────────────────────────────────────────────────────────────────────────────
# Lookups
# ──────────────────────────────────────────────────────────────────────────────
def test_lookup_css4_names_win_over_xkcd():
    assert named.lookup_named_color("red") == RGB(255, 0, 0)
    assert named.lookup_named_color("Teal") == RGB(0, 128, 128)


def test_lookup_css4_name_written_with_spaces():
    assert named.lookup_named_color("Dark-Slate_Gray", palettes=("css4",)) == RGB(47, 79, 79)


def test_lookup_xkcd_name():
    rgb = named.lookup_named_color("acid green")
    assert rgb is not None and all(0 <= v <= 255 for v in rgb.as_tuple())


def test_lookup_unknown_or_empty_is_none():
    assert named.lookup_named_color("zzz-not-a-color") is None
    assert named.lookup_named_color("   ") is None


def test_lookup_restricted_to_css4_ignores_xkcd():
    assert named.lookup_named_color("acid green", palettes=("css4",)) is None


def test_named_color_map_is_cached():
    m1 = named.named_color_map(("css4",))
    m2 = named.named_color_map(("css4",))
    assert m1 is m2
    assert "red" in m1


# ──────────────────────────────────────────────────────────────────────────────
# Nearest name
# ──────────────────────────────────────────────────────────────────────────────
def test_nearest_color_name_exact_hits():
    assert named.nearest_color_name(RGB(255, 0, 0)) == "red"
    assert named.nearest_color_name(RGB(0, 255, 0)) == "lime"
    assert named.nearest_color_name(RGB(0, 0, 255)) == "blue"


def test_nearest_color_name_both_metrics_close_to_navy():
    for metric in (named.lab_distance, named.rgb_distance):
        assert named.nearest_color_name(RGB(0, 0, 130), ("css4",), metric) == "navy"


# ──────────────────────────────────────────────────────────────────────────────
# Settings
# ──────────────────────────────────────────────────────────────────────────────
def test_default_settings_from_package_data():
    settings = named.get_named_settings()
    assert settings == {"named_palettes": ("css4", "xkcd"), "keyword_metric": "lab"}


@pytest.mark.parametrize(
    "payload",
    [
        {"named_palettes": ["pantone"]},
        {"named_palettes": []},
        {"keyword_metric": "ciede2000"},
    ],
)
def test_invalid_settings_raise_parse_error(tmp_path, payload):
    (tmp_path / "motley_hue.json").write_text(json.dumps(payload), encoding="utf-8")
    with load_config.temp_data_dir(tmp_path):
        with pytest.raises(load_config.ConfigParseError):
            named.get_named_settings()


def test_settings_override_changes_lookup(tmp_path):
    (tmp_path / "motley_hue.json").write_text(
        json.dumps({"named_palettes": ["css4"], "keyword_metric": "rgb"}), encoding="utf-8"
    )
    with load_config.temp_data_dir(tmp_path):
        assert named.get_named_settings()["keyword_metric"] == "rgb"
        assert named.lookup_named_color("acid green") is None


def test_override_dir_without_config_falls_back_to_package(tmp_path):
    with load_config.temp_data_dir(tmp_path):
        settings = named.get_named_settings()
    assert settings == {"named_palettes": ("css4", "xkcd"), "keyword_metric": "lab"}
