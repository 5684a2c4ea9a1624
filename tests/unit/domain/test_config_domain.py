from __future__ import annotations

"""
Unit tests for the Configuration Domain.

Verifies:
1. LogFileConfig invariants and dict round-trip.
2. Persisted defaults loading, merging and corruption fallback.
"""

import json
from pathlib import Path

import pytest

from rotalog.domain.config import LogFileConfig, get_default_config, load_config, save_config
from rotalog.domain.constants import LogEncoding
from rotalog.domain.errors import ConfigurationError


def test_defaults_match_documented_values() -> None:
    cfg = LogFileConfig(path="app.log")
    assert cfg.delimiter == ","
    assert cfg.max_size == 104857600
    assert cfg.enforce_retention is True
    assert cfg.max_files == 10
    assert cfg.encoding is LogEncoding.UTF8


def test_encoding_names_are_coerced() -> None:
    assert LogFileConfig(path="a.log", encoding="ascii").encoding is LogEncoding.ASCII


@pytest.mark.parametrize("kwargs", [
    {"path": ""},
    {"path": "a.log", "delimiter": ",,"},
    {"path": "a.log", "delimiter": ""},
    {"path": "a.log", "delimiter": "\n"},
    {"path": "a.log", "max_size": -1},
    {"path": "a.log", "max_files": -1},
    {"path": "a.log", "max_files": True},
    {"path": "a.log", "encoding": "klingon"},
])
def test_invalid_values_raise(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        LogFileConfig(**kwargs)


def test_dict_round_trip() -> None:
    cfg = LogFileConfig(path="a.log", delimiter="|", max_size=10, enforce_retention=False,
                        max_files=0, encoding=LogEncoding.UNICODE)
    data = cfg.to_dict()
    assert data["encoding"] == "Unicode"
    assert LogFileConfig.from_dict({**data, "unknown": 1}) == cfg


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "missing.json")) == get_default_config()


def test_load_config_merges_known_keys(tmp_path: Path) -> None:
    f = tmp_path / "config.json"
    f.write_text(json.dumps({"max_files": 3, "delimiter": ";", "bogus": True}), encoding="utf-8")

    cfg = load_config(str(f))

    assert cfg["max_files"] == 3
    assert cfg["delimiter"] == ";"
    assert "bogus" not in cfg
    assert cfg["max_size"] == 104857600


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_load_config_corrupted_falls_back(tmp_path: Path, content: str) -> None:
    f = tmp_path / "config.json"
    f.write_text(content, encoding="utf-8")
    assert load_config(str(f)) == get_default_config()


def test_save_then_load(tmp_path: Path) -> None:
    f = tmp_path / "sub" / "config.json"
    save_config({"max_size": 2048, "path": "ignored.log"}, str(f))

    stored = json.loads(f.read_text(encoding="utf-8"))
    assert stored == {"max_size": 2048}
    assert load_config(str(f))["max_size"] == 2048
