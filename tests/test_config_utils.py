"""
Tests for configuration loading and writing.
"""
import logging
from pathlib import Path

import tomli

from tasklist import config_utils
from tasklist.config_utils import (
    DEFAULT_CFG,
    load_cfg,
    get_tasks_file_path,
    write_default_cfg,
    configure_logging,
)


def test_load_cfg_missing_file_returns_defaults(tmp_path, caplog):
    cfg = load_cfg(tmp_path / "nope.toml")
    assert cfg == DEFAULT_CFG
    assert "not found" in caplog.text


def test_load_cfg_returns_a_copy(tmp_path):
    cfg = load_cfg(tmp_path / "nope.toml")
    cfg["tasks"]["file"] = "changed.csv"
    assert DEFAULT_CFG["tasks"]["file"] == "tasks.csv"


def test_load_cfg_merges_sections(tmp_path):
    cfg_file = tmp_path / "tasklist.toml"
    cfg_file.write_text('[tasks]\nfile = "mine.csv"\n\n[menu]\nautoload = false\n', encoding="utf-8")
    cfg = load_cfg(cfg_file)
    assert cfg["tasks"]["file"] == "mine.csv"
    assert cfg["menu"]["autoload"] is False
    # keys not present in the file keep their defaults
    assert cfg["menu"]["save_on_exit"] is True
    assert cfg["logging"] == DEFAULT_CFG["logging"]


def test_load_cfg_parse_error_falls_back(tmp_path, caplog):
    cfg_file = tmp_path / "tasklist.toml"
    cfg_file.write_text("[tasks\nfile = ", encoding="utf-8")
    cfg = load_cfg(cfg_file)
    assert cfg == DEFAULT_CFG
    assert "Error parsing" in caplog.text


def test_load_cfg_uses_module_default_path(tmp_path, monkeypatch):
    cfg_file = tmp_path / "custom.toml"
    cfg_file.write_text('[tasks]\nfile = "elsewhere.csv"\n', encoding="utf-8")
    monkeypatch.setattr(config_utils, "CFG_PATH", cfg_file)
    assert load_cfg()["tasks"]["file"] == "elsewhere.csv"


def test_get_tasks_file_path():
    assert get_tasks_file_path({"tasks": {"file": "data/todo.csv"}}) == Path("data/todo.csv")
    assert get_tasks_file_path({}) == Path("tasks.csv")


def test_write_default_cfg_round_trip(tmp_path):
    cfg_file = tmp_path / "conf" / "tasklist.toml"
    assert write_default_cfg(cfg_file) is True
    with cfg_file.open("rb") as f:
        assert tomli.load(f) == DEFAULT_CFG
    assert load_cfg(cfg_file) == DEFAULT_CFG


def test_write_default_cfg_does_not_overwrite(tmp_path):
    cfg_file = tmp_path / "tasklist.toml"
    cfg_file.write_text('[tasks]\nfile = "keep.csv"\n', encoding="utf-8")
    assert write_default_cfg(cfg_file) is False
    assert "keep.csv" in cfg_file.read_text(encoding="utf-8")
    assert write_default_cfg(cfg_file, force=True) is True
    assert load_cfg(cfg_file)["tasks"]["file"] == "tasks.csv"


def test_configure_logging_sets_level():
    configure_logging({"logging": {"level": "debug"}})
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_unknown_level_falls_back(caplog):
    configure_logging({"logging": {"level": "chatty"}})
    assert logging.getLogger().level == logging.INFO
    assert "Unknown log level" in caplog.text
