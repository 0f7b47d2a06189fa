"""Tests for lispish.config."""

import logging
import sys
from pathlib import Path

from lispish import config


def test_max_depth_default(monkeypatch):
    monkeypatch.delenv("LISPISH_MAX_DEPTH", raising=False)
    assert config.get_max_depth() == 200

def test_max_depth_from_env(monkeypatch):
    monkeypatch.setenv("LISPISH_MAX_DEPTH", "50")
    assert config.get_max_depth() == 50

def test_max_depth_invalid_falls_back(monkeypatch):
    monkeypatch.setenv("LISPISH_MAX_DEPTH", "lots")
    assert config.get_max_depth() == 200
    monkeypatch.setenv("LISPISH_MAX_DEPTH", "-3")
    assert config.get_max_depth() == 200

def test_history_default(monkeypatch):
    monkeypatch.delenv("LISPISH_HISTORY", raising=False)
    assert config.get_history_path() == Path.home() / ".lispish_history"

def test_history_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LISPISH_HISTORY", str(tmp_path / "h"))
    assert config.get_history_path() == tmp_path / "h"

def test_log_level(monkeypatch):
    monkeypatch.delenv("LISPISH_LOG_LEVEL", raising=False)
    assert config.get_log_level() == logging.WARNING
    monkeypatch.setenv("LISPISH_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("LISPISH_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING

def test_max_depth_capped_by_recursion_limit(monkeypatch):
    monkeypatch.setenv("LISPISH_MAX_DEPTH", "100000")
    assert config.get_max_depth() == config.max_safe_depth()
    assert config.max_safe_depth() < sys.getrecursionlimit()
