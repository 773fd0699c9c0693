"""Tests for the local (network-free) commands."""

from __future__ import annotations

import tomllib
from pathlib import Path

from core.app_info import get_app_version, greet


def test_greet():
    assert greet("Ada") == "Hello, Ada! Welcome to Angel Requests!"


def test_version_matches_pyproject():
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    declared = tomllib.loads(pyproject.read_text(encoding="utf-8"))["project"]["version"]

    assert get_app_version() == declared
