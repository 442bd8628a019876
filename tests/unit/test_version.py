"""Tests for version lookup."""

import tomllib
from pathlib import Path

import reckon
from reckon._version import get_version

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def test_version_matches_pyproject():
    with PYPROJECT.open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert get_version() == expected


def test_package_exposes_version():
    assert reckon.__version__ == get_version()
