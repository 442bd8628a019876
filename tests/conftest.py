"""Shared pytest fixtures for reckon tests."""

from pathlib import Path

import pytest

from reckon.core.config import InterpreterConfig, UnknownCharPolicy


@pytest.fixture
def strict_config() -> InterpreterConfig:
    """Return the default strict 64-bit configuration."""
    return InterpreterConfig()


@pytest.fixture
def lenient_config() -> InterpreterConfig:
    """Return a configuration that skips unknown characters."""
    return InterpreterConfig(unknown_characters=UnknownCharPolicy.SKIP)


@pytest.fixture
def unbounded_config() -> InterpreterConfig:
    """Return a configuration with overflow checks disabled."""
    return InterpreterConfig(bits=0)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a reckon.toml with non-default settings."""
    path = tmp_path / "reckon.toml"
    path.write_text(
        """
[lexer]
unknown_characters = "skip"

[integers]
bits = 16
"""
    )
    return path
