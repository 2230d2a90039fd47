"""Shared pytest fixtures for all tests."""

import tempfile
from pathlib import Path

import pytest

from config.defaults import default_config
from paths.context import ResolutionContext


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def context(temp_dir) -> ResolutionContext:
    """Resolution context rooted in the temporary directory."""
    return ResolutionContext.for_roots(temp_dir / "config", temp_dir / "data")


@pytest.fixture
def default(context):
    """Default configuration for the temporary context."""
    return default_config(context)


@pytest.fixture
def config_file(temp_dir) -> Path:
    """Path for an explicit config file that does not exist yet."""
    return temp_dir / "test_data" / "config.yaml"
