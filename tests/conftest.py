"""
Pytest configuration and shared fixtures for artiver tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from artiver.logging import SilentLogger, set_global_logger


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Reset the global logger after each test."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def sample_gate_data() -> dict[str, Any]:
    """
    Provide sample gate configuration data.

    Returns a complete gate file structure for testing.
    """
    return {
        "apiVersion": "artiver/v1",
        "gates": [
            {"artifact": "jackrabbit-api", "minimum": "2.4.2"},
            {"artifact": "jahia-api", "minimum": "6.7", "allow_snapshot": True},
        ],
    }


@pytest.fixture
def sample_gate_defaults() -> dict[str, Any]:
    """Provide sample shared gate defaults."""
    return {
        "apiVersion": "artiver/v1",
        "defaults": {
            "allow_prerelease": True,
            "allow_snapshot": False,
        },
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("gates.yaml", {"key": "value"})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
