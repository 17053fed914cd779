"""
Pytest configuration and shared fixtures for hcl2json tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from hcl2json.logging import SilentLogger, set_global_logger


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Reset the global logger after each test (the CLI replaces it)."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def terraform_tfvars(fixtures_dir: Path) -> Path:
    """Provide path to the main sample variables file."""
    return fixtures_dir / "terraform.tfvars"


@pytest.fixture
def layered_tfvars(fixtures_dir: Path) -> list[Path]:
    """Provide two files that disagree on nested tags (base, then override)."""
    return [fixtures_dir / "config1.tfvars", fixtures_dir / "config2.tfvars"]


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """
    Provide a parsed document covering every value kind.
    """
    return {
        "name": "web",
        "count": 3,
        "ratio": 0.5,
        "enabled": True,
        "owner": None,
        "zones": ["a", "b"],
        "tags": {"Environment": "production", "Project": "web-app"},
    }


@pytest.fixture
def create_hcl_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary HCL files.

    Usage:
        hcl_path = create_hcl_file("main.tfvars", 'region = "us-west-2"\\n')
    """

    def _create(filename: str, content: str) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _create


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file(".hcl2json.yaml", {"pretty": True})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
