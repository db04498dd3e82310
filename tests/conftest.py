"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Mock settings/configuration
- Sample block forests (raw dicts and parsed BlockNodes)
- Option sets
- Temporary files
"""

import copy
import json
from pathlib import Path
from typing import Any, Callable, List

import pytest
import structlog

from block_zapper.config import Settings
from block_zapper.models import BlockNode, ZapOptions, parse_forest
from tests.fixtures.blocks import SAMPLE_FORESTS


@pytest.fixture(autouse=True)
def reset_structlog():
    """
    Restore the default structlog configuration after each test.

    The CLI binds its log output to the stderr of the running test.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create mock settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="INFO",
        log_json=False,  # Easier to read in tests
        default_zap_mode="selective",
        default_keep_media=True,
    )


@pytest.fixture
def raw_forest() -> Callable[[str], List[Any]]:
    """
    Get a deep copy of a raw sample forest by name.

    Returns:
        Function name -> list of block dicts
    """
    def _get(name: str) -> List[Any]:
        return copy.deepcopy(SAMPLE_FORESTS[name])

    return _get


@pytest.fixture
def forest(raw_forest) -> Callable[[str], List[Any]]:
    """
    Get a parsed sample forest by name.

    Returns:
        Function name -> list of BlockNode (malformed entries kept as-is)
    """
    def _get(name: str) -> List[Any]:
        return parse_forest(raw_forest(name))

    return _get


@pytest.fixture
def styled_paragraph() -> BlockNode:
    """
    Paragraph with content, backgroundColor and className.

    Returns:
        BlockNode
    """
    return BlockNode.from_dict(copy.deepcopy(SAMPLE_FORESTS["styled_paragraph"][0]))


@pytest.fixture
def all_flags_options() -> ZapOptions:
    """
    Options removing every flaggable category, media kept.

    Returns:
        ZapOptions
    """
    return ZapOptions(
        block_settings=True,
        block_styles=True,
        custom_properties=True,
        custom_classes=True,
        custom_anchors=True,
        html_elements=True,
        keep_media=True,
    )


@pytest.fixture
def forest_file(tmp_path, raw_forest) -> Callable[[str], Path]:
    """
    Write a sample forest to a temporary JSON file.

    Returns:
        Function name -> path of the written file
    """
    def _write(name: str) -> Path:
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(raw_forest(name)), encoding="utf-8")
        return path

    return _write


def pytest_configure(config):
    """
    Configure pytest with custom markers.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (CLI, end-to-end)"
    )
