"""
Shared pytest fixtures and configuration for geospine tests.

This module provides:
- Registry and settings cleanup for test isolation
- GeoJSON Feature document builders
"""

import logging
from pathlib import Path
from typing import Any

import pytest
import structlog

from geospine.core.settings import get_settings
from geospine.framework.registry import clear_registry


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if test_path.parts[0] == "cli":
            item.add_marker(pytest.mark.cli)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_state():
    """Reset cached settings, the processor registry and logging config."""
    get_settings.cache_clear()
    clear_registry()
    yield
    get_settings.cache_clear()
    clear_registry()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


def _build_geojson(feature_type: Any = "Feature") -> dict[str, Any]:
    """The Dinagat Islands Feature from the GeoJSON specification."""
    return {
        "type": feature_type,
        "properties": {"name": "Dinagat Islands"},
        "geometry": {"type": "Point", "coordinates": [125.6, 10.1]},
    }


@pytest.fixture
def build_geojson():
    """Builder for Feature documents with a chosen ``type`` value."""
    return _build_geojson


@pytest.fixture
def feature_document() -> dict[str, Any]:
    return _build_geojson()
