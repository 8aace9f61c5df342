"""Shared fixtures for the treeconf test suite."""

from __future__ import annotations

import pytest

from treeconf.config import ConfigurationRoot
from treeconf.parsers import ParserRegistry


@pytest.fixture
def settings() -> ConfigurationRoot:
    """A tree covering every built-in parse rule plus arrays and nested sections."""
    return ConfigurationRoot(
        {
            "app": {
                "name": "billing",
                "debug": "True",
                "color": "GREEN",
                "workers": "8",
                "ratio": "0.75",
                "price": "19.990",
                "started": "2024-03-01T12:30:00",
                "deadline": "2024-03-01T12:30:00+02:00",
                "timeout": "01:30:00",
                "separator": ";",
                "instance": "6f9619ff-8b86-d011-b42d-00cf4fc964ff",
                "empty": "",
            },
            "db": {"host": "x", "port": "5"},
            "ports": ["80", "443", "x"],
            "hosts": ["alpha", "beta"],
        }
    )


@pytest.fixture
def registry() -> ParserRegistry:
    """A registry isolated from the module-level default."""
    return ParserRegistry()
