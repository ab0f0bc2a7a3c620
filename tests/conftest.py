"""Shared fixtures for the refinery test suite."""

from __future__ import annotations

from typing import Any, Dict

import pytest


@pytest.fixture
def layered_root() -> Dict[str, Any]:
    """Global options with two plugins, each with nested profiles."""
    return {
        "options": {
            "key1": "val1",
            "key1a": True,
            "plugin1": {
                "key2": "val2",
                "test": {"key1": False, "key2": "val3"},
            },
            "plugin2": {
                "deploy": {"key3": "val3", "key4": [1, 2, 3, 4]},
            },
        }
    }


@pytest.fixture
def mongod_root() -> Dict[str, Any]:
    """Server options with a per-environment override level."""
    return {
        "mongod": {
            "fork": True,
            "journal": False,
            "oplogSize": 128,
            "port": 27017,
            "replica": {
                "port": 65010,
            },
        }
    }


LAYERED_TOML = """\
[options]
key1 = "val1"
key1a = true

[options.plugin1]
key2 = "val2"

[options.plugin1.test]
key1 = false
key2 = "val3"

[options.plugin2.deploy]
key3 = "val3"
key4 = [1, 2, 3, 4]
"""


@pytest.fixture
def layered_toml() -> str:
    """``layered_root`` written as a TOML document."""
    return LAYERED_TOML
