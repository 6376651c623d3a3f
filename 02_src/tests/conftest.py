"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def enabled():
    """Enable log creation for each test and restore the switch afterwards."""
    from splinter import config

    previous = config.is_enabled()
    config.set_enabled(True)
    yield
    config.set_enabled(previous)


@pytest.fixture
def disabled():
    """Disable log creation for the duration of a test."""
    from splinter import config

    config.set_enabled(False)
    yield
    config.set_enabled(True)


@pytest.fixture
def clean_env(monkeypatch):
    """Isolated environment without SPLINTER_* variables."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("SPLINTER_")}
    monkeypatch.setattr(os, "environ", env)
    return env
