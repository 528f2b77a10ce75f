"""Shared test fixtures."""

from __future__ import annotations

import pytest

from resource_path import POSIX, WINDOWS, PathFlavour


@pytest.fixture(params=[POSIX, WINDOWS], ids=["posix", "windows"])
def flavour(request: pytest.FixtureRequest) -> PathFlavour:
    """Run a test once per built-in flavour."""
    return request.param
