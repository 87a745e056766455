# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Shared fixtures for app_logger tests."""

import pytest

from app_logger import SilentSink


@pytest.fixture(autouse=True)
def reset_default_sink():
    """Reset the process-wide default sink before and after each test."""
    import app_logger.factory as factory
    factory._default_sink = None
    yield
    factory._default_sink = None


@pytest.fixture
def sink() -> SilentSink:
    """In-memory sink that records every emitted record."""
    return SilentSink()
