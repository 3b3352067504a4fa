"""Configuration for unit tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Capture debug output from the package loggers."""
    caplog.set_level(logging.DEBUG, logger="google_photos_kit")
    yield
