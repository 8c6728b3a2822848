"""Pytest configuration and fixtures."""

import pytest

from sumkit.logging_config import setup_logging
from sumkit.plist_reader import ResourceBundle


@pytest.fixture(autouse=True)
def quiet_logging():
    """Send structured logs to stderr so stdout only carries diagnostics."""
    setup_logging(json_logs=True, log_level="DEBUG")


@pytest.fixture
def titled_bundle():
    """Bundle holding my_plist.plist with a title."""
    return ResourceBundle(resources={"my_plist.plist": {"title": "A title"}})


@pytest.fixture
def untitled_bundle():
    """Bundle holding my_plist.plist without a title entry."""
    return ResourceBundle(resources={"my_plist.plist": {"author": "Someone"}})


@pytest.fixture
def empty_bundle():
    """Bundle with no resources."""
    return ResourceBundle()
