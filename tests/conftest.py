"""Conftest for all pytest configuration - fixtures, hooks, and doctest setup."""

import doctest

import pytest

from hooklite.globals import reset_global_registry
from hooklite.plugins.manager import reset_global_plugin_manager
from hooklite.settings import HookliteSettings
from hooklite.settings import set_global_settings

# Doctest Configuration


def pytest_configure(config):
    """Configure pytest with custom doctest options."""
    doctest.ELLIPSIS_MARKER = "..."


def pytest_collection_modifyitems(items):
    """Automatically mark doctest items with the 'doctest' marker."""
    for item in items:
        if isinstance(item, pytest.DoctestItem):
            item.add_marker(pytest.mark.doctest)


# Shared state


@pytest.fixture(autouse=True)
def reset_global_state():
    """Give every test a fresh plugin manager, global registry and default settings."""
    reset_global_plugin_manager()
    reset_global_registry()
    set_global_settings(HookliteSettings())

    yield

    reset_global_plugin_manager()
    reset_global_registry()
    set_global_settings(HookliteSettings())
