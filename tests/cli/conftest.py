"""Shared fixtures for CLI tests."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Restore root logger state around each CLI test.

    ``hooklite trigger --log-events`` calls ``logging.basicConfig``, which may attach a stream
    handler bound to Click's temporary output stream. That stream is closed once the runner
    returns, so the handler must not outlive the test.
    """
    root_level = logging.root.level
    root_handlers = logging.root.handlers[:]

    yield

    logging.root.handlers = root_handlers
    logging.root.setLevel(root_level)
