import os

import pytest

from sqlbuilder.logging import clear_request_context, set_logging_context
from sqlbuilder.settings import main as settings_main


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Drop SQLBUILDER_* variables and the cached settings around each test."""
    for key in list(os.environ):
        if key.upper().startswith("SQLBUILDER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(settings_main, "_settings", None)
    yield
    settings_main._settings = None


@pytest.fixture(autouse=True)
def isolated_logging_context():
    set_logging_context(environment=None, extra=None)
    clear_request_context()
    yield
    set_logging_context(environment=None, extra=None)
    clear_request_context()
