import os

import pytest
import structlog


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Drop EPOCHCONV_* overrides from the developer's shell and reset logging."""
    for key in list(os.environ):
        if key.upper().startswith("EPOCHCONV_"):
            monkeypatch.delenv(key, raising=False)
    yield
    structlog.reset_defaults()
