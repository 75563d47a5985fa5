import sys
import os

import pytest

# Ensure the repository root (main.py, dfm/) is on sys.path
HERE = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(HERE, ".."))

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from dfm.reference import make_reference_dfm


@pytest.fixture
def reference_dfm():
    return make_reference_dfm()


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch):
    monkeypatch.delenv("DFM_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DFM_LOG_DIR", raising=False)


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    # Route structlog through stdlib so nothing is printed to stdout
    from dfm.logging_config import setup_logging
    setup_logging(log_level="WARNING", console_output=False)
