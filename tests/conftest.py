"""Shared pytest fixtures for surveypoc test suites."""

from collections.abc import Generator
from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def message_source():
    """Provide a message source serving the bundled English and French messages."""
    from surveypoc.core.i18n import MessageSource
    from surveypoc.core.messages import BUNDLES

    return MessageSource(BUNDLES, default_locale="en")


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Provide an API test client for contract suites."""
    from surveypoc.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
