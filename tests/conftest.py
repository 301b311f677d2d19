"""
Pytest configuration and host page fixtures
"""

import pytest

from mocks.fake_document import FakeDocument
from mocks.host_pages import APPLICATION_PATH, TRANSCRIPT_AND_ESSAY, host_page

from restyler_core.config import Config


@pytest.fixture
def fast_config():
    """Config with short timings so reactive tests finish quickly."""
    return Config(
        poll_interval_ms=5,
        wait_timeout_ms=500,
        debounce_ms=30,
        application_path=APPLICATION_PATH,
    )


@pytest.fixture
def checklist_items():
    return [dict(item) for item in TRANSCRIPT_AND_ESSAY]


@pytest.fixture
def document(checklist_items):
    return FakeDocument(host_page(checklist_items), pathname=APPLICATION_PATH)


