"""
Pytest fixtures for gql_upload tests.
"""

import httpx
import pytest

from gql_upload.config import UploadLinkConfig
from gql_upload.domain.models import Blob, File
from tests.test_gql_upload.helpers import RecordingHandler


# ═══════════════════════════════════════════════════════════════════════════════
# File Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def file1() -> File:
    return File(b"1", name="1.txt", content_type="text/plain")


@pytest.fixture
def file2() -> File:
    return File(b"2", name="2.txt", content_type="text/plain")


@pytest.fixture
def blob() -> Blob:
    return Blob(b"\x00\x01\x02")


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def test_config() -> UploadLinkConfig:
    return UploadLinkConfig.for_testing()


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def sync_client(handler) -> httpx.Client:
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client
