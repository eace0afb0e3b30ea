"""Shared pytest fixtures."""

from datetime import datetime, timezone
from typing import Any, Iterator
from unittest.mock import Mock

import pytest

from gdrive_catalog.auth.models import TokenResponse
from gdrive_catalog.auth.service import DriveClient
from gdrive_catalog.catalog.models import CatalogEntry
from gdrive_catalog.config.settings import reset_settings


def make_drive_service(
    files: list[dict[str, Any]],
    folders: dict[str, dict[str, Any]],
    next_page_token: str = "",
) -> Mock:
    """Create a mock Drive API service backed by in-memory listings.

    ``files().get`` answers from ``folders`` keyed by ID; unknown IDs raise
    KeyError, standing in for a not-found error.
    """
    service = Mock()
    files_resource = Mock()
    service.files.return_value = files_resource

    listing: dict[str, Any] = {"files": files}
    if next_page_token:
        listing["nextPageToken"] = next_page_token
    files_resource.list.return_value.execute.return_value = listing

    def get(fileId: str, **kwargs: Any) -> Mock:
        return Mock(execute=Mock(return_value=folders[fileId]))

    files_resource.get.side_effect = get
    return service


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the global settings instance and GDRIVE_CATALOG_ env."""
    for name in (
        "GDRIVE_CATALOG_CLIENT_ID",
        "GDRIVE_CATALOG_CLIENT_SECRET",
        "GDRIVE_CATALOG_REDIRECT_URI",
        "GDRIVE_CATALOG_ACCESS_TOKEN",
        "GDRIVE_CATALOG_REFRESH_TOKEN",
        "GDRIVE_CATALOG_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_token() -> TokenResponse:
    """Create a sample token."""
    return TokenResponse(
        access_token="ya29.access",
        refresh_token="1//refresh",
        expires_in=3599,
        scope="https://www.googleapis.com/auth/drive",
    )


@pytest.fixture
def sample_entry() -> CatalogEntry:
    """Create a sample catalog entry."""
    return CatalogEntry(
        file_id="file1",
        name="data.json",
        mime_type="application/json",
        folder_path="Projects",
        view_link="https://drive.google.com/file/d/file1/view",
        thumbnail=None,
        modified_time=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_drive_service() -> Mock:
    """Create a mock Drive API service."""
    service = Mock()
    files_resource = Mock()
    service.files.return_value = files_resource
    return service


@pytest.fixture
def drive_client(mock_drive_service: Mock) -> DriveClient:
    """Create a Drive client around the mock service."""
    return DriveClient(service=mock_drive_service)


@pytest.fixture
def drive_backend() -> Any:
    """Factory for mock Drive services with canned listings and folders."""
    return make_drive_service
