"""Download and in-place upload of Drive file content."""

import io
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from googleapiclient.errors import HttpError, ResumableUploadError
from googleapiclient.http import MediaIoBaseDownload, MediaIoBaseUpload

from ..auth.service import DriveClient
from ..common.constants import DEFAULT_MIME_TYPE
from ..common.exceptions import UploadIncomplete
from ..common.logging import get_logger

logger = get_logger(__name__)

METADATA_FIELDS = "id,name,mimeType"


@dataclass(frozen=True)
class DownloadedFile:
    """Raw file content with its name and MIME type."""

    content: bytes
    name: str
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.content)


class UploadStatus(str, Enum):
    """Final state of a resumable upload."""

    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class UploadResult:
    """Outcome of driving an upload request to its end."""

    status: UploadStatus
    response: Optional[dict[str, Any]] = None
    cause: Optional[str] = None
    error: Optional[HttpError] = None


class FileContentAccessor:
    """Reads and replaces the bytes of known Drive files."""

    def __init__(self, chunk_size: int = 1024 * 1024) -> None:
        """Initialize content accessor.

        Args:
            chunk_size: Transfer chunk size in bytes
        """
        self.chunk_size = chunk_size

    def download(self, client: DriveClient, file_id: str) -> DownloadedFile:
        """Download a file's metadata and content.

        Args:
            client: Authenticated Drive client
            file_id: File ID

        Returns:
            Downloaded content, name and MIME type

        Raises:
            HttpError: If either the metadata or the content call fails
        """
        meta = (
            client.files()
            .get(fileId=file_id, fields=METADATA_FIELDS, supportsAllDrives=True)
            .execute()
        )
        content = self._fetch_content(client, file_id)

        logger.info(f"Downloaded {len(content)} bytes from {file_id}")
        return DownloadedFile(
            content=content,
            name=meta.get("name") or file_id,
            mime_type=meta.get("mimeType") or DEFAULT_MIME_TYPE,
        )

    def get_file_bytes(
        self,
        client: DriveClient,
        file_id: str,
        name: str,
        mime_type: str,
    ) -> DownloadedFile:
        """Download content only, for a file whose metadata is already known."""
        return DownloadedFile(
            content=self._fetch_content(client, file_id),
            name=name,
            mime_type=mime_type,
        )

    def upload(
        self,
        client: DriveClient,
        file_id: str,
        content: bytes,
        mime_type: str,
        expected_etag: Optional[str] = None,
    ) -> bool:
        """Replace a file's content in place.

        Args:
            client: Authenticated Drive client
            file_id: File ID to update
            content: New file content
            mime_type: MIME type of the content
            expected_etag: Accepted for API compatibility, not enforced

        Returns:
            True once the upload completed

        Raises:
            UploadIncomplete: If the upload did not complete, including a
                rejection when the upload session starts (chained from the
                HttpError)
            HttpError: If a chunk fails after the upload has started
        """
        if expected_etag is not None:
            logger.debug(f"Ignoring expected revision {expected_etag} for {file_id}")

        media = MediaIoBaseUpload(
            io.BytesIO(content),
            mimetype=mime_type,
            chunksize=self.chunk_size,
            resumable=True,
        )
        request = client.files().update(
            fileId=file_id,
            body={},
            media_body=media,
            supportsAllDrives=True,
        )

        result = self._run_upload(request)
        if result.status is not UploadStatus.COMPLETED:
            raise UploadIncomplete(result.status.value, result.cause) from result.error

        logger.info(f"Updated content of {file_id} ({len(content)} bytes)")
        return True

    def update_text(
        self,
        client: DriveClient,
        file_id: str,
        text: Optional[str],
        mime_type: Optional[str] = "application/xml",
        expected_etag: Optional[str] = None,
    ) -> bool:
        """Replace a file's content with UTF-8 encoded text."""
        return self.upload(
            client,
            file_id,
            (text or "").encode("utf-8"),
            mime_type or "text/plain",
            expected_etag=expected_etag,
        )

    def _fetch_content(self, client: DriveClient, file_id: str) -> bytes:
        """Stream a file's content into memory."""
        request = client.files().get_media(fileId=file_id, supportsAllDrives=True)

        buffer = io.BytesIO()
        downloader = MediaIoBaseDownload(buffer, request, chunksize=self.chunk_size)
        done = False
        while not done:
            status, done = downloader.next_chunk()
            if status:
                logger.debug(f"Download {int(status.progress() * 100)}%")

        return buffer.getvalue()

    def _run_upload(self, request: Any) -> UploadResult:
        """Drive a resumable upload request until it finishes.

        Args:
            request: Drive update request with resumable media

        Returns:
            UploadResult with the final status
        """
        response = None
        try:
            while response is None:
                status, response = request.next_chunk()
                if status:
                    logger.debug(f"Upload {int(status.progress() * 100)}%")
        except ResumableUploadError as e:
            return UploadResult(UploadStatus.FAILED, cause=str(e), error=e)

        if not response.get("id"):
            return UploadResult(
                UploadStatus.FAILED,
                response=response,
                cause="Drive returned no file resource",
            )
        return UploadResult(UploadStatus.COMPLETED, response=response)
