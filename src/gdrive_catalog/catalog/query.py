"""Catalog listing of text-like Drive files."""

from typing import Iterable, Optional

from ..auth.service import DriveClient
from ..common.constants import CATALOG_EXTENSIONS, FOLDER_MIME_TYPE, PAGE_SIZE
from ..common.logging import get_logger
from .models import CatalogEntry, RemoteFileRecord
from .path_resolver import FolderMemo, FolderPathResolver

logger = get_logger(__name__)

LIST_FIELDS = (
    "nextPageToken, files(id, name, parents, mimeType, webViewLink, "
    "thumbnailLink, modifiedTime)"
)


def matches_extension(name: str, extensions: Iterable[str] = CATALOG_EXTENSIONS) -> bool:
    """Check if a file name ends with one of the extensions (case-insensitive)."""
    lowered = name.lower()
    return any(lowered.endswith(ext.lower()) for ext in extensions)


def build_listing_query(extensions: Iterable[str] = CATALOG_EXTENSIONS) -> str:
    """Build the Drive ``q`` expression for the catalog listing.

    ``name contains`` is only a server-side hint; names are filtered again
    with :func:`matches_extension`.

    Args:
        extensions: File extensions to match

    Returns:
        Drive query string
    """
    name_clauses = " or ".join(f"name contains '{ext}'" for ext in extensions)
    return f"mimeType != '{FOLDER_MIME_TYPE}' and ({name_clauses})"


class FileCatalogQuery:
    """Lists catalog files and annotates them with full paths."""

    def __init__(
        self,
        resolver: Optional[FolderPathResolver] = None,
        page_size: int = PAGE_SIZE,
        extensions: Iterable[str] = CATALOG_EXTENSIONS,
    ) -> None:
        """Initialize catalog query.

        Args:
            resolver: Folder path resolver
            page_size: Number of files requested from the listing call
            extensions: File extensions included in the catalog
        """
        self.resolver = resolver or FolderPathResolver()
        self.page_size = page_size
        self.extensions = tuple(extensions)

    def list_files(self, client: DriveClient) -> list[CatalogEntry]:
        """List matching files with their full paths.

        Only the first page of the listing is read.

        Args:
            client: Authenticated Drive client

        Returns:
            Catalog entries in listing order

        Raises:
            HttpError: If the listing or a folder lookup fails
            FolderCycleError: If a parent chain does not terminate
        """
        response = (
            client.files()
            .list(
                q=build_listing_query(self.extensions),
                pageSize=self.page_size,
                fields=LIST_FIELDS,
            )
            .execute()
        )

        files = response.get("files", [])
        if response.get("nextPageToken"):
            logger.info(
                f"Listing truncated to the first {len(files)} files; "
                "further pages are not fetched"
            )

        records = [RemoteFileRecord.from_api(data) for data in files]
        candidates = [r for r in records if matches_extension(r.name, self.extensions)]
        logger.debug(f"{len(candidates)}/{len(records)} listed files match the filter")

        memo: FolderMemo = {}
        entries = [self._to_entry(client, record, memo) for record in candidates]

        logger.info(f"Cataloged {len(entries)} files ({len(memo)} folders resolved)")
        return entries

    def _to_entry(
        self,
        client: DriveClient,
        record: RemoteFileRecord,
        memo: FolderMemo,
    ) -> CatalogEntry:
        """Resolve a record's folder path and build its catalog entry."""
        folder_path = self.resolver.resolve_path(client, record.parents, memo)
        return CatalogEntry(
            file_id=record.file_id,
            name=record.name,
            mime_type=record.mime_type,
            folder_path=folder_path,
            view_link=record.web_view_link,
            thumbnail=record.thumbnail_link,
            modified_time=record.modified_time,
        )
