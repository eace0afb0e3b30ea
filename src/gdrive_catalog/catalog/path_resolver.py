"""Folder path reconstruction from parent chains."""

from typing import Optional

from ..auth.service import DriveClient
from ..common.constants import MAX_FOLDER_DEPTH, ROOT_FOLDER_ID
from ..common.exceptions import FolderCycleError
from ..common.logging import get_logger
from .models import FolderNode

logger = get_logger(__name__)

FOLDER_FIELDS = "id,name,parents"

FolderMemo = dict[str, FolderNode]


class FolderPathResolver:
    """Resolves slash-delimited folder paths by climbing first parents.

    Drive historically allowed several parents per item. Only the first one
    is followed, so every file resolves to exactly one path.
    """

    def __init__(self, max_depth: int = MAX_FOLDER_DEPTH) -> None:
        """Initialize path resolver.

        Args:
            max_depth: Maximum number of folders climbed for one path
        """
        self.max_depth = max_depth

    def resolve_path(
        self,
        client: DriveClient,
        parent_ids: Optional[list[str]],
        memo: FolderMemo,
    ) -> str:
        """Get the folder path of a file from its parent IDs.

        Args:
            client: Authenticated Drive client
            parent_ids: Parent folder IDs of the file
            memo: Folder cache shared by one catalog query, updated in place

        Returns:
            Folder names joined by "/", shallowest first; "" at the top level

        Raises:
            FolderCycleError: If the chain revisits a folder or is too deep
            HttpError: If a folder lookup fails
        """
        if not parent_ids:
            return ""

        segments: list[str] = []
        visited: list[str] = []
        current_id: Optional[str] = parent_ids[0]

        while current_id and current_id != ROOT_FOLDER_ID:
            if current_id in visited or len(visited) >= self.max_depth:
                raise FolderCycleError(current_id, visited)
            visited.append(current_id)

            node = memo.get(current_id)
            if node is None:
                node = self._fetch_folder(client, current_id)
                memo[current_id] = node

            segments.insert(0, node.name)
            current_id = node.first_parent

        return "/".join(segments)

    def _fetch_folder(self, client: DriveClient, folder_id: str) -> FolderNode:
        """Fetch folder metadata.

        Args:
            client: Authenticated Drive client
            folder_id: Folder ID

        Returns:
            FolderNode for the folder
        """
        logger.debug(f"Fetching folder metadata for {folder_id}")
        data = (
            client.files()
            .get(fileId=folder_id, fields=FOLDER_FIELDS, supportsAllDrives=True)
            .execute()
        )
        return FolderNode.from_api(data)
