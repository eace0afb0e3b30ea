"""Data models for remote files and catalog entries."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


def parse_rfc3339(value: Optional[str]) -> Optional[datetime]:
    """Parse a Drive RFC 3339 timestamp into an aware datetime."""
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def join_path(folder_path: str, name: str) -> str:
    """Append a file name to a folder path."""
    return f"{folder_path}/{name}" if folder_path else name


@dataclass
class RemoteFileRecord:
    """A file as returned by the Drive listing call."""

    file_id: str
    name: str
    mime_type: str = ""
    parents: list[str] = field(default_factory=list)
    modified_time: Optional[datetime] = None
    web_view_link: Optional[str] = None
    thumbnail_link: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RemoteFileRecord":
        """Parse a Drive file resource.

        Args:
            data: File resource from the API

        Returns:
            RemoteFileRecord instance
        """
        return cls(
            file_id=data["id"],
            name=data.get("name", ""),
            mime_type=data.get("mimeType", ""),
            parents=list(data.get("parents") or []),
            modified_time=parse_rfc3339(data.get("modifiedTime")),
            web_view_link=data.get("webViewLink"),
            thumbnail_link=data.get("thumbnailLink"),
        )


@dataclass(frozen=True)
class FolderNode:
    """Folder metadata cached while resolving paths."""

    folder_id: str
    name: str
    parents: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "FolderNode":
        return cls(
            folder_id=data["id"],
            name=data.get("name", ""),
            parents=tuple(data.get("parents") or ()),
        )

    @property
    def first_parent(self) -> Optional[str]:
        """Parent followed when climbing; Drive's extra parents are ignored."""
        return self.parents[0] if self.parents else None


@dataclass
class CatalogEntry:
    """A listed file annotated with its full folder path."""

    file_id: str
    name: str
    mime_type: str
    folder_path: str = ""
    view_link: Optional[str] = None
    thumbnail: Optional[str] = None
    modified_time: Optional[datetime] = None

    @property
    def full_path(self) -> str:
        """Folder path and file name joined by "/"."""
        return join_path(self.folder_path, self.name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "id": self.file_id,
            "name": self.name,
            "mime_type": self.mime_type,
            "view_link": self.view_link,
            "thumbnail": self.thumbnail,
            "modified_time": self.modified_time.isoformat() if self.modified_time else None,
            "folder_path": self.folder_path,
            "full_path": self.full_path,
        }
