"""Custom exception hierarchy.

Failures of remote Drive calls are not wrapped: they surface as
``googleapiclient.errors.HttpError`` exactly as the client library raised them.
"""

from typing import Optional


class GDriveCatalogError(Exception):
    """Base exception for all gdrive-catalog errors."""


class AuthenticationError(GDriveCatalogError):
    """Authentication or authorization failed."""


class TokenExchangeError(AuthenticationError):
    """Token endpoint rejected the authorization code."""

    def __init__(
        self,
        error: Optional[str] = None,
        description: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.error = error or "(no error)"
        self.description = description or ""
        self.status_code = status_code
        super().__init__(
            f"OAuth token exchange failed: {self.error}. {self.description}".rstrip()
        )


class InvalidTokenResponse(AuthenticationError):
    """Token endpoint answered successfully but without an access token."""

    def __init__(self, raw_body: str) -> None:
        self.raw_body = raw_body
        super().__init__(f"OAuth exchange did not return access_token. Raw: {raw_body}")


class MissingAccessToken(AuthenticationError):
    """Client creation attempted without a usable access token."""


class PathResolutionError(GDriveCatalogError):
    """Error while reconstructing a file's folder path."""


class FolderCycleError(PathResolutionError):
    """Parent chain revisits a folder or exceeds the depth limit."""

    def __init__(self, folder_id: str, chain: list[str]) -> None:
        self.folder_id = folder_id
        self.chain = chain
        super().__init__(
            f"Folder chain does not terminate at {folder_id} "
            f"(visited: {' -> '.join(chain)})"
        )


class TransferError(GDriveCatalogError):
    """Error transferring file content."""


class UploadIncomplete(TransferError):
    """Upload did not reach the completed state."""

    def __init__(self, status: str, cause: Optional[str] = None) -> None:
        self.status = status
        self.cause = cause
        super().__init__(f"Drive update failed: {cause or status}")


class ConfigError(GDriveCatalogError):
    """Configuration error."""
