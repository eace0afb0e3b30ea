"""Google Drive API client factory."""

from dataclasses import dataclass
from typing import Any, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from ..common.constants import DEFAULT_USER_KEY, SCOPES, TOKEN_URI
from ..common.exceptions import MissingAccessToken
from ..common.logging import get_logger
from ..config.settings import Settings
from .models import TokenResponse

logger = get_logger(__name__)


@dataclass
class DriveClient:
    """Authenticated Drive API handle for a single operation."""

    service: Any
    user_key: str = DEFAULT_USER_KEY
    credentials: Optional[Credentials] = None
    scopes: tuple[str, ...] = SCOPES

    def files(self) -> Any:
        """Drive ``files`` collection."""
        return self.service.files()


class DriveServiceFactory:
    """Factory for creating authenticated Drive API clients."""

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        token_uri: str = TOKEN_URI,
    ) -> None:
        """Initialize service factory.

        Client id and secret are only needed to refresh expired tokens.

        Args:
            client_id: OAuth client ID
            client_secret: OAuth client secret
            token_uri: Token endpoint used for refreshes
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.token_uri = token_uri

    @classmethod
    def from_settings(cls, settings: Settings) -> "DriveServiceFactory":
        """Create a factory from application settings."""
        return cls(
            client_id=settings.client_id or None,
            client_secret=settings.client_secret.get_secret_value() or None,
            token_uri=settings.token_uri,
        )

    def create_client(
        self,
        token: Optional[TokenResponse],
        user_key: str = DEFAULT_USER_KEY,
    ) -> DriveClient:
        """Create an authenticated Drive client.

        No network call is made; the bundled discovery document is used.

        Args:
            token: Bearer credentials from the code exchange
            user_key: Opaque correlation label for the credential binding

        Returns:
            DriveClient bound to the token and ``SCOPES``

        Raises:
            MissingAccessToken: If the token is absent or blank
            ValueError: If user_key is empty
        """
        if token is None or not token.has_access_token:
            raise MissingAccessToken("Missing access token.")
        if not user_key:
            raise ValueError("user_key must be a non-empty string")

        creds = Credentials(
            token=token.access_token,
            refresh_token=token.refresh_token,
            token_uri=self.token_uri,
            client_id=self.client_id,
            client_secret=self.client_secret,
            scopes=list(SCOPES),
            expiry=token.expiry,
        )
        service = build("drive", "v3", credentials=creds, cache_discovery=False)
        logger.debug(f"Created Drive API client for {user_key}")

        return DriveClient(
            service=service,
            user_key=user_key,
            credentials=creds,
            scopes=SCOPES,
        )
