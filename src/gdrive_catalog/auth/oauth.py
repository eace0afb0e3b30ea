"""OAuth2 authorization code exchange."""

from typing import Any, Optional

import requests
from google_auth_oauthlib.flow import Flow

from ..common.constants import AUTH_URI, GRANT_TYPE, HTTP_TIMEOUT, SCOPES, TOKEN_URI
from ..common.exceptions import ConfigError, InvalidTokenResponse, TokenExchangeError
from ..common.logging import get_logger
from ..config.settings import Settings
from .models import TokenResponse

logger = get_logger(__name__)


def build_authorization_url(
    client_id: str,
    client_secret: str,
    redirect_uri: str,
    auth_uri: str = AUTH_URI,
    token_uri: str = TOKEN_URI,
) -> str:
    """Build the consent URL the user visits to obtain an authorization code.

    The URL advertises ``SCOPES``, the same scopes the Drive client is
    built with, so granted and used permissions never diverge.

    Args:
        client_id: OAuth client ID
        client_secret: OAuth client secret
        redirect_uri: Redirect URI registered for the client
        auth_uri: Authorization endpoint
        token_uri: Token endpoint

    Returns:
        Authorization URL
    """
    client_config = {
        "web": {
            "client_id": client_id,
            "client_secret": client_secret,
            "auth_uri": auth_uri,
            "token_uri": token_uri,
            "redirect_uris": [redirect_uri],
        }
    }
    # No PKCE: the code is redeemed by CredentialExchanger without a verifier
    flow = Flow.from_client_config(
        client_config,
        scopes=list(SCOPES),
        redirect_uri=redirect_uri,
        autogenerate_code_verifier=False,
    )
    url, _state = flow.authorization_url(access_type="offline", prompt="consent")
    return url


class CredentialExchanger:
    """Exchanges authorization codes for bearer credentials."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        token_uri: str = TOKEN_URI,
        timeout: float = HTTP_TIMEOUT,
    ) -> None:
        """Initialize credential exchanger.

        Args:
            client_id: OAuth client ID
            client_secret: OAuth client secret
            redirect_uri: Redirect URI used when the code was issued
            token_uri: Token endpoint
            timeout: Request timeout in seconds
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.token_uri = token_uri
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialExchanger":
        """Create an exchanger from application settings.

        Raises:
            ConfigError: If the OAuth client is not fully configured
        """
        if not settings.has_oauth_client:
            raise ConfigError(
                "OAuth client not configured. Set GDRIVE_CATALOG_CLIENT_ID, "
                "GDRIVE_CATALOG_CLIENT_SECRET and GDRIVE_CATALOG_REDIRECT_URI."
            )
        return cls(
            client_id=settings.client_id,
            client_secret=settings.client_secret.get_secret_value(),
            redirect_uri=settings.redirect_uri,
            token_uri=settings.token_uri,
            timeout=settings.http_timeout,
        )

    def exchange(self, code: str) -> TokenResponse:
        """Exchange an authorization code for an access token.

        Args:
            code: Authorization code from the redirect

        Returns:
            Token with a non-blank access token

        Raises:
            TokenExchangeError: If the token endpoint reports an error
            InvalidTokenResponse: If no access token was returned
        """
        payload = {
            "code": code,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "grant_type": GRANT_TYPE,
        }

        logger.debug(f"Exchanging authorization code at {self.token_uri}")
        resp = requests.post(self.token_uri, data=payload, timeout=self.timeout)
        body = self._parse_body(resp)

        if not resp.ok:
            logger.warning(
                f"Token endpoint returned {resp.status_code}: {body.get('error')}"
            )
            raise TokenExchangeError(
                error=body.get("error"),
                description=body.get("error_description"),
                status_code=resp.status_code,
            )

        token = TokenResponse.from_response(body)
        if not token.has_access_token:
            raise InvalidTokenResponse(resp.text)

        logger.info("Exchanged authorization code for access token")
        return token

    @staticmethod
    def _parse_body(resp: requests.Response) -> dict[str, Any]:
        """Decode a token endpoint body, whatever the status code.

        Args:
            resp: Token endpoint response

        Returns:
            Decoded JSON object, or an empty dict if the body is not one
        """
        try:
            body: Optional[Any] = resp.json()
        except ValueError:
            logger.debug("Token endpoint body is not JSON")
            return {}
        return body if isinstance(body, dict) else {}
