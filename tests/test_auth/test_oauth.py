"""Tests for the authorization code exchange."""

from unittest.mock import Mock, patch
from urllib.parse import parse_qs, urlparse

import pytest

from gdrive_catalog.auth.oauth import CredentialExchanger, build_authorization_url
from gdrive_catalog.common.constants import SCOPES
from gdrive_catalog.common.exceptions import (
    ConfigError,
    InvalidTokenResponse,
    TokenExchangeError,
)
from gdrive_catalog.config.settings import Settings


def _response(status_code: int, body: object, text: str = "") -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    resp.text = text or str(body)
    return resp


@pytest.fixture
def exchanger() -> CredentialExchanger:
    return CredentialExchanger(
        client_id="client-123",
        client_secret="shh",
        redirect_uri="http://localhost:8080/callback",
    )


def test_exchange_returns_token(exchanger: CredentialExchanger) -> None:
    """Test a successful exchange returns the access and refresh tokens."""
    body = {
        "access_token": "ya29.token",
        "refresh_token": "1//refresh",
        "expires_in": 3599,
        "scope": SCOPES[0],
        "token_type": "Bearer",
    }

    with patch("gdrive_catalog.auth.oauth.requests.post", return_value=_response(200, body)) as post:
        token = exchanger.exchange("4/auth-code")

    assert token.access_token == "ya29.token"
    assert token.refresh_token == "1//refresh"
    assert token.has_access_token
    assert token.scopes == [SCOPES[0]]

    args, kwargs = post.call_args
    assert args[0] == "https://oauth2.googleapis.com/token"
    assert kwargs["data"] == {
        "code": "4/auth-code",
        "client_id": "client-123",
        "client_secret": "shh",
        "redirect_uri": "http://localhost:8080/callback",
        "grant_type": "authorization_code",
    }
    assert kwargs["timeout"] == 30.0


def test_exchange_rejected_code(exchanger: CredentialExchanger) -> None:
    """Test the endpoint's error code and description are carried."""
    body = {"error": "invalid_grant", "error_description": "Bad Request"}

    with patch("gdrive_catalog.auth.oauth.requests.post", return_value=_response(400, body)):
        with pytest.raises(TokenExchangeError) as exc_info:
            exchanger.exchange("expired")

    assert exc_info.value.error == "invalid_grant"
    assert exc_info.value.description == "Bad Request"
    assert exc_info.value.status_code == 400
    assert "invalid_grant" in str(exc_info.value)


def test_exchange_error_without_details(exchanger: CredentialExchanger) -> None:
    """Test placeholder text when the error body has no error fields."""
    with patch(
        "gdrive_catalog.auth.oauth.requests.post",
        return_value=_response(500, ValueError("not json"), text="<html>oops</html>"),
    ):
        with pytest.raises(TokenExchangeError) as exc_info:
            exchanger.exchange("code")

    assert exc_info.value.error == "(no error)"
    assert exc_info.value.description == ""


@pytest.mark.parametrize("access_token", [None, "", "   "])
def test_exchange_blank_access_token(exchanger: CredentialExchanger, access_token: object) -> None:
    """Test a success response without an access token is rejected."""
    body = {"access_token": access_token, "token_type": "Bearer"}
    raw = '{"access_token": null}'

    with patch(
        "gdrive_catalog.auth.oauth.requests.post",
        return_value=_response(200, body, text=raw),
    ):
        with pytest.raises(InvalidTokenResponse) as exc_info:
            exchanger.exchange("code")

    assert exc_info.value.raw_body == raw
    assert raw in str(exc_info.value)


def test_from_settings_requires_client() -> None:
    """Test exchanger creation fails without client configuration."""
    settings = Settings(_env_file=None, client_id="id", redirect_uri="")

    with pytest.raises(ConfigError):
        CredentialExchanger.from_settings(settings)


def test_from_settings() -> None:
    """Test exchanger picks up client configuration."""
    settings = Settings(
        _env_file=None,
        client_id="id",
        client_secret="secret",
        redirect_uri="http://localhost/cb",
        http_timeout=5,
    )

    exchanger = CredentialExchanger.from_settings(settings)

    assert exchanger.client_secret == "secret"
    assert exchanger.timeout == 5


def test_authorization_url_advertises_client_scopes() -> None:
    """Test the consent URL requests the scopes the client is built with."""
    url = build_authorization_url(
        client_id="client-123",
        client_secret="shh",
        redirect_uri="http://localhost:8080/callback",
    )

    parsed = urlparse(url)
    params = parse_qs(parsed.query)

    assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == (
        "https://accounts.google.com/o/oauth2/v2/auth"
    )
    assert params["response_type"] == ["code"]
    assert params["client_id"] == ["client-123"]
    assert params["redirect_uri"] == ["http://localhost:8080/callback"]
    assert params["scope"][0].split() == list(SCOPES)
    assert params["access_type"] == ["offline"]
    assert params["prompt"] == ["consent"]
    assert "code_challenge" not in params
