"""Authentication commands."""

import json

import typer

from ..auth.oauth import CredentialExchanger, build_authorization_url
from ..common.exceptions import AuthenticationError, ConfigError
from ..config.settings import get_settings
from .formatters import console, print_error, print_info, print_panel, print_success

auth_app = typer.Typer(help="Authorize access to Google Drive")


@auth_app.command("url")
def url() -> None:
    """Print the consent URL that yields an authorization code."""
    settings = get_settings()

    if not settings.has_oauth_client:
        print_error(
            "OAuth client not configured. Set GDRIVE_CATALOG_CLIENT_ID, "
            "GDRIVE_CATALOG_CLIENT_SECRET and GDRIVE_CATALOG_REDIRECT_URI."
        )
        raise typer.Exit(1)

    consent_url = build_authorization_url(
        client_id=settings.client_id,
        client_secret=settings.client_secret.get_secret_value(),
        redirect_uri=settings.redirect_uri,
        auth_uri=settings.auth_uri,
        token_uri=settings.token_uri,
    )
    print_info("Open this URL, approve access and copy the 'code' parameter:")
    console.print(consent_url, soft_wrap=True)


@auth_app.command("exchange")
def exchange(
    code: str = typer.Argument(..., help="Authorization code from the redirect"),
    as_json: bool = typer.Option(False, "--json", help="Print the token as JSON"),
) -> None:
    """Exchange an authorization code for an access token (not stored)."""
    settings = get_settings()

    try:
        exchanger = CredentialExchanger.from_settings(settings)
        token = exchanger.exchange(code)
    except (AuthenticationError, ConfigError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(token.to_dict()))
        return

    print_success("Authorization code exchanged")
    lines = [f"Access token: {token.access_token}"]
    if token.refresh_token:
        lines.append(f"Refresh token: {token.refresh_token}")
    if token.expiry:
        lines.append(f"Expires: {token.expiry.isoformat()} UTC")
    if token.scopes:
        lines.append("Scopes: " + ", ".join(token.scopes))
    print_panel("Token", "\n".join(lines), style="green")
    print_info("Pass the access token with --token or GDRIVE_CATALOG_ACCESS_TOKEN.")
