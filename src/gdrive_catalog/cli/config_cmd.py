"""Configuration commands."""

import typer

from ..config.settings import get_settings
from .formatters import console, create_table

config_app = typer.Typer(help="Inspect configuration settings")


@config_app.command()
def show() -> None:
    """Show current configuration."""
    settings = get_settings()

    table = create_table(title="Configuration")
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", style="white")

    table.add_row("Client ID", settings.client_id or "None")
    table.add_row("Client secret", "********" if settings.client_secret.get_secret_value() else "None")
    table.add_row("Redirect URI", settings.redirect_uri or "None")
    table.add_row("Token URI", settings.token_uri)
    table.add_row("User key", settings.user_key)
    table.add_row("Page size", str(settings.page_size))
    table.add_row("HTTP timeout (s)", str(settings.http_timeout))
    table.add_row("Max folder depth", str(settings.max_folder_depth))
    table.add_row("Download dir", str(settings.download_dir))
    table.add_row("Log level", settings.log_level)
    table.add_row("Log file", str(settings.log_file) if settings.log_file else "None")

    console.print(table)
