"""Main CLI application."""

import typer

from ..common.logging import setup_logging
from ..config.settings import get_settings
from .auth_cmd import auth_app
from .config_cmd import config_app
from .files_cmd import files_app

app = typer.Typer(
    name="gdrive-catalog",
    help="List, download and update text files in Google Drive",
    add_completion=False,
)

# Register subcommands
app.add_typer(auth_app, name="auth")
app.add_typer(files_app, name="files")
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Google Drive text file catalog."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, log_file=settings.log_file)
