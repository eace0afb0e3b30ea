"""File catalog and content commands."""

import json
import mimetypes
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from googleapiclient.errors import HttpError
from humanize import naturalsize, naturaltime

from ..auth.models import TokenResponse
from ..auth.service import DriveClient, DriveServiceFactory
from ..catalog.path_resolver import FolderPathResolver
from ..catalog.query import FileCatalogQuery
from ..common.constants import DEFAULT_MIME_TYPE
from ..common.exceptions import GDriveCatalogError
from ..config.settings import get_settings
from ..content.accessor import FileContentAccessor
from .formatters import console, create_table, print_error, print_info, print_success

files_app = typer.Typer(help="List, download and update Drive files")

TOKEN_OPTION = typer.Option(
    ..., "--token", "-t", envvar="GDRIVE_CATALOG_ACCESS_TOKEN", help="OAuth access token"
)
REFRESH_TOKEN_OPTION = typer.Option(
    None,
    "--refresh-token",
    envvar="GDRIVE_CATALOG_REFRESH_TOKEN",
    help="OAuth refresh token",
)


def _client(token: str, refresh_token: Optional[str]) -> DriveClient:
    settings = get_settings()
    factory = DriveServiceFactory.from_settings(settings)
    return factory.create_client(
        TokenResponse(access_token=token, refresh_token=refresh_token),
        user_key=settings.user_key,
    )


def _relative_time(value: Optional[datetime]) -> str:
    if value is None:
        return "-"
    # humanize compares against naive local time
    return naturaltime(value.astimezone().replace(tzinfo=None))


@files_app.command("list")
def list_files(
    token: str = TOKEN_OPTION,
    refresh_token: Optional[str] = REFRESH_TOKEN_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print entries as JSON"),
) -> None:
    """List XML, TXT and JSON files with their full paths."""
    settings = get_settings()

    try:
        client = _client(token, refresh_token)
        query = FileCatalogQuery(
            resolver=FolderPathResolver(max_depth=settings.max_folder_depth),
            page_size=settings.page_size,
        )
        entries = query.list_files(client)
    except (GDriveCatalogError, HttpError) as e:
        print_error(f"Listing failed: {e}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps([entry.to_dict() for entry in entries]))
        return

    if not entries:
        print_info("No matching files found")
        return

    table = create_table(title="Drive files")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Path", style="white")
    table.add_column("Type", style="yellow")
    table.add_column("Modified", style="green")

    for entry in entries:
        table.add_row(
            entry.file_id,
            entry.full_path,
            entry.mime_type,
            _relative_time(entry.modified_time),
        )

    console.print(table)
    print_success(f"{len(entries)} files")


@files_app.command("download")
def download(
    file_id: str = typer.Argument(..., help="Drive file ID"),
    token: str = TOKEN_OPTION,
    refresh_token: Optional[str] = REFRESH_TOKEN_OPTION,
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output path (default: download dir / file name)"
    ),
) -> None:
    """Download a file's content."""
    settings = get_settings()

    try:
        client = _client(token, refresh_token)
        downloaded = FileContentAccessor().download(client, file_id)
    except (GDriveCatalogError, HttpError) as e:
        print_error(f"Download failed: {e}")
        raise typer.Exit(1)

    target = output or settings.download_dir / Path(downloaded.name).name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(downloaded.content)

    print_success(
        f"Saved {downloaded.name} ({downloaded.mime_type}, "
        f"{naturalsize(downloaded.size)}) to {target}"
    )


@files_app.command("upload")
def upload(
    file_id: str = typer.Argument(..., help="Drive file ID to replace"),
    source: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Local file with new content"
    ),
    token: str = TOKEN_OPTION,
    refresh_token: Optional[str] = REFRESH_TOKEN_OPTION,
    mime_type: Optional[str] = typer.Option(
        None, "--mime-type", "-m", help="Content MIME type (default: guessed)"
    ),
) -> None:
    """Replace a file's content in place."""
    content = source.read_bytes()
    mime_type = mime_type or mimetypes.guess_type(source.name)[0] or DEFAULT_MIME_TYPE

    try:
        client = _client(token, refresh_token)
        FileContentAccessor().upload(client, file_id, content, mime_type)
    except (GDriveCatalogError, HttpError) as e:
        print_error(f"Upload failed: {e}")
        raise typer.Exit(1)

    print_success(f"Updated {file_id} with {naturalsize(len(content))} from {source}")
