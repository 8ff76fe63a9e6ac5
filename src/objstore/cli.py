#!/usr/bin/env python3
"""
Object Storage CLI
"""
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from objstore import __version__
from objstore.application.ports.storage import IStorage
from objstore.config import settings
from objstore.dependencies import create_storage, get_storage
from objstore.domain.exceptions import StorageError

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option('--options', 'options_json', envvar='STORAGE_OPTIONS',
              help='JSON storage options: {"client": {...}, "bucket": "..."}')
@click.option('--options-file', type=click.Path(exists=True, dir_okay=False),
              help='File holding the JSON storage options')
@click.option('--log-level', default=settings.LOG_LEVEL, show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx: click.Context, options_json: Optional[str], options_file: Optional[str], log_level: str):
    """
    🪣 objstore - generic storage operations on S3 compatible object stores

    Without options, storage comes from the environment (local fallback when S3 is not configured).
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if options_file:
        options_json = Path(options_file).read_text(encoding='utf-8')

    ctx.obj = {'options': options_json}


def _storage(ctx: click.Context) -> IStorage:
    options_json = ctx.obj.get('options')
    try:
        if options_json:
            return create_storage(options_json)
        return get_storage()
    except StorageError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        sys.exit(1)


@cli.command()
@click.argument('path')
@click.pass_context
def get(ctx: click.Context, path: str):
    """Print the normalized form of PATH."""
    click.echo(_storage(ctx).get(path))


@cli.command()
@click.argument('path')
@click.pass_context
def exists(ctx: click.Context, path: str):
    """
    Check whether PATH exists. Exit code 0 if it does, 1 otherwise.

    Example:
        objstore exists reports/2024/summary.json
    """
    try:
        found = _storage(ctx).exists(path)
    except StorageError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        sys.exit(1)

    if found:
        console.print(f"[green]✓[/green] {escape(path)} exists")
    else:
        console.print(f"[yellow]✗[/yellow] {escape(path)} not found")
        sys.exit(1)


@cli.command()
@click.argument('path')
@click.option('--recursive/--no-recursive', default=True, help='Create missing parents')
@click.pass_context
def mkdir(ctx: click.Context, path: str, recursive: bool):
    """Create directory PATH."""
    try:
        _storage(ctx).mkdir(path, recursive=recursive)
    except StorageError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Created: {escape(path)}")


@cli.command()
@click.argument('source', type=click.Path(dir_okay=False))
@click.argument('path')
@click.pass_context
def put(ctx: click.Context, source: str, path: str):
    """
    Upload local file SOURCE to PATH, replacing any existing object.

    Example:
        objstore put ./summary.json reports/2024/summary.json
    """
    try:
        _storage(ctx).put(source, path)
    except StorageError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Uploaded: {escape(source)} → {escape(path)}")


@cli.command()
@click.argument('source', type=click.Path(dir_okay=False))
@click.argument('path')
@click.pass_context
def append(ctx: click.Context, source: str, path: str):
    """
    Append local file SOURCE to the existing object at PATH.

    Not atomic: concurrent appends to the same PATH may lose data.
    """
    try:
        _storage(ctx).append(source, path)
    except StorageError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Appended: {escape(source)} → {escape(path)}")


if __name__ == '__main__':
    cli()
