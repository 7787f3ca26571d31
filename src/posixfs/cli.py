"""
posixfs CLI

Exposes the shorthand filesystem functions as commands:
- combine/resolve: Pure path algebra, no filesystem access
- ls/size: Inspect a directory or file
- mkdir/touch: Create directories and files
- rm/clean: Delete a path or empty a directory
- cp/mv: Copy or move files and directory content
"""
from __future__ import annotations

import logging
from typing import List

import typer

from . import fs
from .mappers import run_and_exit
from .path import Path
from .settings import create_settings_from_env

app = typer.Typer(name="posixfs", help="POSIX path algebra and filesystem helpers")


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every translated OS failure")
) -> None:
    """POSIX path algebra and filesystem helpers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def combine(
    parts: List[str] = typer.Argument(..., help="Path fragments to combine")
) -> None:
    """Combine fragments into one normalized path."""
    run_and_exit(lambda: typer.echo(fs.combine(*parts)))


@app.command()
def resolve(
    parts: List[str] = typer.Argument(..., help="Path fragments to combine and resolve")
) -> None:
    """Combine fragments and resolve '.', '..' and a leading '~'."""
    run_and_exit(lambda: typer.echo(fs.realpath(*parts)))


@app.command()
def ls(
    path: str = typer.Argument(".", help="Directory to list"),
    all_entries: bool = typer.Option(False, "--all", "-a", help="Include '.' and '..'"),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Sort in descending order")
) -> None:
    """List directory entries sorted by name."""

    def _ls() -> None:
        for name in fs.scandir(path, exclude_special=not all_entries, descending=reverse):
            typer.echo(name)

    run_and_exit(_ls)


@app.command()
def size(
    path: str = typer.Argument(..., help="File to measure")
) -> None:
    """Print a file's size in bytes."""
    run_and_exit(lambda: typer.echo(fs.filesize(path)))


@app.command()
def mkdir(
    path: str = typer.Argument(..., help="Directory to create"),
    no_parents: bool = typer.Option(False, "--no-parents", help="Fail if the parent does not exist")
) -> None:
    """Create a directory (no-op if it already exists)."""

    def _mkdir() -> None:
        settings = create_settings_from_env()
        Path(path).mkdir(recursive=not no_parents, mode=settings.dir_mode)

    run_and_exit(_mkdir)


@app.command()
def touch(
    paths: List[str] = typer.Argument(..., help="Files to create or update"),
    no_parents: bool = typer.Option(False, "--no-parents", help="Fail if the parent does not exist")
) -> None:
    """Create files or update their timestamps."""
    run_and_exit(lambda: fs.touch_all(paths, recursive=not no_parents))


@app.command()
def rm(
    path: str = typer.Argument(..., help="Path to delete"),
    no_recursive: bool = typer.Option(False, "--no-recursive", help="Only remove empty directories")
) -> None:
    """Delete a file, link or directory."""
    run_and_exit(lambda: Path(path).delete(recursive=not no_recursive))


@app.command()
def clean(
    path: str = typer.Argument(..., help="Directory to empty"),
    follow_links: bool = typer.Option(False, "--follow-links", help="Also empty directories reached through links")
) -> None:
    """Remove everything inside a directory, keeping the directory."""
    run_and_exit(lambda: fs.clean_directory(path, follow_link=follow_links))


@app.command()
def cp(
    source: str = typer.Argument(..., help="File or directory to copy"),
    destination: str = typer.Argument(..., help="Destination file or directory")
) -> None:
    """Copy a file, or mirror a directory's content into another directory."""

    def _cp() -> None:
        src = Path(source)
        if src.is_dir():
            src.copy_content(destination)
        else:
            src.copy_file(destination)

    run_and_exit(_cp)


@app.command()
def mv(
    source: str = typer.Argument(..., help="File to move"),
    destination: str = typer.Argument(..., help="Destination path"),
    into: bool = typer.Option(False, "--into", help="Treat destination as the directory to move into")
) -> None:
    """Move a file to a new path, or into a directory."""

    def _mv() -> None:
        src = Path(source)
        moved = src.move_into(destination) if into else src.move_file(destination)
        typer.echo(moved.get())

    run_and_exit(_mv)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
