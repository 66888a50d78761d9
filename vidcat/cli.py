"""CLI entrypoint using Typer."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import typer

from vidcat.core.config.settings import settings
from vidcat.core.errors import VidcatError
from vidcat.features.video_concat.service.api import concat_videos, scan_directory

app = typer.Typer(help="Concatenate a folder of same-format video clips with ffmpeg", no_args_is_help=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        try:
            typer.echo(version("vidcat"))
        except PackageNotFoundError:
            typer.echo("unknown")
        raise typer.Exit()


@app.callback()
def main(
    show_version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    pass


@app.command()
def concat(
    folder: Path = typer.Option(..., "--folder", "-f", help="The folder contains the video files."),
    output: Path = typer.Option(..., "--output", "-o", help="The output file path"),
    ext: str = typer.Option(..., "--ext", help="The video files' extension"),
    prefix: str = typer.Option(..., "--prefix", "-p", help="The video files' prefix"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace the output file if it exists (without it, an existing output makes the run fail)"),
    manifest: Optional[Path] = typer.Option(None, "--manifest", help="Write the ffmpeg file list here and keep it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Concat multiple video files into one."""
    # Demo: vidcat concat -f /tmp/vid -o out.mp4 --ext mp4 -p clip_
    _configure_logging(verbose)
    try:
        result = concat_videos(folder, prefix, ext, output, overwrite=overwrite, manifest_path=manifest)
    except VidcatError as e:
        typer.echo(f"{type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1)

    if not result.success:
        typer.echo(f"ffmpeg exited with status {result.return_code}", err=True)
        if result.stderr.strip():
            typer.echo(result.stderr.rstrip(), err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Concatenated {len(result.files)} files into {result.output_path}")


@app.command()
def scan(
    folder: Path = typer.Option(..., "--folder", "-f", help="The folder contains the video files."),
    ext: str = typer.Option(..., "--ext", help="The video files' extension"),
    prefix: str = typer.Option("", "--prefix", "-p", help="The video files' prefix"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """List the files concat would use, in order."""
    _configure_logging(verbose)
    try:
        files = scan_directory(folder, prefix, ext)
    except VidcatError as e:
        typer.echo(f"{type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1)

    for path in files:
        typer.echo(path)
