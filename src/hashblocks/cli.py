"""Command line interface for hashblocks file fingerprints."""

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Optional

import typer

from .catalog import DEFAULT_ALGORITHM, Algorithm, aliases_for, resolve_algorithm
from .errors import UnsupportedAlgorithm
from .render.display import print_fingerprint
from .utils.hash import DEFAULT_CHUNK_SIZE, ChunkObserver

app = typer.Typer(
    help="""Print a colored block fingerprint of a file's digest.\n\nExamples:\n\n  • hashblocks fingerprint release.tar.gz\n  • hashblocks fingerprint --algo sha256 --code release.tar.gz\n  • hashblocks algorithms""",
    rich_markup_mode="markdown",
    add_completion=False,
)

ALGORITHM_ENVVAR = "HASHBLOCKS_ALGORITHM"

# Cursor up one line, then erase it.
_CLEAR_PREVIOUS_LINE = "\x1b[1A\x1b[2K"


@lru_cache()
def _core():
    from .pipeline import config as _config
    from .pipeline import orchestrator as _orch

    return SimpleNamespace(
        build_config=_config.build_config,
        run_fingerprint=_orch.run_fingerprint,
    )


def core_build_config(overrides: Optional[Dict[str, Any]] = None):
    return _core().build_config(overrides or {})


def core_run_fingerprint(*args: Any, **kwargs: Any):
    return _core().run_fingerprint(*args, **kwargs)


def _algorithm_callback(value: Optional[str]) -> str:
    try:
        return resolve_algorithm(value).canonical
    except UnsupportedAlgorithm as exc:
        raise typer.BadParameter(str(exc)) from exc


def _stderr_is_tty() -> bool:
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


@contextmanager
def _progress(path: Path, quiet: bool) -> Iterator[Optional[ChunkObserver]]:
    if quiet:
        yield None
        return
    try:
        total = path.stat().st_size
    except OSError:
        # The digest stage reports the failure.
        yield None
        return
    try:
        with typer.progressbar(
            length=max(total, 1),
            label="Calculating hash...",
            file=sys.stderr,
            show_eta=False,
        ) as bar:
            yield bar.update
    finally:
        if _stderr_is_tty():
            sys.stderr.write(_CLEAR_PREVIOUS_LINE)
            sys.stderr.flush()


@app.command("fingerprint")
def fingerprint(
    file: Path = typer.Argument(..., help="File to fingerprint."),
    algorithm: str = typer.Option(
        DEFAULT_ALGORITHM.canonical,
        "--algorithm",
        "--algo",
        envvar=ALGORITHM_ENVVAR,
        callback=_algorithm_callback,
        help="Use ALGORITHM for hash calculating (see `hashblocks algorithms`).",
    ),
    code: bool = typer.Option(
        False,
        "--code",
        "-c",
        help="Print code in hexadecimal.",
        is_flag=True,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="No progress indicator while hashing.",
        is_flag=True,
    ),
    chunk_size: int = typer.Option(
        DEFAULT_CHUNK_SIZE, "--chunk-size", min=1, help="Read buffer size in bytes."
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log stage timings to stderr.",
        is_flag=True,
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Append JSON lines stage events to this file."
    ),
) -> None:
    """Hash FILE and print its block fingerprint."""

    try:
        config = core_build_config(
            {
                "algorithm": algorithm,
                "chunk_size": chunk_size,
                "show_code": code,
                "quiet": quiet,
                "verbose": verbose,
                "log_file": log_file,
            }
        )
    except ValueError as exc:
        raise typer.BadParameter(f"Configuration error: {exc}") from exc

    try:
        with _progress(file, config.quiet) as observer:
            result = core_run_fingerprint(file, config, observer=observer)
    except OSError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    print_fingerprint(result.fingerprint, result.digest, show_code=config.show_code)


def _algorithm_rows() -> List[Dict[str, Any]]:
    return [
        {
            "name": algo.canonical,
            "bits": algo.digest_size * 8,
            "description": algo.description,
            "aliases": aliases_for(algo),
            "default": algo is DEFAULT_ALGORITHM,
        }
        for algo in Algorithm
    ]


@app.command("algorithms")
def algorithms(
    json_output: bool = typer.Option(
        False, "--json", help="Emit machine-readable JSON."
    ),
) -> None:
    """List the supported algorithms and their aliases.

    RIPEMD-128, RIPEMD-256, RIPEMD-320, Tiger and Tiger2 are not available.
    """

    rows = _algorithm_rows()
    if json_output:
        typer.echo(json.dumps({"algorithms": rows}, indent=2))
        return

    width = max(len(row["name"]) for row in rows)
    for row in rows:
        line = f"{row['name']:<{width}}  {row['bits']:>4} bit  {row['description']}"
        if row["aliases"]:
            line += f" (alias: {', '.join(row['aliases'])})"
        if row["default"]:
            line += " [DEFAULT]"
        typer.echo(line)


def main() -> None:
    """Console script entry point for :func:`fingerprint`."""

    typer.run(fingerprint)


if __name__ == "__main__":  # pragma: no cover
    app()
