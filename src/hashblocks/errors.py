"""Exception types raised by the digest and rendering layers."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class HashblocksError(Exception):
    """Base class for all hashblocks failures."""


class UnsupportedAlgorithm(HashblocksError, ValueError):
    def __init__(self, name: str, choices: Sequence[str] = ()):
        self.name = name
        self.choices = list(choices)
        message = f"Unsupported algorithm '{name}'"
        if self.choices:
            message += f" (choose from: {', '.join(self.choices)})"
        super().__init__(message)


class SourceUnreadable(HashblocksError, OSError):
    """The byte source could not be opened or a read failed mid-stream."""

    def __init__(self, path: Path | str | None, reason: str):
        self.path = Path(path) if path is not None else None
        self.reason = reason
        target = f"'{self.path}'" if self.path is not None else "input stream"
        super().__init__(f"Unable to read {target}: {reason}")


__all__ = ["HashblocksError", "SourceUnreadable", "UnsupportedAlgorithm"]
