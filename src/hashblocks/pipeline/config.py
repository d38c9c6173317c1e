"""Configuration defaults for hashblocks runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Mapping

from ..catalog import DEFAULT_ALGORITHM, resolve_algorithm
from ..utils.hash import DEFAULT_CHUNK_SIZE


def _ensure_optional_path(value: Path | str | None) -> Path | None:
    if value is None or isinstance(value, Path):
        return value
    return Path(value)


@dataclass(slots=True)
class FingerprintConfig:
    """Validated settings for a single fingerprint run."""

    algorithm: str = DEFAULT_ALGORITHM.canonical
    chunk_size: int = DEFAULT_CHUNK_SIZE
    show_code: bool = False
    quiet: bool = False
    verbose: bool = False
    log_file: Path | None = None

    def __post_init__(self) -> None:
        # Aliases collapse onto the canonical name; unknown names raise
        # UnsupportedAlgorithm, which is a ValueError.
        self.algorithm = resolve_algorithm(self.algorithm).canonical
        self.log_file = _ensure_optional_path(self.log_file)

        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int):
            raise ValueError("chunk_size must be an integer")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")

    def model_dump(self, mode: str = "python") -> dict[str, Any]:
        data = asdict(self)
        if mode == "json" and data["log_file"] is not None:
            data["log_file"] = str(data["log_file"])
        return data

    @classmethod
    def model_validate(cls, data: Mapping[str, Any] | "FingerprintConfig") -> "FingerprintConfig":
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise TypeError("FingerprintConfig.model_validate expects a mapping or FingerprintConfig instance")
        return cls(**data)


DEFAULT_CONFIG: dict[str, Any] = FingerprintConfig().model_dump(mode="python")

__all__ = [
    "DEFAULT_CONFIG",
    "FingerprintConfig",
    "build_config",
]


def build_config(overrides: Mapping[str, Any] | FingerprintConfig | None = None) -> FingerprintConfig:
    """Return a validated configuration merged with ``overrides``.

    ``None`` values in ``overrides`` keep the default; unknown keys raise
    :class:`ValueError`.
    """

    if isinstance(overrides, FingerprintConfig):
        return overrides

    merged: dict[str, Any] = dict(DEFAULT_CONFIG)
    for key, value in (overrides or {}).items():
        if key not in merged:
            raise ValueError(f"Unknown configuration key: {key}")
        if value is None:
            continue
        merged[key] = value

    try:
        return FingerprintConfig.model_validate(merged)
    except TypeError as exc:
