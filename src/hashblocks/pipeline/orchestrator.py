"""Run a single file through resolve, digest and render stages."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..catalog import Algorithm, resolve_algorithm
from ..render.fingerprint import Fingerprint, render
from ..utils.hash import ChunkObserver, hash_file
from .config import FingerprintConfig, build_config
from .logging_utils import RunLogger, RunStats, StageGuard


@dataclass(frozen=True)
class FingerprintRun:
    path: Path
    algorithm: Algorithm
    digest: bytes
    fingerprint: Fingerprint
    stats: RunStats


def _console_level(config: FingerprintConfig) -> int:
    return logging.DEBUG if config.verbose else logging.CRITICAL


def run_fingerprint(
    path: Union[str, Path],
    config: Union[FingerprintConfig, Mapping[str, Any], None] = None,
    *,
    observer: Optional[ChunkObserver] = None,
    run_id: Optional[str] = None,
) -> FingerprintRun:
    """Hash ``path`` and render its fingerprint.

    Errors from any stage propagate unchanged after being logged; no partial
    result is returned.
    """

    cfg = build_config(config)
    file_path = Path(path)
    run_id = run_id or uuid.uuid4().hex[:12]
    runlog = RunLogger(run_id, cfg.log_file, console_level=_console_level(cfg))
    stats = RunStats(run_id=run_id, source=str(file_path))

    with runlog:
        with StageGuard(runlog, stats, "resolve"):
            algorithm = resolve_algorithm(cfg.algorithm)
            runlog.debug("algorithm %s (%d bytes)", algorithm.canonical, algorithm.digest_size)

        counts = {"bytes": 0, "chunks": 0}

        def _observe(size: int) -> None:
            counts["bytes"] += size
            counts["chunks"] += 1
            if observer is not None:
                observer(size)

        with StageGuard(runlog, stats, "digest") as guard:
            digest = hash_file(file_path, algorithm=algorithm, chunk_size=cfg.chunk_size, observer=_observe)
            guard.done(**counts)
            runlog.debug("read %d bytes in %d chunk(s)", counts["bytes"], counts["chunks"])

        with StageGuard(runlog, stats, "render") as guard:
            fingerprint = render(digest)
            guard.done(glyphs=len(fingerprint))
            runlog.debug("color scheme %d", fingerprint.scheme_index)

        runlog.event("run", "complete", algorithm=algorithm.canonical, digest=digest.hex())

    return FingerprintRun(
        path=file_path,
        algorithm=algorithm,
        digest=digest,
        fingerprint=fingerprint,
        stats=stats,
    )


__all__ = ["FingerprintRun", "run_fingerprint"]
