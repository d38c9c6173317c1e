"""Shared logging utilities for fingerprint runs."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

RUN_LOGGER_NAME = "hashblocks.run"


def format_duration_ms(ms: float) -> str:
    total_ms = int(round(max(0.0, float(ms))))
    seconds, ms = divmod(total_ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}" if hours else f"{minutes:02d}:{seconds:02d}.{ms:03d}"


class JSONLWriter:
    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text("", encoding="utf-8")

    def emit(self, record: dict[str, Any]) -> None:
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
        except OSError as exc:  # pragma: no cover - best effort logging
            logging.getLogger(__name__).warning("Could not write to log file %s: %s", self.path, exc)


@dataclass
class RunStats:
    run_id: str
    source: str
    stage_timings_ms: dict[str, float] = field(default_factory=dict)
    stage_counts: dict[str, dict[str, int]] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    failures: list[dict[str, Any]] = field(default_factory=list)

    def mark(self, stage: str, elapsed_ms: float, counts: dict[str, int] | None = None) -> None:
        self.stage_timings_ms[stage] = self.stage_timings_ms.get(stage, 0.0) + float(elapsed_ms)
        if counts:
            slot = self.stage_counts.setdefault(stage, {})
            for key, value in counts.items():
                slot[key] = slot.get(key, 0) + int(value)


class RunLogger:
    """Structured logger that enriches messages with run context."""

    def __init__(self, run_id: str, jsonl_path: Path | None = None, console_level: int = logging.INFO):
        self.run_id = run_id
        self.jsonl = JSONLWriter(jsonl_path) if jsonl_path is not None else None
        base_logger = logging.getLogger(RUN_LOGGER_NAME)
        self._previous_level = base_logger.level
        base_logger.setLevel(console_level)
        handler = logging.StreamHandler()
        handler.setLevel(console_level)
        handler.addFilter(lambda record: getattr(record, "run_id", None) == run_id)
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [run:%(run_id)s] %(message)s", datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)
        base_logger.addHandler(handler)
        self._handler: logging.Handler | None = handler
        self._adapter = logging.LoggerAdapter(base_logger, extra={"run_id": run_id})

    def close(self) -> None:
        """Detach this run's console handler from the shared run logger."""

        if self._handler is None:
            return
        base_logger = self._adapter.logger
        base_logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None
        base_logger.setLevel(self._previous_level)

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    @property
    def log(self) -> logging.Logger:
        return self._adapter.logger

    def event(self, stage: str, event: str, **fields: Any) -> None:
        if self.jsonl is None:
            return
        record = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime()),
            "run_id": self.run_id,
            "stage": stage,
            "event": event,
        }
        record.update(fields)
        self.jsonl.emit(record)

    def bind(self, **extra: Any) -> logging.LoggerAdapter:
        context = dict(self._adapter.extra)
        context.update(extra)
        return logging.LoggerAdapter(self._adapter.logger, context)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._adapter.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._adapter.info(msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._adapter.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._adapter.error(msg, *args, **kwargs)


class StageGuard:
    """Time a run stage, log its outcome and record failures.

    Every stage is fatal: exceptions are recorded and then propagate.
    """

    def __init__(self, runlog: RunLogger, stats: RunStats, stage: str):
        self.runlog = runlog
        self.stats = stats
        self.stage = stage
        self.start: float | None = None
        self._logger = runlog.bind(stage=stage)

    def __enter__(self) -> "StageGuard":
        self.start = time.perf_counter()
        self.runlog.event(self.stage, "start")
        self._logger.debug("[%s] start", self.stage)
        return self

    def done(self, **counts: int) -> None:
        if counts:
            self.stats.mark(self.stage, 0.0, counts)

    def __exit__(self, exc_type, exc, tb) -> bool:
        elapsed_ms = (time.perf_counter() - self.start) * 1000.0 if self.start is not None else 0.0
        self.stats.mark(self.stage, elapsed_ms)
        duration_text = format_duration_ms(elapsed_ms)
        if exc is not None:
            if isinstance(exc, KeyboardInterrupt):
                self.runlog.error("[interrupt] KeyboardInterrupt received; aborting")
                return False
            message = f"{type(exc).__name__}: {exc}"
            self.runlog.event(self.stage, "error", elapsed_ms=elapsed_ms, error=message)
            self._logger.error("[%s] %s (%s)", self.stage, message, duration_text)
            self.stats.errors.append(f"{self.stage}: {message}")
            self.stats.failures.append({"stage": self.stage, "error": message, "elapsed_ms": elapsed_ms})
            return False
        self.runlog.event(self.stage, "stop", elapsed_ms=elapsed_ms)
        self._logger.debug("[%s] ok in %s", self.stage, duration_text)
        return False


__all__ = [
    "RUN_LOGGER_NAME",
    "JSONLWriter",
    "RunLogger",
    "RunStats",
    "StageGuard",
    "format_duration_ms",
]
