"""Run orchestration, configuration and logging helpers."""

__all__ = [
    "config",
    "logging_utils",
    "orchestrator",
]
