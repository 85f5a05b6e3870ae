"""Exceptions raised by the exploration core."""

from __future__ import annotations


class ExplorationClosedError(RuntimeError):
    """Raised when a command reaches an explorer that has already exited."""
