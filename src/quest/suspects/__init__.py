"""Clue to suspect directory."""

from .directory import DirectoryEntry, SuspectDirectory, djb2_hash

__all__ = ["DirectoryEntry", "SuspectDirectory", "djb2_hash"]
