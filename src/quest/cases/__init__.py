"""Case files and debugging dumps."""

from .mansion import CaseFile, ClueTable, build_location_tree, load_case

__all__ = [
    "CaseFile",
    "ClueTable",
    "build_location_tree",
    "load_case",
]
