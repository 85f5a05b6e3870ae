"""Mansion layout tree."""

from .tree import Location, attach, create_location, descend, iter_preorder, teardown

__all__ = [
    "Location",
    "attach",
    "create_location",
    "descend",
    "iter_preorder",
    "teardown",
]
