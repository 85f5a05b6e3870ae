"""Shared enums for exploration and deduction."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    LEFT = "left"
    RIGHT = "right"


class Command(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    RESET = "reset"
    EXIT = "exit"


class ExplorerStatus(StrEnum):
    AT_LOCATION = "at_location"
    EXITED = "exited"


class Verdict(StrEnum):
    SUSTAINED = "sustained"
    NOT_SUSTAINED = "not_sustained"
