"""Exploration state machine and play sessions."""

from quest.investigation.explorer import Explorer, StepReport, parse_command
from quest.investigation.session import Session, start_session

__all__ = [
    "Explorer",
    "Session",
    "StepReport",
    "parse_command",
    "start_session",
]
