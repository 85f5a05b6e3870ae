"""Exploration state machine over the location tree."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Optional

from quest import config
from quest.clues.index import ClueIndex
from quest.domain.enums import Command, Direction, ExplorerStatus
from quest.domain.errors import ExplorationClosedError
from quest.locations.tree import Location, descend
from quest.suspects.directory import SuspectDirectory

_logger = logging.getLogger(__name__)

ClueLookup = Callable[[str], Optional[str]]

_COMMAND_ALIASES = {
    "e": Command.LEFT,
    "esquerda": Command.LEFT,
    "left": Command.LEFT,
    "l": Command.LEFT,
    "d": Command.RIGHT,
    "direita": Command.RIGHT,
    "right": Command.RIGHT,
    "r": Command.RESET,
    "reset": Command.RESET,
    "s": Command.EXIT,
    "sair": Command.EXIT,
    "exit": Command.EXIT,
    "q": Command.EXIT,
}


def parse_command(text: str) -> Command | None:
    """Map raw player input onto a command, or ``None`` when unrecognised."""
    key = text.strip().lower()
    if not key:
        return None
    return _COMMAND_ALIASES.get(key)


@dataclass(frozen=True)
class StepReport:
    command: Command | None
    status: ExplorerStatus
    location: str
    clue: str | None = None
    newly_added: bool = False
    blocked: bool = False

    @property
    def found_clue(self) -> bool:
        return self.clue is not None


class Explorer:
    def __init__(
        self,
        root: Location,
        clue_for: ClueLookup,
        clues: ClueIndex,
        directory: SuspectDirectory,
        unknown_suspect: str = config.UNKNOWN_SUSPECT,
    ) -> None:
        self.root = root
        self.current = root
        self.status = ExplorerStatus.AT_LOCATION
        self._clue_for = clue_for
        self._clues = clues
        self._directory = directory
        self._unknown_suspect = unknown_suspect
        self.opening = self._enter(root, None)

    def apply(self, command: Command) -> StepReport:
        if self.status == ExplorerStatus.EXITED:
            raise ExplorationClosedError("Exploration has already ended.")
        command = Command(command)
        if command == Command.EXIT:
            self.status = ExplorerStatus.EXITED
            _logger.debug("Exploration ended at %s", self.current.name)
            return StepReport(command=command, status=self.status, location=self.current.name)
        if command == Command.RESET:
            return self._enter(self.root, command)
        child = descend(self.current, Direction(command.value))
        if child is None:
            _logger.debug("No %s passage from %s", command, self.current.name)
            return StepReport(
                command=command,
                status=self.status,
                location=self.current.name,
                blocked=True,
            )
        return self._enter(child, command)

    def _enter(self, location: Location, command: Command | None) -> StepReport:
        self.current = location
        clue = self._clue_for(location.name)
        if clue is None:
            _logger.debug("Entered %s, nothing found", location.name)
            return StepReport(command=command, status=self.status, location=location.name)
        newly_added = self._clues.insert(clue)
        if self._directory.lookup(clue) is None:
            self._directory.insert_or_update(clue, self._unknown_suspect)
        _logger.debug("Entered %s, clue %r (new=%s)", location.name, clue, newly_added)
        return StepReport(
            command=command,
            status=self.status,
            location=location.name,
            clue=clue,
            newly_added=newly_added,
        )
