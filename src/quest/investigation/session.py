"""One play-through: layout, notebook, directory and explorer together."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from quest.cases.mansion import (
    CaseFile,
    ClueTable,
    build_clue_table,
    build_directory,
    build_location_tree,
    load_case,
)
from quest.clues.index import ClueIndex
from quest.deduction.verdict import (
    AccusationResult,
    ClueAssociation,
    clue_associations,
    evaluate_accusation,
)
from quest.investigation.explorer import Explorer
from quest.locations import tree
from quest.locations.tree import Location
from quest.suspects.directory import SuspectDirectory

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeardownSummary:
    clues: int
    entries: int
    locations: int


@dataclass
class Session:
    case: CaseFile
    root: Location
    clue_table: ClueTable
    directory: SuspectDirectory
    clues: ClueIndex
    explorer: Explorer

    def collected(self) -> list[str]:
        return list(self.clues)

    def associations(self) -> list[ClueAssociation]:
        return clue_associations(self.clues, self.directory)

    def accuse(self, name: str) -> AccusationResult:
        return evaluate_accusation(self.clues, self.directory, name)

    def teardown(self) -> TeardownSummary:
        summary = TeardownSummary(
            clues=self.clues.teardown(),
            entries=self.directory.teardown(),
            locations=len(tree.teardown(self.root)),
        )
        _logger.info(
            "Session %s released %d clues, %d directory entries, %d locations",
            self.case.case_id,
            summary.clues,
            summary.entries,
            summary.locations,
        )
        return summary


def start_session(case: CaseFile | None = None) -> Session:
    case = case or load_case()
    root = build_location_tree(case)
    clue_table = build_clue_table(case)
    directory = build_directory(case)
    clues = ClueIndex()
    explorer = Explorer(root, clue_table.clue_for, clues, directory)
    _logger.info("Session started for case %s at %s", case.case_id, root.name)
    return Session(
        case=case,
        root=root,
        clue_table=clue_table,
        directory=directory,
        clues=clues,
        explorer=explorer,
    )
