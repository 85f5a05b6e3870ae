"""Accusation checks against the collected clues."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from quest import config
from quest.domain.enums import Verdict
from quest.suspects.directory import SuspectDirectory

_logger = logging.getLogger(__name__)

SUSTAIN_THRESHOLD = 2


@dataclass(frozen=True)
class ClueAssociation:
    clue: str
    suspect: str


@dataclass(frozen=True)
class AccusationResult:
    accused: str
    match_count: int
    verdict: Verdict
    explanation: list[str]

    @property
    def is_sustained(self) -> bool:
        return self.verdict == Verdict.SUSTAINED


def _fold(name: str) -> str:
    return name.casefold()


def count_matches(clues: Iterable[str], directory: SuspectDirectory, accused: str) -> int:
    target = _fold(accused.strip())
    count = 0
    for clue in clues:
        suspect = directory.lookup(clue)
        if suspect is not None and _fold(suspect) == target:
            count += 1
    return count


def judge(count: int) -> Verdict:
    if count >= SUSTAIN_THRESHOLD:
        return Verdict.SUSTAINED
    return Verdict.NOT_SUSTAINED


def evaluate_accusation(
    clues: Iterable[str], directory: SuspectDirectory, accused: str
) -> AccusationResult:
    accused = accused.strip()
    if not accused:
        raise ValueError("An accusation needs a suspect name.")
    clue_list = list(clues)
    count = count_matches(clue_list, directory, accused)
    verdict = judge(count)
    explanation: list[str] = []
    if not clue_list:
        explanation.append("No clues were collected.")
    explanation.append(f"Clues pointing to {accused}: {count}")
    if verdict == Verdict.SUSTAINED:
        explanation.append(f"Accusation sustained: enough evidence to arrest {accused}.")
    else:
        explanation.append(f"Accusation not sustained: not enough clues against {accused}.")
    _logger.info("Accused %s with %d matching clues: %s", accused, count, verdict)
    return AccusationResult(
        accused=accused,
        match_count=count,
        verdict=verdict,
        explanation=explanation,
    )


def clue_associations(
    clues: Iterable[str],
    directory: SuspectDirectory,
    unknown_suspect: str = config.UNKNOWN_SUSPECT,
) -> list[ClueAssociation]:
    associations: list[ClueAssociation] = []
    for clue in clues:
        suspect = directory.lookup(clue)
        associations.append(ClueAssociation(clue=clue, suspect=suspect or unknown_suspect))
    return associations
