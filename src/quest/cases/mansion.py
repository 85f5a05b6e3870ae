"""Load the mansion case file and build its location tree."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Dict, List, Optional

import networkx as nx
import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from quest import config
from quest.domain.enums import Direction
from quest.locations.tree import Location, attach, create_location
from quest.suspects.directory import SuspectDirectory

_logger = logging.getLogger(__name__)


class RoomSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    left: Optional[str] = None
    right: Optional[str] = None


class SuspectLink(BaseModel):
    model_config = ConfigDict(extra="forbid")

    clue: str = Field(min_length=1)
    suspect: str = Field(min_length=1)


class CaseFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    case_id: str
    root: str
    table_size: int = Field(default=config.HASH_TABLE_SIZE, gt=0)
    rooms: List[RoomSpec]
    clues: Dict[str, str] = Field(default_factory=dict)
    suspects: List[SuspectLink] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_references(self) -> "CaseFile":
        names = [room.name for room in self.rooms]
        seen: set[str] = set()
        for name in names:
            if name in seen:
                raise ValueError(f"Duplicate room: {name}")
            seen.add(name)
        if self.root not in seen:
            raise ValueError(f"Root room is not defined: {self.root}")
        for room in self.rooms:
            for child in (room.left, room.right):
                if child is not None and child not in seen:
                    raise ValueError(f"{room.name} leads to unknown room: {child}")
        for room_name in self.clues:
            if room_name not in seen:
                raise ValueError(f"Clue assigned to unknown room: {room_name}")
        return self

    def seed_pairs(self) -> list[tuple[str, str]]:
        return [(link.clue, link.suspect) for link in self.suspects]


@dataclass(frozen=True)
class ClueTable:
    """Fixed room name to clue lookup."""

    entries: Dict[str, str] = field(default_factory=dict)

    def clue_for(self, room_name: str) -> str | None:
        return self.entries.get(room_name)

    def __len__(self) -> int:
        return len(self.entries)


_CASE_CACHE: CaseFile | None = None


def parse_case(data: dict) -> CaseFile:
    return CaseFile.model_validate(data)


def load_case(path: Path | None = None) -> CaseFile:
    """Load a case file from YAML; the default case is read once and cached."""
    global _CASE_CACHE
    if path is None and _CASE_CACHE is not None:
        return _CASE_CACHE
    case_path = Path(path) if path is not None else config.CASE_PATH
    data = yaml.safe_load(case_path.read_text(encoding="utf-8")) or {}
    case = parse_case(data)
    _logger.debug("Loaded case %s from %s (%d rooms)", case.case_id, case_path, len(case.rooms))
    if path is None:
        _CASE_CACHE = case
    return case


def build_layout_graph(case: CaseFile) -> nx.DiGraph:
    graph = nx.DiGraph()
    for room in case.rooms:
        graph.add_node(room.name)
    for room in case.rooms:
        if room.left is not None:
            graph.add_edge(room.name, room.left, direction=Direction.LEFT)
        if room.right is not None:
            if graph.has_edge(room.name, room.right):
                raise ValueError(f"{room.name} uses {room.right} for both passages.")
            graph.add_edge(room.name, room.right, direction=Direction.RIGHT)
    if graph.in_degree(case.root) != 0:
        raise ValueError(f"Root room {case.root} has an incoming passage.")
    if not nx.is_arborescence(graph):
        raise ValueError("Mansion layout must be a single tree rooted at the entrance.")
    return graph


def build_location_tree(case: CaseFile) -> Location:
    graph = build_layout_graph(case)
    nodes = {name: create_location(name) for name in graph.nodes}
    for parent, child in nx.bfs_edges(graph, case.root):
        direction = graph.edges[parent, child]["direction"]
        attach(nodes[parent], direction, nodes[child])
    return nodes[case.root]


def build_clue_table(case: CaseFile) -> ClueTable:
    return ClueTable(entries=dict(case.clues))


def build_directory(case: CaseFile) -> SuspectDirectory:
    return SuspectDirectory.from_pairs(case.seed_pairs(), size=case.table_size)
