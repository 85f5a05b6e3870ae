"""Case dump helpers for debugging."""

from __future__ import annotations

from quest.investigation.session import Session
from quest.locations.tree import iter_preorder


def dump_case(session: Session) -> str:
    lines: list[str] = []
    lines.append(f"Case: {session.case.case_id} (root {session.root.name})")
    lines.append("")
    lines.append("Layout:")
    for depth, node in iter_preorder(session.root):
        lines.append(f"{'  ' * depth}- {node.name}")
    lines.append("")
    lines.append("Clues by room:")
    for room, clue in session.clue_table.entries.items():
        lines.append(f"- {room}: {clue}")
    lines.append("")
    lines.append(f"Directory ({len(session.directory)} entries, {session.directory.size} buckets):")
    for index in range(session.directory.size):
        chain = session.directory.chain(index)
        if not chain:
            continue
        links = " -> ".join(f"{key}={value}" for key, value in chain)
        lines.append(f"[{index}] {links}")
    return "\n".join(lines)
