"""Line-based game loop for the terminal."""

from __future__ import annotations

from typing import Callable

from quest.domain.enums import Command, ExplorerStatus
from quest.investigation.explorer import StepReport, parse_command
from quest.investigation.session import Session

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU = "Choices: [e] left, [d] right, [r] back to the entrance, [s] stop exploring"


def describe_step(report: StepReport) -> list[str]:
    lines: list[str] = []
    if report.command == Command.EXIT:
        lines.append("Ending exploration.")
        return lines
    if report.blocked:
        side = "left" if report.command == Command.LEFT else "right"
        lines.append(f"There is no room to the {side}.")
        return lines
    if report.command == Command.RESET:
        lines.append("Back to the entrance.")
    lines.append(f"You are in: {report.location}")
    if report.clue is None:
        lines.append("Nothing stands out in this room.")
        return lines
    lines.append(f'You found a clue: "{report.clue}"')
    if report.newly_added:
        lines.append("Clue added to the notebook.")
    else:
        lines.append("Clue was already in the notebook.")
    return lines


def summary_lines(session: Session) -> list[str]:
    lines = ["", "=== END OF EXPLORATION ==="]
    collected = session.collected()
    if not collected:
        lines.append("You did not collect any clues.")
        return lines
    lines.append(f"Collected clues ({len(collected)}):")
    lines.extend(f"- {clue}" for clue in collected)
    lines.append("")
    lines.append("Clue -> suspect associations:")
    for association in session.associations():
        lines.append(f'- "{association.clue}" -> suggested suspect: {association.suspect}')
    return lines


def explore(session: Session, read: InputFn = input, write: OutputFn = print) -> None:
    explorer = session.explorer
    for line in describe_step(explorer.opening):
        write(line)
    while explorer.status == ExplorerStatus.AT_LOCATION:
        write(MENU)
        try:
            raw = read("> ")
        except EOFError:
            explorer.apply(Command.EXIT)
            break
        command = parse_command(raw)
        if command is None:
            write("Unknown command. Try again.")
            continue
        for line in describe_step(explorer.apply(command)):
            write(line)


def accuse(session: Session, read: InputFn = input, write: OutputFn = print) -> None:
    while True:
        try:
            name = read("Who do you accuse? ").strip()
        except EOFError:
            write("No suspect named.")
            return
        if name:
            break
        write("Please type a suspect name.")
    result = session.accuse(name)
    write("")
    write("Verification result:")
    for line in result.explanation:
        write(line)


def run(session: Session, read: InputFn = input, write: OutputFn = print) -> None:
    write("===== DETECTIVE QUEST - Mansion Exploration =====")
    write("Explore the rooms; clues are collected automatically when you enter.")
    explore(session, read, write)
    for line in summary_lines(session):
        write(line)
    accuse(session, read, write)
