from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Input, RichLog, Static

from quest.cases.mansion import CaseFile
from quest.deduction.verdict import AccusationResult
from quest.domain.enums import ExplorerStatus
from quest.investigation.explorer import parse_command
from quest.investigation.session import Session, start_session
from quest.ui.console import MENU, describe_step, summary_lines


class QuestApp(App):
    TITLE = "Detective Quest"
    BINDINGS = [
        ("f6", "focus_log", "Focus log"),
        ("f8", "focus_input", "Focus input"),
    ]
    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: auto;
        padding: 1 1;
    }
    #log {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #menu {
        height: auto;
        padding: 1 1;
    }
    #command {
        height: 3;
        padding: 0 1;
    }
    """

    def __init__(self, case: CaseFile | None = None) -> None:
        super().__init__()
        self.session: Session = start_session(case)
        self.accusing = False
        self.finished = False
        self.transcript: list[str] = []
        self.last_result: AccusationResult | None = None

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("", id="header")
            yield RichLog(id="log", wrap=True)
            yield Static(MENU, id="menu")
            yield Input(placeholder="Enter command (e, d, r, s)...", id="command")

    def on_mount(self) -> None:
        self._write("Explore the rooms; clues are collected automatically when you enter.")
        for line in describe_step(self.session.explorer.opening):
            self._write(line)
        self._refresh_header()
        self.query_one("#command", Input).focus()

    def on_unmount(self) -> None:
        self.session.teardown()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        event.input.value = ""
        if not value:
            if self.accusing:
                self._write("Please type a suspect name.")
            return
        if self.finished:
            self.exit()
            return
        if self.accusing:
            self._handle_accusation(value)
            return
        self._handle_command(value)

    def _write(self, message: str) -> None:
        self.transcript.append(message)
        self.query_one("#log", RichLog).write(message)

    def action_focus_log(self) -> None:
        self.query_one("#log", RichLog).focus()

    def action_focus_input(self) -> None:
        self.query_one("#command", Input).focus()

    def _refresh_header(self) -> None:
        explorer = self.session.explorer
        state = "exploring" if explorer.status == ExplorerStatus.AT_LOCATION else "accusing"
        self.query_one("#header", Static).update(
            f"Case: {self.session.case.case_id}  Room: {explorer.current.name}  "
            f"Clues: {len(self.session.clues)}  ({state})"
        )

    def _handle_command(self, value: str) -> None:
        command = parse_command(value)
        if command is None:
            self._write("Unknown command. Try again.")
            return
        report = self.session.explorer.apply(command)
        for line in describe_step(report):
            self._write(line)
        if report.status == ExplorerStatus.EXITED:
            for line in summary_lines(self.session):
                self._write(line)
            self._write("Who do you accuse? Type a suspect name.")
            self.query_one("#menu", Static).update("Accuse a suspect by name.")
            self.query_one("#command", Input).placeholder = "Suspect name..."
            self.accusing = True
        self._refresh_header()

    def _handle_accusation(self, name: str) -> None:
        result = self.session.accuse(name)
        self.last_result = result
        self._write("Verification result:")
        for line in result.explanation:
            self._write(line)
        self._write("Press Enter with any text to close.")
        self.query_one("#menu", Static).update("Case closed.")
        self.accusing = False
        self.finished = True
