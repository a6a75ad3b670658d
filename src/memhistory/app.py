"""Textual application for exploring a MemoryHistory interactively."""

import dataclasses
from collections.abc import Callable

from rich.text import Text

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Input, Static

from .config import Config
from .history import MemoryHistory
from .location import Location
from .transitions import Action
from .widgets import ConfirmModal, EntryList


class HistoryExplorerApp(App):
    """memhistory - In-memory history explorer."""

    TITLE = "memhistory"
    SUB_TITLE = "History Explorer"

    CSS = """
    #entries {
        height: 1fr;
        border: solid $accent;
        padding: 0 1;
    }

    #status {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }

    #path-input {
        border: solid $warning;
    }

    #path-input:focus {
        border: solid yellow;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+r", "replace", "Replace", priority=True),
        Binding("ctrl+b", "go_back", "Back", priority=True),
        Binding("ctrl+f", "go_forward", "Forward", priority=True),
        Binding("ctrl+k", "toggle_block", "Block", priority=True),
    ]

    def __init__(self, config: Config) -> None:
        super().__init__()
        self.config = config
        self.history = MemoryHistory(
            dataclasses.replace(config.history, get_user_confirmation=self._confirm_transition)
        )
        self._unblock: Callable[[], None] | None = None
        self._unlisten = self.history.listen(self._on_history_change)
        self._entry_list = EntryList(self.history, id="entries")
        self._status_bar = Static(id="status")
        self._path_input = Input(
            placeholder="Path to push (Enter), Ctrl+R to replace", id="path-input"
        )

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield self._entry_list
            yield self._status_bar
            yield self._path_input
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_status()
        self._path_input.focus()

    def on_unmount(self) -> None:
        self._unlisten()

    @property
    def blocked(self) -> bool:
        return self._unblock is not None

    def _confirm_transition(self, message: str, proceed: Callable[[bool], None]) -> None:
        """Ask through a modal; the transition resolves when it is dismissed."""
        self.push_screen(ConfirmModal(message), callback=proceed)

    def _blocking_prompt(self, location: Location, action: Action) -> str:
        return self.config.prompt_message.replace("{path}", location.path)

    def _on_history_change(self, location: Location, action: Action) -> None:
        self._entry_list.refresh_entries()
        self._refresh_status()

    def _refresh_status(self) -> None:
        history = self.history
        status = (
            f"{history.action.value}  {history.index + 1}/{history.length}"
            f"  {history.create_href(history.location)}"
        )
        if self.blocked:
            status += "  [blocked]"
        self._status_bar.update(Text(status))

    def _take_input(self) -> str | None:
        value = self._path_input.value.strip()
        if not value:
            self.notify("Enter a path first", severity="warning")
            return None
        self._path_input.value = ""
        return value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Push the typed path."""
        if event.input.id != "path-input":
            return
        path = self._take_input()
        if path is not None:
            self.history.push(path)

    def action_replace(self) -> None:
        path = self._take_input()
        if path is not None:
            self.history.replace(path)

    def action_go_back(self) -> None:
        self.history.go_back()

    def action_go_forward(self) -> None:
        self.history.go_forward()

    def action_toggle_block(self) -> None:
        """Turn the navigation prompt on or off."""
        if self._unblock is not None:
            self._unblock()
            self._unblock = None
        else:
            self._unblock = self.history.block(self._blocking_prompt)
        self._refresh_status()


def run_app(config: Config) -> None:
    """Run the history explorer."""
    app = HistoryExplorerApp(config)
    app.run()
