"""Widget rendering the history entries with the current one highlighted."""

from rich.text import Text

from textual.widgets import Static

from ..history import MemoryHistory


def render_entries(history: MemoryHistory) -> Text:
    """Build a Rich Text listing of the entries, newest last."""
    text = Text()
    for i, location in enumerate(history.entries):
        current = i == history.index
        marker = "▶ " if current else "  "
        style = "bold bright_cyan" if current else "default"
        text.append(marker, style="bright_yellow")
        text.append(history.create_href(location), style=style)
        text.append(f"  [{location.key}]", style="grey50")
        if location.state is not None:
            text.append(f"  {location.state!r}", style="grey70")
        if i < history.length - 1:
            text.append("\n")
    return text


class EntryList(Static):
    """Displays the entry stack of a MemoryHistory."""

    def __init__(self, history: MemoryHistory, **kwargs) -> None:
        super().__init__(**kwargs)
        self.history = history

    def on_mount(self) -> None:
        self.refresh_entries()

    def refresh_entries(self) -> None:
        self.update(render_entries(self.history))
