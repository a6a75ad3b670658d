"""Configuration loading and defaults for memhistory."""

import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigurationError
from .keys import DEFAULT_KEY_LENGTH
from .location import LocationDescriptor
from .transitions import ConfirmFn


def get_config_dir() -> Path:
    """Get the memhistory config directory (XDG-style)."""
    return Path.home() / ".config" / "memhistory"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


@dataclass
class HistoryOptions:
    """Construction options for a MemoryHistory."""

    initial_entries: Sequence[LocationDescriptor] = field(default_factory=lambda: ["/"])
    initial_index: int = 0
    key_length: int = DEFAULT_KEY_LENGTH
    basename: str = ""
    get_user_confirmation: ConfirmFn | None = None  # None = ask on the terminal

    def __post_init__(self) -> None:
        if self.key_length < 1:
            raise ConfigurationError(
                f"key_length must be at least 1, got {self.key_length}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HistoryOptions":
        """Build options from a plain mapping such as a TOML table."""
        return cls(
            initial_entries=list(data.get("initial_entries", ["/"])),
            initial_index=int(data.get("initial_index", 0)),
            key_length=int(data.get("key_length", DEFAULT_KEY_LENGTH)),
            basename=data.get("basename", ""),
        )


def _toml_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _toml_entry(entry: LocationDescriptor) -> str:
    if isinstance(entry, str):
        return _toml_string(entry)
    if isinstance(entry, Mapping):
        items = entry.items()
    else:
        items = [
            ("pathname", entry.pathname),
            ("search", entry.search),
            ("hash", entry.hash),
            ("key", entry.key),
        ]
    # State is opaque and not written out
    parts = [
        f"{name} = {_toml_string(value)}"
        for name, value in items
        if name != "state" and isinstance(value, str) and value
    ]
    return "{ " + ", ".join(parts) + " }"


@dataclass
class Config:
    """History explorer configuration."""

    history: HistoryOptions = field(default_factory=HistoryOptions)
    prompt_message: str = "Leave {path}?"

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        if not config_path.exists():
            # Create default config file
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(
            history=HistoryOptions.from_mapping(data.get("history", {})),
            prompt_message=data.get("prompt_message", "Leave {path}?"),
        )

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        entries = ", ".join(_toml_entry(e) for e in self.history.initial_entries)
        lines = [
            "# memhistory Configuration",
            "",
            "# Confirmation message when navigation is blocked ({path} = target)",
            f"prompt_message = {_toml_string(self.prompt_message)}",
            "",
            "[history]",
            "# Paths (or inline tables with pathname/search/hash/key) to start with",
            f"initial_entries = [{entries}]",
            f"initial_index = {self.history.initial_index}",
            "# Length of generated entry keys",
            f"key_length = {self.history.key_length}",
            "# Prefix stripped from incoming paths and added to hrefs",
            f"basename = {_toml_string(self.history.basename)}",
        ]

        config_path.write_text("\n".join(lines) + "\n")
