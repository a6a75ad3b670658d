"""In-memory navigation history with approval-gated transitions."""

import logging
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from .config import HistoryOptions
from .confirmation import resolve_confirmation
from .errors import ConfigurationError
from .keys import create_key
from .location import Location, LocationDescriptor, carries_state, create_location
from .paths import create_path, normalize_basename, strip_basename
from .transitions import Action, Listener, Prompt, TransitionGate

logger = logging.getLogger(__name__)


def clamp(n: int, lower: int, upper: int) -> int:
    return min(max(n, lower), upper)


class MemoryHistory:
    """A history that keeps its locations in memory.

    Every navigation first asks the transition gate for approval; the stack
    only changes once the returned Future resolves to True.
    """

    def __init__(self, options: HistoryOptions | None = None) -> None:
        options = options or HistoryOptions()
        if not options.initial_entries:
            raise ConfigurationError("initial_entries must contain at least one entry")

        self._confirm = resolve_confirmation(options.get_user_confirmation)
        self._key_length = options.key_length
        self._basename = normalize_basename(options.basename)
        self._gate = TransitionGate()

        self._entries: list[Location] = [
            self._create_initial_entry(entry) for entry in options.initial_entries
        ]
        self._index = clamp(options.initial_index, 0, len(self._entries) - 1)
        self._action = Action.POP
        self._location = self._entries[self._index]

    # State accessors

    @property
    def entries(self) -> tuple[Location, ...]:
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def action(self) -> Action:
        return self._action

    @property
    def location(self) -> Location:
        return self._location

    @property
    def length(self) -> int:
        return len(self._entries)

    @property
    def basename(self) -> str:
        return self._basename

    def __len__(self) -> int:
        return len(self._entries)

    # Internals

    def _create_key(self) -> str:
        return create_key(self._key_length)

    def _strip(self, path: LocationDescriptor) -> LocationDescriptor:
        """Remove the basename from a path string or a location's pathname."""
        if not self._basename:
            return path
        if isinstance(path, str):
            return strip_basename(path, self._basename)
        if isinstance(path, Location):
            path = {
                "pathname": path.pathname,
                "search": path.search,
                "hash": path.hash,
                "state": path.state,
                "key": path.key,
            }
        pathname = path.get("pathname")
        if not pathname:
            return path
        return {**path, "pathname": strip_basename(pathname, self._basename)}

    def _create_initial_entry(self, entry: LocationDescriptor) -> Location:
        if isinstance(entry, str):
            return create_location(self._strip(entry), None, self._create_key())
        explicit_key = entry.key if isinstance(entry, Location) else entry.get("key")
        return create_location(self._strip(entry), None, explicit_key or self._create_key())

    def _warn_redundant_state(self, method: str, path: LocationDescriptor, state: Any) -> None:
        if state is not None and carries_state(path):
            logger.warning(
                "You should avoid providing a 2nd state argument to %s when the 1st "
                "argument is a location-like object that already has state; it is ignored",
                method,
            )

    def _set_state(
        self,
        action: Action | None = None,
        location: Location | None = None,
        index: int | None = None,
        entries: list[Location] | None = None,
    ) -> None:
        """Apply the given changes, then notify listeners of the current location."""
        if entries is not None:
            self._entries = entries
        if index is not None:
            self._index = index
        if action is not None:
            self._action = action
        if location is not None:
            self._location = location

        self._gate.notify_listeners(self._location, self._action)

    # Navigation

    def push(self, path: LocationDescriptor, state: Any = None) -> Future:
        """Add a new entry after the current one, dropping any forward entries."""
        self._warn_redundant_state("push", path, state)

        action = Action.PUSH
        location = create_location(
            self._strip(path), state, self._create_key(), self._location
        )

        def on_done(result: Future) -> None:
            if not result.result():
                return
            next_index = self._index + 1
            next_entries = self._entries[:next_index]
            next_entries.append(location)
            self._set_state(
                action=action,
                location=location,
                index=next_index,
                entries=next_entries,
            )

        pending = self._gate.request_transition(location, action, self._confirm)
        pending.add_done_callback(on_done)
        return pending

    def replace(self, path: LocationDescriptor, state: Any = None) -> Future:
        """Overwrite the current entry."""
        self._warn_redundant_state("replace", path, state)

        action = Action.REPLACE
        location = create_location(
            self._strip(path), state, self._create_key(), self._location
        )

        def on_done(result: Future) -> None:
            if not result.result():
                return
            next_entries = list(self._entries)
            next_entries[self._index] = location
            self._set_state(action=action, location=location, entries=next_entries)

        pending = self._gate.request_transition(location, action, self._confirm)
        pending.add_done_callback(on_done)
        return pending

    def go(self, n: int) -> Future:
        """Move n entries through the history, clamped to the first/last entry."""
        next_index = clamp(self._index + n, 0, len(self._entries) - 1)

        action = Action.POP
        location = self._entries[next_index]

        def on_done(result: Future) -> None:
            # An earlier transition may have moved the approved entry
            moved = (
                next_index >= len(self._entries)
                or self._entries[next_index] is not location
            )
            if result.result() and not moved:
                self._set_state(action=action, location=location, index=next_index)
            else:
                # Re-render after a cancelled POP, like DOM histories do
                self._set_state()

        pending = self._gate.request_transition(location, action, self._confirm)
        pending.add_done_callback(on_done)
        return pending

    def go_back(self) -> Future:
        return self.go(-1)

    def go_forward(self) -> Future:
        return self.go(1)

    def can_go(self, n: int) -> bool:
        """Check if go(n) would land on an entry without clamping."""
        next_index = self._index + n
        return 0 <= next_index < len(self._entries)

    def create_href(self, location: Location) -> str:
        """Build an href for a location: basename + path, state excluded."""
        return self._basename + create_path(location.pathname, location.search, location.hash)

    # Blocking and listening

    def block(self, prompt: Prompt = False) -> Callable[[], None]:
        """Require confirmation before transitions.

        Args:
            prompt: A message, a function (location, action) returning a
                message (or False to reject silently), or False to unblock

        Returns:
            A callable that removes this prompt
        """
        return self._gate.set_prompt(prompt)

    def listen(self, listener: Listener) -> Callable[[], None]:
        """Subscribe to location changes; returns an unsubscribe callable."""
        return self._gate.append_listener(listener)


def create_memory_history(**options: Any) -> MemoryHistory:
    """Create a MemoryHistory from keyword options (see HistoryOptions)."""
    return MemoryHistory(HistoryOptions(**options))
