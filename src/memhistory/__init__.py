"""memhistory - navigable location history kept in memory."""

from .config import HistoryOptions
from .errors import ConfigurationError, HistoryError
from .history import MemoryHistory, create_memory_history
from .keys import create_key
from .location import Location, create_location
from .transitions import Action, TransitionGate

__all__ = [
    "Action",
    "ConfigurationError",
    "HistoryError",
    "HistoryOptions",
    "Location",
    "MemoryHistory",
    "TransitionGate",
    "create_key",
    "create_location",
    "create_memory_history",
]
