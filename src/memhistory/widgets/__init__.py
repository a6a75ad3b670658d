"""memhistory widgets."""

from .confirm import ConfirmModal
from .entry_list import EntryList, render_entries

__all__ = [
    "ConfirmModal",
    "EntryList",
    "render_entries",
]
