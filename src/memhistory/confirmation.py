"""User confirmation for blocked transitions."""

import sys
from collections.abc import Callable

from rich.prompt import Confirm

from .errors import ConfigurationError
from .transitions import ConfirmFn

MISSING_CONFIRMATION = (
    "No interactive terminal is available to confirm transitions. "
    "Provide your own confirmation via the get_user_confirmation option."
)


def terminal_available() -> bool:
    """Check if stdin and stdout are attached to an interactive terminal."""
    return sys.stdin is not None and sys.stdin.isatty() and sys.stdout.isatty()


def terminal_confirmation(message: str, proceed: Callable[[bool], None]) -> None:
    """Ask a yes/no question on the terminal and pass the answer on."""
    if not terminal_available():
        raise ConfigurationError(MISSING_CONFIRMATION)
    proceed(Confirm.ask(message, default=False))


def resolve_confirmation(get_user_confirmation: ConfirmFn | None) -> ConfirmFn:
    """Return the confirmation to use, falling back to the terminal.

    Raises:
        ConfigurationError: If none was given and there is no terminal
    """
    if get_user_confirmation is not None:
        return get_user_confirmation
    if not terminal_available():
        raise ConfigurationError(MISSING_CONFIRMATION)
    return terminal_confirmation
