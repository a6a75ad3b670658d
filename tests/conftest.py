"""Shared fixtures for memhistory tests."""

import pytest

from memhistory import create_memory_history


class DeferredConfirmation:
    """Confirmation that records requests and answers them later."""

    def __init__(self):
        self.requests = []

    def __call__(self, message, proceed):
        self.requests.append((message, proceed))

    def answer(self, ok):
        _, proceed = self.requests.pop(0)
        proceed(ok)


@pytest.fixture
def approve():
    """Confirmation that always says yes, recording the messages it saw."""
    messages = []

    def confirm(message, proceed):
        messages.append(message)
        proceed(True)

    confirm.messages = messages
    return confirm


@pytest.fixture
def reject():
    """Confirmation that always says no."""

    def confirm(message, proceed):
        proceed(False)

    return confirm


@pytest.fixture
def deferred():
    return DeferredConfirmation()


@pytest.fixture
def make_history(approve):
    """Factory for histories that approve confirmations by default."""

    def factory(**options):
        options.setdefault("get_user_confirmation", approve)
        return create_memory_history(**options)

    return factory


@pytest.fixture
def no_terminal(monkeypatch):
    """Pretend there is no interactive terminal."""
    monkeypatch.setattr("memhistory.confirmation.terminal_available", lambda: False)
