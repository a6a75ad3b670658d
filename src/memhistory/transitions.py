"""Transition approval and listener fan-out for a history."""

import logging
from collections.abc import Callable
from concurrent.futures import Future
from enum import Enum
from typing import Union

from .location import Location

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """The kind of navigation that produced the current location."""

    POP = "POP"
    PUSH = "PUSH"
    REPLACE = "REPLACE"


Listener = Callable[[Location, Action], None]
# Called as confirm(message, proceed); must call proceed(True|False) exactly once
ConfirmFn = Callable[[str, Callable[[bool], None]], None]
PromptFn = Callable[[Location, Action], Union[str, bool, None]]
Prompt = Union[str, PromptFn, bool, None]


class _Subscription:
    """A listener plus its active flag, so removal during fan-out is honored."""

    def __init__(self, listener: Listener) -> None:
        self.listener = listener
        self.active = True


class TransitionGate:
    """Holds the blocking prompt and listeners, and approves transitions."""

    def __init__(self) -> None:
        self._prompt: Prompt = None
        self._subscriptions: list[_Subscription] = []

    @property
    def prompt(self) -> Prompt:
        return self._prompt

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    def set_prompt(self, prompt: Prompt) -> Callable[[], None]:
        """Install a blocking prompt; False or None clears it.

        Returns:
            A callable that removes this prompt if it is still installed
        """
        if prompt is False:
            prompt = None
        if prompt is not None and self._prompt is not None:
            logger.warning("A history supports only one prompt at a time")

        self._prompt = prompt

        def unblock() -> None:
            if self._prompt is prompt:
                self._prompt = None

        return unblock

    def request_transition(
        self,
        location: Location,
        action: Action,
        get_user_confirmation: ConfirmFn,
    ) -> Future:
        """Ask whether a transition may proceed.

        Returns:
            A Future resolving to True (approved) or False (rejected). It is
            already done on return unless the confirmation function defers
            its answer. It cannot be cancelled.
        """
        result: Future = Future()
        result.set_running_or_notify_cancel()

        if self._prompt is None:
            result.set_result(True)
            return result

        if callable(self._prompt):
            message = self._prompt(location, action)
        else:
            message = self._prompt

        if not isinstance(message, str):
            result.set_result(message is not False)
            return result

        logger.debug("Confirming %s to %s: %s", action.value, location.path, message)

        def proceed(ok: bool) -> None:
            if result.done():
                logger.warning(
                    "Transition to %s was already resolved; ignoring", location.path
                )
                return
            logger.debug(
                "%s to %s %s", action.value, location.path, "approved" if ok else "rejected"
            )
            result.set_result(bool(ok))

        try:
            get_user_confirmation(message, proceed)
        except Exception:
            if not result.done():
                result.set_result(False)
            raise
        return result

    def append_listener(self, listener: Listener) -> Callable[[], None]:
        """Subscribe a listener; returns a callable that unsubscribes it."""
        subscription = _Subscription(listener)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription.active:
                subscription.active = False
                self._subscriptions.remove(subscription)

        return unsubscribe

    def notify_listeners(self, location: Location, action: Action) -> None:
        """Call every active listener with the location and action."""
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.listener(location, action)
