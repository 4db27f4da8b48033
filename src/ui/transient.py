# src/ui/transient.py

"""Self-reverting boolean flags for short cosmetic animations."""

from collections.abc import Callable
from typing import Protocol


class Cancellable(Protocol):
    def stop(self) -> None: ...


# Matches the signature of Textual's ``set_timer(delay, callback)``.
Scheduler = Callable[[float, Callable[[], None]], Cancellable]


class TransientFlag:
    """A flag that switches on when triggered and back off after a delay.

    The revert is a cancellable timer obtained from *scheduler*, so the
    owning widget can stop it when it is torn down.  Triggering again
    while on restarts the delay.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        delay: float,
        on_change: Callable[[bool], None] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self.delay = delay
        self._on_change = on_change
        self._timer: Cancellable | None = None
        self.active = False

    def trigger(self) -> None:
        self._stop_timer()
        self._set(True)
        self._timer = self._scheduler(self.delay, self._revert)

    def cancel(self) -> None:
        """Stop any pending revert and switch the flag off now."""
        self._stop_timer()
        self._set(False)

    def _revert(self) -> None:
        self._timer = None
        self._set(False)

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _set(self, value: bool) -> None:
        if self.active == value:
            return
        self.active = value
        if self._on_change is not None:
            self._on_change(value)
