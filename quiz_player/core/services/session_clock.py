"""Per-question countdown clock driving forced submissions on timeout."""

from __future__ import annotations

from typing import Callable

TickCallback = Callable[[int], None]
ExpireCallback = Callable[[], None]


class SessionClock:
    """Cancellable one-second countdown with a single expiry callback.

    Subclasses supply the tick source through ``_start_ticker`` and
    ``_stop_ticker`` and call ``_tick`` once per elapsed second. The countdown
    bookkeeping lives here so every implementation shares the same guarantees:
    re-arming cancels the previous arming, a cancelled arming never reaches its
    callbacks again, and ``on_expire`` fires at most once per arming.
    """

    def __init__(self) -> None:
        self._armed: bool = False
        self._remaining: int = 0
        self._on_tick: TickCallback | None = None
        self._on_expire: ExpireCallback | None = None

    @property
    def is_armed(self) -> bool:
        return self._armed

    @property
    def seconds_remaining(self) -> int:
        return self._remaining

    def arm(self, duration_seconds: int, on_tick: TickCallback, on_expire: ExpireCallback) -> None:
        """Start counting down from ``duration_seconds``."""
        self.cancel()
        self._remaining = max(0, int(duration_seconds))
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._armed = True
        self._start_ticker()

    def cancel(self) -> None:
        """Stop the current arming. Safe to call repeatedly."""
        if not self._armed:
            return
        self._disarm()

    def _disarm(self) -> None:
        self._armed = False
        self._on_tick = None
        self._on_expire = None
        self._stop_ticker()

    def _tick(self) -> None:
        if not self._armed:
            return
        self._remaining = max(0, self._remaining - 1)
        remaining = self._remaining
        on_tick = self._on_tick
        on_expire = self._on_expire
        if remaining == 0:
            # Disarm before running callbacks so on_expire may re-arm.
            self._disarm()
        if on_tick is not None:
            on_tick(remaining)
        if remaining == 0 and on_expire is not None:
            on_expire()

    def _start_ticker(self) -> None:
        raise NotImplementedError

    def _stop_ticker(self) -> None:
        raise NotImplementedError


class ManualSessionClock(SessionClock):
    """Virtual clock advanced explicitly, used where wall-clock waits are unwanted."""

    def advance(self, seconds: int = 1) -> None:
        """Let ``seconds`` virtual seconds elapse, one tick each."""
        for _ in range(seconds):
            self._tick()

    def _start_ticker(self) -> None:
        pass

    def _stop_ticker(self) -> None:
        pass
