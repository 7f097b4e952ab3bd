"""A timer that runs a callback periodically on a background thread."""

from __future__ import annotations

import functools
import threading
from typing import Any, Callable, Optional


class Timer:
    """Periodic timer driven by its own daemon thread.

    With a negative ``repeat`` the callback fires once per period until
    :meth:`stop` is called.  With a non-negative ``repeat`` the timer runs that
    many rounds; each round waits one period and then fires the callback twice,
    checking in between whether the timer has been stopped.
    """

    def __init__(self, repeat: int = -1) -> None:
        self._repeat = repeat
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    def start(self, milliseconds: float, func: Callable[..., Any], *args: Any) -> None:
        """Start firing ``func(*args)`` every ``milliseconds``; ignored if already running."""
        if self.active():
            return
        stop_event = threading.Event()
        self._stop_event = stop_event
        callback = functools.partial(func, *args)
        self._thread = threading.Thread(
            target=self._run,
            args=(stop_event, milliseconds / 1000.0, callback),
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop the timer; a pending wait is cut short."""
        if self._stop_event is not None:
            self._stop_event.set()

    def active(self) -> bool:
        """Return True while the timer thread is running and not stopped."""
        return self._stop_event is not None and not self._stop_event.is_set()

    def _run(
        self,
        stop_event: threading.Event,
        period: float,
        callback: Callable[[], Any],
    ) -> None:
        try:
            if self._repeat < 0:
                while not stop_event.is_set():
                    stop_event.wait(period)
                    if stop_event.is_set():
                        return
                    callback()
            else:
                while self._repeat > 0:
                    if stop_event.is_set():
                        return
                    stop_event.wait(period)
                    callback()
                    if stop_event.is_set():
                        return
                    callback()
                    self._repeat -= 1
        finally:
            stop_event.set()