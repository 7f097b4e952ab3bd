"""Timers polled by a manager that fires the ones that are due."""

from __future__ import annotations

import functools
import heapq
import itertools
import time
from typing import Any, Callable, Optional


class ManagedTimer:
    """A timer with a due time, a period in milliseconds and a repeat count.

    A negative ``repeat`` means the timer repeats without limit.
    """

    def __init__(self, repeat: int = -1) -> None:
        self.time = self.now()
        self.period = 0
        self.repeat = repeat
        self._func: Optional[Callable[[], Any]] = None

    def callback(self, milliseconds: int, func: Callable[..., Any], *args: Any) -> None:
        """Set the period and the callback ``func(*args)``."""
        self.period = milliseconds
        self._func = functools.partial(func, *args)

    def on_timer(self) -> None:
        """Fire the callback once and move the due time forward by one period."""
        if self._func is None or self.repeat == 0:
            return
        self._func()
        self.time += self.period
        if self.repeat > 0:
            self.repeat -= 1

    @staticmethod
    def now() -> int:
        """Return the system time in milliseconds since the epoch."""
        return time.time_ns() // 1_000_000


class TimerManager:
    """Keeps timers ordered by due time and fires them from :meth:`update`."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, ManagedTimer]] = []
        self._sequence = itertools.count()

    def _push(self, timer: ManagedTimer) -> None:
        heapq.heappush(self._heap, (timer.time, next(self._sequence), timer))

    def schedule(
        self,
        milliseconds: int,
        func: Callable[..., Any],
        *args: Any,
        repeat: int = -1,
    ) -> ManagedTimer:
        """Add a timer firing ``func(*args)`` every ``milliseconds``, first at once."""
        timer = ManagedTimer(repeat)
        timer.callback(milliseconds, func, *args)
        self._push(timer)
        return timer

    def update(self) -> None:
        """Fire every timer whose due time has been reached."""
        if not self._heap:
            return
        now = ManagedTimer.now()
        while self._heap and self._heap[0][0] <= now:
            _, _, timer = heapq.heappop(self._heap)
            timer.on_timer()
            if timer.repeat != 0:
                self._push(timer)

    def __len__(self) -> int:
        return len(self._heap)