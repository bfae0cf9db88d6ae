"""
Timers driving the growth engine.

Everything runs on a single thread: callbacks are deferred, never run in
parallel. Delays are in milliseconds.
"""

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Set, Tuple

Callback = Callable[[], None]

# Periodic callbacks never repeat faster than this
MIN_INTERVAL_MS = 1.0


class TimerHandle:
    __slots__ = ('callback', 'due', 'interval', 'cancelled', 'timer', 'on_cancel')

    def __init__(self, callback: Callback, due: float, interval: Optional[float] = None):
        self.callback = callback
        self.due = due
        self.interval = interval
        self.cancelled = False
        self.timer = None      # Backend timer, if any
        self.on_cancel = None  # Called once when cancelled

    @property
    def periodic(self) -> bool:
        return self.interval is not None

    def cancel(self):
        self.cancelled = True
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None
        if self.on_cancel is not None:
            on_cancel, self.on_cancel = self.on_cancel, None
            on_cancel(self)

    def __repr__(self) -> str:
        kind = f"every {self.interval}ms" if self.periodic else "once"
        return f"TimerHandle(due={self.due:.1f}, {kind}, cancelled={self.cancelled})"


class Scheduler(ABC):
    @abstractmethod
    def call_later(self, delay_ms: float, callback: Callback) -> TimerHandle:
        pass

    @abstractmethod
    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        pass

    @abstractmethod
    def cancel_all(self):
        """Cancel every pending one-shot and periodic callback."""

    @property
    @abstractmethod
    def pending(self) -> int:
        pass


class SimulatedScheduler(Scheduler):
    """
    Scheduler with a virtual clock.

    Nothing runs until the clock is moved with ``advance`` or
    ``run_until_idle``; callbacks then fire in due order, ties in the order
    they were scheduled.
    """

    def __init__(self, start_ms: float = 0.0):
        self.now = float(start_ms)
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._counter = itertools.count()

    def _push(self, handle: TimerHandle):
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))

    def call_later(self, delay_ms: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(callback, self.now + max(delay_ms, 0.0))
        self._push(handle)
        return handle

    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        interval = max(interval_ms, MIN_INTERVAL_MS)
        handle = TimerHandle(callback, self.now + interval, interval)
        self._push(handle)
        return handle

    def cancel_all(self):
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def _has_one_shot(self) -> bool:
        return any(not h.cancelled and not h.periodic for _, _, h in self._queue)

    def _run_next(self):
        due, _, handle = heapq.heappop(self._queue)
        if handle.cancelled:
            return
        self.now = max(self.now, due)
        if handle.periodic:
            handle.due = due + handle.interval
            self._push(handle)
        handle.callback()

    def advance(self, ms: float):
        """Run every callback due within the next ``ms`` milliseconds."""
        target = self.now + max(ms, 0.0)
        while self._queue and self._queue[0][0] <= target:
            self._run_next()
        self.now = target

    def run_until_idle(self, limit_ms: Optional[float] = None) -> bool:
        """
        Run until no one-shot callback is pending.

        Periodic callbacks falling due meanwhile fire as usual but do not keep
        the scheduler busy. Returns False if ``limit_ms`` elapsed first.
        """
        deadline = None if limit_ms is None else self.now + limit_ms
        while self._has_one_shot():
            if deadline is not None and self._queue[0][0] > deadline:
                self.now = deadline
                return False
            self._run_next()
        return True


class AsyncioScheduler(Scheduler):
    """
    Scheduler on an asyncio event loop.

    Must be created while the loop is running unless ``loop`` is given.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = loop or asyncio.get_running_loop()
        self._handles: Set[TimerHandle] = set()

    def _now_ms(self) -> float:
        return self.loop.time() * 1000

    def _arm(self, handle: TimerHandle, delay_ms: float):
        handle.due = self._now_ms() + delay_ms
        handle.timer = self.loop.call_later(delay_ms / 1000, self._fire, handle)
        handle.on_cancel = self._handles.discard
        self._handles.add(handle)

    def _fire(self, handle: TimerHandle):
        handle.timer = None
        if handle.cancelled:
            self._handles.discard(handle)
            return
        if handle.periodic:
            self._arm(handle, handle.interval)
        else:
            self._handles.discard(handle)
        handle.callback()

    def call_later(self, delay_ms: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(callback, 0.0)
        self._arm(handle, max(delay_ms, 0.0))
        return handle

    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        interval = max(interval_ms, MIN_INTERVAL_MS)
        handle = TimerHandle(callback, 0.0, interval)
        self._arm(handle, interval)
        return handle

    def cancel_all(self):
        for handle in list(self._handles):
            handle.cancel()
        self._handles.clear()

    @property
    def pending(self) -> int:
        return len(self._handles)
