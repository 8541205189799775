"""Single-threaded timer scheduling.

The guard only needs ``time()`` and ``call_later()``, so an ``asyncio`` event
loop can be passed wherever a :class:`Scheduler` is expected. ``TimerQueue``
is the implementation used by frame-driven hosts such as the pygame window,
where due timers are run once per frame.
"""

import heapq
import itertools
import time
from collections.abc import Callable
from typing import Protocol


class Cancellable(Protocol):
    """Handle returned by a scheduler for a pending call."""

    def cancel(self) -> None:
        """Cancel the call. A cancelled call never runs."""
        ...


class Scheduler(Protocol):
    """Protocol for single-threaded deferred-call schedulers."""

    def time(self) -> float:
        """Return the scheduler's current time in seconds."""
        ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable:
        """Schedule ``callback`` to run after ``delay`` seconds.

        Args:
            delay: Delay in seconds.
            callback: Zero-argument callable.

        Returns:
            Handle that can cancel the call.
        """
        ...


class ScheduledCall:
    """A pending call in a :class:`TimerQueue`."""

    def __init__(
        self,
        deadline: float,
        seq: int,
        callback: Callable[[], None],
        queue: "TimerQueue | None" = None,
    ) -> None:
        self._deadline = deadline
        self._seq = seq
        self._callback: Callable[[], None] | None = callback
        self._cancelled = False
        self._queue = queue
        # True while the call sits in its queue's heap
        self._scheduled = queue is not None

    def __lt__(self, other: "ScheduledCall") -> bool:
        return (self._deadline, self._seq) < (other._deadline, other._seq)

    def when(self) -> float:
        return self._deadline

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._callback = None
        if self._scheduled and self._queue is not None:
            self._queue._call_cancelled()

    def cancelled(self) -> bool:
        return self._cancelled

    def _run(self) -> None:
        callback = self._callback
        self._callback = None
        if callback is not None:
            callback()


class TimerQueue:
    """Deferred calls run by polling, ordered by deadline then schedule order.

    Cancelled calls are removed lazily. Once they make up more than half of
    the heap (and at least ``MIN_COMPACT_SIZE`` entries), the heap is rebuilt
    from the live calls so frequent re-arming does not grow it without bound.
    """

    MIN_COMPACT_SIZE = 100

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._heap: list[ScheduledCall] = []
        self._counter = itertools.count()
        self._cancelled_count = 0

    def time(self) -> float:
        return self._clock()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(
            self._clock() + max(delay, 0.0), next(self._counter), callback, self
        )
        heapq.heappush(self._heap, call)
        return call

    @property
    def pending(self) -> int:
        """Number of scheduled calls that have not been cancelled."""
        return len(self._heap) - self._cancelled_count

    @property
    def next_deadline(self) -> float | None:
        """Deadline of the earliest live call, or None when idle."""
        self._discard_cancelled()
        return self._heap[0].when() if self._heap else None

    def run_due(self) -> int:
        """Run every call that is due now.

        Calls scheduled while this pass runs wait for a later pass, and calls
        cancelled by an earlier callback in the same pass are skipped.

        Returns:
            Number of callbacks that ran.
        """
        now = self._clock()
        ready: list[ScheduledCall] = []
        while self._heap and self._heap[0].when() <= now:
            ready.append(self._pop())

        ran = 0
        for call in ready:
            if call.cancelled():
                continue
            call._run()
            ran += 1
        return ran

    def clear(self) -> None:
        """Cancel and drop every scheduled call."""
        heap, self._heap = self._heap, []
        self._cancelled_count = 0
        for call in heap:
            call._scheduled = False
            call.cancel()

    def _pop(self) -> ScheduledCall:
        call = heapq.heappop(self._heap)
        call._scheduled = False
        if call.cancelled():
            self._cancelled_count -= 1
        return call

    def _discard_cancelled(self) -> None:
        while self._heap and self._heap[0].cancelled():
            self._pop()

    def _call_cancelled(self) -> None:
        self._cancelled_count += 1
        if (
            len(self._heap) > self.MIN_COMPACT_SIZE
            and self._cancelled_count * 2 > len(self._heap)
        ):
            self._compact()

    def _compact(self) -> None:
        live: list[ScheduledCall] = []
        for call in self._heap:
            if call.cancelled():
                call._scheduled = False
            else:
                live.append(call)
        heapq.heapify(live)
        self._heap = live
        self._cancelled_count = 0
