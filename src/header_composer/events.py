"""
Single-threaded cooperative event queue.

Callbacks queued with :meth:`EventQueue.call_soon` run later, in order,
each to completion before the next starts. The renderer uses it to
defer artifact encoding the way a browser defers ``toBlob`` callbacks.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable


class EventQueue:
    """
    FIFO of zero-argument callbacks.

    Usage:
        queue = EventQueue()
        renderer = HeaderRenderer(schedule=queue.call_soon)
        renderer.render(images, settings)
        queue.run_pending()
    """

    def __init__(self) -> None:
        self._pending: deque[Callable[[], None]] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def call_soon(self, callback: Callable[[], None]) -> None:
        """Queue ``callback`` behind everything already pending."""
        self._pending.append(callback)

    def run_pending(self) -> int:
        """
        Run the callbacks queued so far and return how many ran.

        Callbacks queued while draining wait for the next call.
        Exceptions propagate; callbacks after the failing one stay queued.
        """
        ran = 0
        for _ in range(len(self._pending)):
            callback = self._pending.popleft()
            callback()
            ran += 1
        return ran
