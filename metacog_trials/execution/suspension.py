"""
Suspension primitive.

A Suspension is a point where a phase yields control to the event loop until
a timer elapses or its owner resolves it. Nothing blocks while suspended.
"""

import asyncio
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class Suspension:
    """
    Resolvable, cancellable delay bound to the running event loop.

    Example:
        pause = Suspension(500)     # resolves with None after 500ms
        await pause

        gate = Suspension()         # resolves only when resolve() is called
        loop.call_soon(gate.resolve, "done")
        result = await gate         # "done"

    Args:
        duration_ms: Delay after which the suspension resolves by itself
                     (None = wait for resolve())
        value: Result delivered when the delay elapses
    """

    def __init__(self, duration_ms: Optional[float] = None, value: Any = None):
        self._loop = asyncio.get_running_loop()
        self._future = self._loop.create_future()
        self._timer = None
        self.duration_ms = duration_ms

        if duration_ms is not None:
            self._timer = self._loop.call_later(max(duration_ms, 0) / 1000.0, self.resolve, value)

    @property
    def done(self) -> bool:
        return self._future.done()

    @property
    def cancelled(self) -> bool:
        return self._future.cancelled()

    def resolve(self, value: Any = None) -> bool:
        """
        Resolve the suspension early.

        Returns:
            True if this call resolved it, False if it was already settled
        """
        if self._future.done():
            return False
        self._cancel_timer()
        self._future.set_result(value)
        return True

    def cancel(self) -> bool:
        """
        Cancel the suspension; awaiting it raises asyncio.CancelledError.

        Returns:
            True if this call cancelled it, False if it was already settled
        """
        self._cancel_timer()
        return self._future.cancel()

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def __await__(self):
        return self._future.__await__()

    def __repr__(self):
        state = 'cancelled' if self.cancelled else ('done' if self.done else 'pending')
        return f"Suspension(duration_ms={self.duration_ms}, {state})"


async def wait(duration_ms: Optional[float]) -> None:
    """
    Suspend the current phase for a fixed duration.

    A zero or None duration still yields to the event loop once so that phases
    always hand control back between steps.

    Args:
        duration_ms: Duration in ms
    """
    if not duration_ms or duration_ms <= 0:
        await asyncio.sleep(0)
        return

    logger.debug(f"Suspending for {duration_ms}ms")
    await Suspension(duration_ms)
