"""
Cancellable periodic task for continuous monitoring
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional

from utils.logger import get_logger


class PeriodicTask:
    """
    Run a coroutine function every ``interval`` seconds until cancelled.

    Each run is awaited before the next sleep starts, so runs never overlap.
    ``cancel()`` stops future runs; a run already in flight finishes.
    """

    def __init__(
        self,
        callback: Callable[[], Awaitable[Any]],
        interval: float,
        name: str = "periodic-task"
    ):
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")

        self.logger = get_logger()
        self.callback = callback
        self.interval = interval
        self.name = name
        self.armed = False
        self.cancelled = False
        self.in_flight = False
        self.runs = 0
        self._task: Optional[asyncio.Task] = None

    def arm(self) -> None:
        """Start the timer. Must be called from a running event loop."""
        if self.cancelled:
            raise RuntimeError(f"{self.name} was cancelled and cannot be re-armed")
        if self.armed:
            return

        self.armed = True
        self._task = asyncio.get_running_loop().create_task(self._loop(), name=self.name)

    def cancel(self) -> bool:
        """
        Prevent any further run.

        Returns:
            True on the first call, False if already cancelled
        """
        if self.cancelled:
            return False

        self.cancelled = True
        self.armed = False

        # Only interrupt the sleep; an in-flight run completes on its own
        if self._task is not None and not self.in_flight:
            self._task.cancel()

        return True

    async def wait(self) -> None:
        """Block until the task has stopped"""
        if self._task is None:
            return
        try:
            await self._task
        except asyncio.CancelledError:
            if not self.cancelled:
                raise

    async def _loop(self) -> None:
        try:
            while not self.cancelled:
                await asyncio.sleep(self.interval)
                if self.cancelled:
                    break

                self.in_flight = True
                try:
                    await self.callback()
                except Exception as e:
                    self.logger.error(f"Scheduled run of {self.name} failed: {e}")
                finally:
                    self.in_flight = False
                    self.runs += 1
        finally:
            self.armed = False
