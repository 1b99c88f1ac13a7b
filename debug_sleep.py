"""
Simulated analysis latency.

Agents wait through DebugSleep rather than asyncio.sleep directly so long waits
show up in the debug log with their reason and measured duration.
"""

import asyncio
import time
from typing import Optional

from constants import DebugSleepHelper
from storage.logs_manager import LogsManager


class DebugSleep:
    def __init__(self, logs_manager: Optional[LogsManager] = None):
        self.logs_manager = logs_manager

    async def _trace(self, message: str) -> None:
        if self.logs_manager is None:
            print(f"[DEBUG] {message}")
        else:
            await self.logs_manager.debug(message)

    async def sleep(self, seconds: float, reason: str = "") -> float:
        """
        Suspend for `seconds` (negative values are treated as zero).

        Returns:
            float: The measured duration in seconds
        """
        seconds = max(0.0, float(seconds))
        traced = DebugSleepHelper.should_log_wait(seconds)
        if traced:
            await self._trace(DebugSleepHelper.format_sleep_start(seconds, reason))

        started = time.monotonic()
        await asyncio.sleep(seconds)
        elapsed = time.monotonic() - started

        if traced:
            await self._trace(DebugSleepHelper.format_sleep_end(elapsed))
        return elapsed
