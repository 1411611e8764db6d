"""Wall-clock and sleep capability injected into messages and channels."""

import asyncio
from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of UTC time and of cooperative delays."""

    def now(self) -> datetime:
        ...

    async def sleep(self, seconds: float) -> None:
        ...


class SystemClock:
    """Real clock backed by the system time and the running event loop."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


system_clock = SystemClock()


def utc_now() -> datetime:
    """Return the current UTC time from the system clock."""
    return system_clock.now()


def get_clock() -> Clock:
    """Return the clock used by HTTP routes."""
    return system_clock
