"""
Confluence Bridge - Pacing

Injectable sleeper used between detail requests. The production sleeper
awaits asyncio.sleep, so pacing suspends only the current invocation.
Tests use FakeSleeper (fakes.py), which advances a virtual clock instead.
"""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable


@runtime_checkable
class SleeperProtocol(Protocol):
    """Something that can wait for a number of seconds."""

    async def sleep(self, seconds: float) -> None:
        """Suspend the caller for ``seconds``."""
        ...


class AsyncioSleeper:
    """Sleeper backed by asyncio.sleep."""

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
