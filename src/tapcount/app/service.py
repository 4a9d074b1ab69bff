"""
Counter Service

Application service that sits between the HTTP routes and a CounterStore.
Store I/O runs in the threadpool so the event loop stays free while the file
is read or written.
"""

import asyncio
import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from ..persistence import CounterStore, StoreError

logger = logging.getLogger(__name__)


class CounterService:
    """
    Read and increment the shared counter.

    When ``serialize_increments`` is enabled, increments in this process are
    queued behind an asyncio lock so concurrent requests cannot lose updates.
    Without it, concurrent read-modify-write cycles race and the last write
    wins. Creating the backing storage always goes through the lock.
    """

    def __init__(self, store: CounterStore, serialize_increments: bool = True):
        self.store = store
        self.serialize_increments = serialize_increments
        self._ready = False
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    def _get_lock(self) -> asyncio.Lock:
        # asyncio locks belong to one event loop
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def startup(self) -> None:
        """Create the backing storage if it does not exist yet."""
        async with self._get_lock():
            await run_in_threadpool(self.store.ensure)
            self._ready = True
        logger.info(f"Counter store ready: {self.store!r}")

    async def get_count(self) -> int:
        if not self._ready:
            await self._ensure_once()
        return await run_in_threadpool(self.store.read)

    async def _ensure_once(self) -> None:
        async with self._get_lock():
            if self._ready:
                return
            try:
                await run_in_threadpool(self.store.ensure)
                self._ready = True
            except StoreError as e:
                logger.warning(f"Could not initialize counter store: {e}")

    async def increment(self) -> int:
        if not self.serialize_increments:
            return await self._increment()
        async with self._get_lock():
            return await self._increment()

    async def _increment(self) -> int:
        count = await run_in_threadpool(self.store.read) + 1
        await run_in_threadpool(self.store.write, count)
        logger.debug(f"Counter incremented to {count}")
        return count
