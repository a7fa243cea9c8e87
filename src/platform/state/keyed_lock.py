"""
Keyed in-process lock

Serializes check-then-act sections that touch the same logical resource
(e.g. one table slot) within a single worker process. Cross-process races are
caught by database unique constraints.
"""

from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager

import anyio

from src.platform.logging.loguru_io import Logger


class KeyedLockManager:
    def __init__(self) -> None:
        self._locks: dict[str, anyio.Lock] = {}
        self._waiters: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, *keys: str) -> AsyncIterator[None]:
        """
        Acquire the locks for all keys, in sorted order so two callers asking
        for overlapping key sets cannot deadlock.

        Usage:
            async with lock_manager.hold('slot:3:2026-11-02:19:00'):
                ...
        """
        ordered_keys = sorted(set(keys))
        async with AsyncExitStack() as stack:
            for key in ordered_keys:
                await stack.enter_async_context(self._hold_one(key))
            Logger.base.debug(f'🔒 [LOCK] Acquired {ordered_keys}')
            yield
        Logger.base.debug(f'🔓 [LOCK] Released {ordered_keys}')

    @asynccontextmanager
    async def _hold_one(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, anyio.Lock())
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[key] -= 1
            if not self._waiters[key]:
                # last holder gone
                del self._waiters[key]
                del self._locks[key]

    def active_keys(self) -> list[str]:
        return sorted(self._locks)


def slot_lock_key(*, table_id: int, booking_date: str, booking_time: str) -> str:
    return f'slot:{table_id}:{booking_date}:{booking_time}'


def customer_day_lock_key(*, customer_email: str, restaurant_id: int, booking_date: str) -> str:
    return f'customer-day:{customer_email}:{restaurant_id}:{booking_date}'


def customer_lock_key(*, customer_email: str) -> str:
    # same case-sensitive match as the customer.email unique index
    return f'customer:{customer_email}'
