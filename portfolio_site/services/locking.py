# services/locking.py
"""Single-writer discipline for draft/publish transitions.

``save_draft``, ``discard_draft`` and ``publish`` all resolve the current
draft/published rows and then act on what they saw. Two writers running
that sequence concurrently could both observe "no draft" and both insert
one, so they run one at a time:

* inside one worker an ``asyncio.Lock`` orders them;
* on PostgreSQL a transaction-scoped advisory lock orders workers.

The unique index on ``portfolio_content.is_draft`` stays as the backstop.
"""
from __future__ import annotations

import asyncio
import weakref
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

# arbitrary constant shared by every worker
PORTFOLIO_LOCK_KEY = 724_301_551

_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = weakref.WeakKeyDictionary()


def _loop_lock() -> asyncio.Lock:
    loop = asyncio.get_running_loop()
    lock = _locks.get(loop)
    if lock is None:
        lock = _locks[loop] = asyncio.Lock()
    return lock


@asynccontextmanager
async def portfolio_write_lock(db: AsyncSession) -> AsyncIterator[None]:
    """Hold the portfolio write lock for the rest of the caller's transaction."""
    async with _loop_lock():
        if db.bind is not None and db.bind.dialect.name == "postgresql":
            # released by Postgres on commit/rollback
            await db.execute(text("SELECT pg_advisory_xact_lock(:key)"), {"key": PORTFOLIO_LOCK_KEY})
        yield


__all__ = ["portfolio_write_lock", "PORTFOLIO_LOCK_KEY"]
