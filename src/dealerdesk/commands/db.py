"""Database access for CLI commands."""

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession


T = TypeVar("T")


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """One session per command: commit on success, roll back on error."""
    from dealerdesk.core.database import async_engine, async_session_factory  # noqa: PLC0415

    try:
        async with async_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    finally:
        await async_engine.dispose()


def run(operation: Callable[[AsyncSession], Awaitable[T]]) -> T:
    """Run ``operation`` with a fresh session and return its result."""

    async def _run() -> T:
        async with session_scope() as session:
            return await operation(session)

    return asyncio.run(_run())
