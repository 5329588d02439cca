"""
Transaction helper for repository writes.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


async def run_in_transaction(
    session: AsyncSession, operation: Callable[[], Awaitable[T]]
) -> T:
    """
    Run ``operation`` inside a transaction on ``session``.

    The transaction commits when the operation returns and rolls back when it
    raises; the exception is re-raised. If the session already has a
    transaction open, a SAVEPOINT is used so only the operation's own work is
    rolled back.

    Example:
        ```python
        user = await run_in_transaction(session, lambda: insert_user(session))
        ```
    """
    if session.in_transaction():
        async with session.begin_nested():
            return await operation()

    async with session.begin():
        return await operation()
