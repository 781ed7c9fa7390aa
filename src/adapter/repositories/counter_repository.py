"""Counter Repository Implementations

SQLAlchemy upsert-based counter for shared databases and an
asyncio.Lock-guarded in-memory counter for single-instance deployments.
"""

import asyncio
from typing import Dict
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.counter_repository import CounterRepository
from src.domain.counter import Counter

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlAlchemyCounterRepository(CounterRepository):
    """
    SQLAlchemy implementation of CounterRepository

    Features:
    - Single INSERT ... ON CONFLICT DO UPDATE ... RETURNING statement
    - Implicit creation of missing counters
    - The counter row stays locked until the surrounding transaction ends,
      so a rolled back invoice also rolls back its number
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def increment(self, key: str) -> int:
        """
        Atomically increment the counter and return the new value

        Args:
            key: Sequence key

        Returns:
            The incremented value
        """
        dialect = self.session.bind.dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Atomic counters are not supported on {dialect}")

        table = Counter.__table__
        stmt = (
            insert(table)
            .values(key=key, seq=1)
            .on_conflict_do_update(
                index_elements=[table.c.key],
                set_={"seq": table.c.seq + 1},
            )
            .returning(table.c.seq)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def current(self, key: str) -> int:
        """
        Return the last value handed out for key

        Args:
            key: Sequence key

        Returns:
            Current counter value (0 if never used)
        """
        statement = select(Counter.seq).where(Counter.key == key)
        result = await self.session.execute(statement)
        value = result.scalar_one_or_none()
        return int(value) if value is not None else 0


class InMemoryCounterRepository(CounterRepository):
    """
    Process-local counter guarded by an asyncio.Lock

    Only valid for a single-instance deployment; values are lost on restart.
    """

    def __init__(self, initial: Dict[str, int] = None):
        self._values: Dict[str, int] = dict(initial or {})
        self._lock = asyncio.Lock()

    async def increment(self, key: str) -> int:
        async with self._lock:
            value = self._values.get(key, 0) + 1
            self._values[key] = value
            return value

    async def current(self, key: str) -> int:
        async with self._lock:
            return self._values.get(key, 0)
