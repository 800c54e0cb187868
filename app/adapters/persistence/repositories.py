"""SQLAlchemy implementation of the counter port."""

from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.adapters.persistence.models import CounterModel
from app.application.ports.counter_repo import CounterRepository
from app.domain.errors import MalformedStoredValue, StorageUnavailable

logger = logging.getLogger(__name__)

LIKES_COUNTER = "likes"


class SqlCounterRepository(CounterRepository):
    """Counter kept in a single row of the ``counters`` table.

    Each call opens its own short session, so one instance can be shared by
    HTTP requests and the live channel. Increments are a single
    ``UPDATE ... SET value = value + 1`` and never lose updates.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], name: str = LIKES_COUNTER):
        self._session_factory = session_factory
        self._name = name

    async def get(self) -> int:
        try:
            async with self._session_factory() as s:
                value = await self._ensure_row(s)
                await s.commit()
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"Cannot read counter {self._name!r}: {e}") from e
        return _checked(value)

    async def increment(self) -> int:
        try:
            async with self._session_factory() as s:
                await self._ensure_row(s)
                result = await s.execute(
                    update(CounterModel)
                    .where(CounterModel.name == self._name)
                    .values(value=CounterModel.value + 1)
                    .returning(CounterModel.value)
                )
                value = result.scalar_one()
                await s.commit()
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"Cannot increment counter {self._name!r}: {e}") from e
        logger.debug("Counter %s incremented to %d", self._name, value)
        return _checked(value)

    async def set(self, value: int) -> int:
        if value < 0:
            raise ValueError(f"Like count cannot be negative: {value}")
        try:
            async with self._session_factory() as s:
                await self._ensure_row(s)
                await s.execute(
                    update(CounterModel)
                    .where(CounterModel.name == self._name)
                    .values(value=value)
                )
                await s.commit()
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"Cannot set counter {self._name!r}: {e}") from e
        return value

    async def check_available(self) -> None:
        try:
            async with self._session_factory() as s:
                result = await s.execute(
                    select(CounterModel.value).where(CounterModel.name == self._name)
                )
                value = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"Cannot read counter {self._name!r}: {e}") from e
        if value is not None:
            _checked(value)

    async def _ensure_row(self, s: AsyncSession) -> int:
        result = await s.execute(
            select(CounterModel.value).where(CounterModel.name == self._name)
        )
        value = result.scalar_one_or_none()
        if value is not None:
            return value
        s.add(CounterModel(name=self._name, value=0))
        try:
            await s.flush()
        except IntegrityError:
            # Another request created the row first
            await s.rollback()
            result = await s.execute(
                select(CounterModel.value).where(CounterModel.name == self._name)
            )
            return result.scalar_one()
        return 0


def _checked(value: int | None) -> int:
    if value is None or value < 0:
        raise MalformedStoredValue(str(value))
    return value
