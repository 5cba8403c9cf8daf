"""Data access for users and movies.

Each repository wraps an :class:`AsyncSession` and exposes the same small
operation set: paginated listing, lookup by id, insert, partial update and
delete. Only shaping of the query happens here; validation is the caller's
job. Storage errors propagate unchanged.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Type

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models import Movie, User
from security import get_password_hash
from validators import MOVIE_FIELDS, USER_FIELDS

PAGE_SIZE = 10

# Integer primary keys are 32-bit on Postgres; OFFSET is a signed 64-bit value.
MAX_ID = 2**31 - 1
MAX_PAGE = (2**63 - 1) // PAGE_SIZE


def page_offset(page: int) -> int:
    """Offset of the first row on 1-based ``page``."""
    if not 1 <= page <= MAX_PAGE:
        raise ValueError("page out of range")
    return (page - 1) * PAGE_SIZE


class Repository:
    """Operations shared by every resource table."""

    model: ClassVar[Type[Any]]
    mutable_fields: ClassVar[Sequence[str]] = ()

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _columns(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in data.items() if k in self.mutable_fields}

    async def find_all(self, page: int = 1) -> List[Any]:
        stmt = (
            select(self.model)
            .order_by(self.model.id)
            .limit(PAGE_SIZE)
            .offset(page_offset(page))
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_by_id(self, record_id: int) -> Optional[Any]:
        if not 1 <= record_id <= MAX_ID:
            return None
        return await self.db.get(self.model, record_id, populate_existing=True)

    async def insert(self, data: Mapping[str, Any]) -> int:
        """Insert a new row and return the id assigned by the database."""
        record = self.model(**self._columns(data))
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        return record.id

    async def update(self, record_id: int, data: Mapping[str, Any]) -> None:
        """Update only the columns present in ``data``.

        Keys outside ``mutable_fields`` are ignored; an empty result is a
        no-op. Updating a missing or out-of-range id affects no rows.
        """
        values = self._columns(data)
        if not values or not 1 <= record_id <= MAX_ID:
            return
        stmt = (
            update(self.model)
            .where(self.model.id == record_id)
            .values(**values)
        )
        await self.db.execute(stmt)
        await self.db.commit()

    async def delete(self, record_id: int) -> None:
        if not 1 <= record_id <= MAX_ID:
            return
        stmt = delete(self.model).where(self.model.id == record_id)
        await self.db.execute(stmt)
        await self.db.commit()


class UserRepository(Repository):
    model = User
    mutable_fields = USER_FIELDS

    def _columns(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        values = super()._columns(data)
        if "password" in values:
            values["password"] = get_password_hash(values["password"])
        return values

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).filter(User.email == email).order_by(User.id).limit(1)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()


class MovieRepository(Repository):
    model = Movie
    mutable_fields = MOVIE_FIELDS
