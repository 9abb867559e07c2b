"""
List repository - database operations for List.

Every method opens its own session from the injected session maker, so
each operation is one transaction and the repository owns its boundaries.
Anything the database layer raises leaves here as NotFound or Internal.
"""

import logging
from typing import List as ListType

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import func

from app.errors import NotFound, classified
from app.models.list import List

logger = logging.getLogger(__name__)


class ListRepository:
    """Repository for List database operations."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker

    async def _get_by_id(
        self, db: AsyncSession, list_id: int, for_update: bool = False
    ) -> List:
        query = select(List).where(List.id == list_id)
        if for_update:
            query = query.with_for_update()
        result = await db.execute(query)
        list_obj = result.scalar_one_or_none()
        if list_obj is None:
            raise NotFound("List", list_id)
        return list_obj

    async def get(self, list_id: int) -> List:
        """Get a list by ID. Raises NotFound if there is none."""
        async with classified(), self.session_maker() as db:
            return await self._get_by_id(db, list_id)

    async def list_all(self) -> ListType[List]:
        """All lists, oldest id first. Empty when there are none."""
        async with classified(), self.session_maker() as db:
            result = await db.execute(select(List).order_by(List.id.asc()))
            return list(result.scalars().all())

    async def create(self, name: str) -> List:
        """Create a new list. The name must already be validated."""
        async with classified(), self.session_maker() as db:
            async with db.begin():
                new_list = List(name=name)
                db.add(new_list)
                await db.flush()
                await db.refresh(new_list)
        logger.debug("Created list id=%s", new_list.id)
        return new_list

    async def delete(self, list_id: int) -> None:
        """Delete a list. Deleting an id that does not exist is not an error."""
        async with classified(), self.session_maker() as db:
            async with db.begin():
                result = await db.execute(delete(List).where(List.id == list_id))
        logger.debug("Deleted list id=%s rows=%s", list_id, result.rowcount)

    async def update(self, list_id: int, name: str) -> List:
        """
        Rename a list.

        The read, the comparison and the write share one transaction, and the
        row is locked while we compare. When the name is unchanged nothing is
        written: the session closes, the transaction rolls back and updated_at
        stays where it was.
        """
        async with classified(), self.session_maker() as db:
            list_obj = await self._get_by_id(db, list_id, for_update=True)

            if list_obj.name == name:
                logger.debug("List id=%s unchanged, skipping write", list_id)
                return list_obj

            list_obj.name = name
            list_obj.updated_at = func.now()
            await db.flush()
            await db.refresh(list_obj)
            await db.commit()

        logger.debug("Renamed list id=%s", list_id)
        return list_obj
