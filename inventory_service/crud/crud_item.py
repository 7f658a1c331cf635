from typing import Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.models.item import Item
from inventory_service.schemas.item import ItemCreate, ItemUpdate

# items.id is a 32-bit serial; anything outside cannot match a row
MAX_ITEM_ID = 2**31 - 1


def _storable_id(item_id: int) -> bool:
    return 0 < item_id <= MAX_ITEM_ID


class CRUDItem:
    """CRUD helper for Item model.

    Every method issues at most one statement; nothing spans a transaction.
    """

    async def get(self, db: AsyncSession, item_id: int) -> Item | None:
        if not _storable_id(item_id):
            return None
        return await db.get(Item, item_id, populate_existing=True)

    async def get_multi(self, db: AsyncSession) -> Sequence[Item]:
        res = await db.execute(select(Item).order_by(Item.id))
        return res.scalars().all()

    async def create(self, db: AsyncSession, *, obj_in: ItemCreate) -> Item:
        db_obj = Item(**obj_in.model_dump())
        db.add(db_obj)
        await db.commit()
        return db_obj

    async def update(self, db: AsyncSession, *, item_id: int, obj_in: ItemUpdate) -> bool:
        """Apply a partial update; False when no row has this id."""
        if not _storable_id(item_id):
            return False
        stmt = (
            update(Item)
            .where(Item.id == item_id)
            .values(
                name=func.coalesce(obj_in.name, Item.name),
                description=func.coalesce(obj_in.description, Item.description),
            )
            .execution_options(synchronize_session=False)
        )
        res = await db.execute(stmt)
        await db.commit()
        return res.rowcount > 0

    async def remove(self, db: AsyncSession, *, item_id: int) -> bool:
        if not _storable_id(item_id):
            return False
        stmt = delete(Item).where(Item.id == item_id).execution_options(synchronize_session=False)
        res = await db.execute(stmt)
        await db.commit()
        return res.rowcount > 0

    async def get_photo_name(self, db: AsyncSession, item_id: int) -> str | None:
        """Stored photo filename; None when the item is absent or has no photo."""
        if not _storable_id(item_id):
            return None
        res = await db.execute(select(Item.photo).where(Item.id == item_id))
        return res.scalar_one_or_none() or None


crud_item = CRUDItem()
