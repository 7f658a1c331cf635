from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory_service.db.base import Base


class Item(Base):
    """SQLAlchemy model for an inventory item."""

    __tablename__ = "items"
    # ids are never handed out twice, also on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(Text(), nullable=False)
    description: Mapped[str | None] = mapped_column(Text())
    # stored filename inside the cache directory, never the bytes
    photo: Mapped[str | None] = mapped_column(Text())
