import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from inventory_service.db.base import Base
from inventory_service.models import item  # noqa: F401  registers the items table


LOG = logging.getLogger(__name__)


async def init_db(engine: AsyncEngine) -> None:
    """Create the items table if it does not exist.

    Only used for local runs (INIT_DB=true) and tests; deployed databases are
    provisioned separately. Safe to run multiple times.
    """

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        LOG.info("database initialized: ensured tables exist")
    except Exception as exc:
        LOG.error("database initialization failed err=%s", exc)
        raise
