import logging
from typing import Sequence

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import FileResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.api.deps import get_db_session, get_file_store
from inventory_service.core.errors import NotFoundError, ValidationError
from inventory_service.crud.crud_item import crud_item
from inventory_service.schemas.item import Item, ItemCreate, ItemUpdate
from inventory_service.services.file_store import FileStore

LOG = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
async def register_item(
    *,
    db: AsyncSession = Depends(get_db_session),
    store: FileStore = Depends(get_file_store),
    inventory_name: str | None = Form(default=None),
    description: str | None = Form(default=None),
    photo: UploadFile | str | None = File(default=None),
) -> PlainTextResponse:
    """Register an item from a multipart form, storing the optional photo first."""
    if not inventory_name:
        raise ValidationError("inventory_name is required")

    stored_name = None
    # a text part named "photo" carries no file and is ignored
    upload = None if isinstance(photo, str) else photo
    if upload is not None and upload.filename:
        stored_name = await store.store(await upload.read(), upload.filename)

    try:
        item = await crud_item.create(
            db, obj_in=ItemCreate(name=inventory_name, description=description, photo=stored_name)
        )
    except SQLAlchemyError:
        if stored_name:
            await store.discard(stored_name)
        raise

    LOG.info("item registered id=%s photo=%s", item.id, stored_name or "-")
    return PlainTextResponse(
        "Created",
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/inventory/{item.id}"},
    )


@router.get("/inventory", response_model=list[Item])
async def read_items(db: AsyncSession = Depends(get_db_session)) -> Sequence[Item]:
    """Retrieve all items."""
    return await crud_item.get_multi(db)


@router.get("/inventory/{item_id}", response_model=Item)
async def read_item(*, db: AsyncSession = Depends(get_db_session), item_id: int) -> Item:
    """Get item by ID."""
    item = await crud_item.get(db, item_id)
    if item is None:
        raise NotFoundError()
    return item


@router.put("/inventory/{item_id}", response_class=PlainTextResponse)
async def update_item(
    *,
    db: AsyncSession = Depends(get_db_session),
    item_id: int,
    item_in: ItemUpdate | None = None,
) -> str:
    """Update name and/or description; omitted fields keep their values."""
    updated = await crud_item.update(db, item_id=item_id, obj_in=item_in or ItemUpdate())
    if not updated:
        raise NotFoundError()
    return "Updated"


@router.delete("/inventory/{item_id}", response_class=PlainTextResponse)
async def delete_item(*, db: AsyncSession = Depends(get_db_session), item_id: int) -> str:
    """Delete an item. Its photo file stays in the cache directory."""
    deleted = await crud_item.remove(db, item_id=item_id)
    if not deleted:
        raise NotFoundError()
    LOG.info("item deleted id=%s", item_id)
    return "Deleted"


@router.get("/inventory/{item_id}/photo", response_class=FileResponse)
async def read_item_photo(
    *,
    db: AsyncSession = Depends(get_db_session),
    store: FileStore = Depends(get_file_store),
    item_id: int,
) -> FileResponse:
    """Stream the stored photo of an item."""
    stored_name = await crud_item.get_photo_name(db, item_id)
    if stored_name is None:
        raise NotFoundError()
    path = await store.retrieve(stored_name)
    if path is None:
        LOG.warning("photo missing on disk id=%s name=%s", item_id, stored_name)
        raise NotFoundError()
    return FileResponse(path)
