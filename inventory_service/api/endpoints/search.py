from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PayloadError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.api.deps import get_db_session
from inventory_service.core.errors import NotFoundError, ValidationError
from inventory_service.crud.crud_item import crud_item
from inventory_service.schemas.item import Item, SearchRequest

router = APIRouter()

BAD_ID = "id must be an integer"


async def search_params(request: Request) -> SearchRequest:
    """Read the search body as JSON, or as the form posted by SearchForm.html."""
    content_type = request.headers.get("content-type", "")
    payload: Any
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationError("malformed JSON body")
    else:
        payload = dict(await request.form())
    if not isinstance(payload, dict):
        raise ValidationError(BAD_ID)
    try:
        return SearchRequest.model_validate(payload)
    except PayloadError as exc:
        if any(err["loc"][:1] == ("id",) for err in exc.errors()):
            raise ValidationError(BAD_ID)
        raise ValidationError("malformed search body")


def photo_reference(item_id: int) -> str:
    return f" (Photo: /inventory/{item_id}/photo)"


@router.post("/search", response_model=Item)
async def search_item(
    *,
    db: AsyncSession = Depends(get_db_session),
    params: SearchRequest = Depends(search_params),
) -> Item:
    """Look an item up by id, optionally pointing the description at its photo."""
    item_id = params.item_id()
    if item_id is None:
        raise ValidationError(BAD_ID)

    db_item = await crud_item.get(db, item_id)
    if db_item is None:
        raise NotFoundError()

    found = Item.model_validate(db_item)
    if params.wants_photo and found.photo:
        found.description = (found.description or "") + photo_reference(found.id)
    return found
