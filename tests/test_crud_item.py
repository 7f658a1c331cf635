import pytest

from inventory_service.crud.crud_item import MAX_ITEM_ID, crud_item
from inventory_service.schemas.item import ItemCreate, ItemUpdate

pytestmark = pytest.mark.asyncio


async def test_create_and_get(session):
    item = await crud_item.create(session, obj_in=ItemCreate(name="Drill", description="18V"))
    assert item.id is not None

    got = await crud_item.get(session, item.id)
    assert got is not None
    assert (got.name, got.description, got.photo) == ("Drill", "18V", None)


async def test_get_multi_lists_in_id_order(session):
    first = await crud_item.create(session, obj_in=ItemCreate(name="Saw"))
    second = await crud_item.create(session, obj_in=ItemCreate(name="Hammer", photo="1.png"))

    items = await crud_item.get_multi(session)
    assert [i.id for i in items] == [first.id, second.id]
    assert [i.name for i in items] == ["Saw", "Hammer"]


async def test_update_keeps_omitted_fields(session):
    item = await crud_item.create(session, obj_in=ItemCreate(name="Drill", description="18V"))

    assert await crud_item.update(session, item_id=item.id, obj_in=ItemUpdate(description="20V")) is True
    got = await crud_item.get(session, item.id)
    assert (got.name, got.description) == ("Drill", "20V")

    assert await crud_item.update(session, item_id=item.id, obj_in=ItemUpdate()) is True
    got = await crud_item.get(session, item.id)
    assert (got.name, got.description) == ("Drill", "20V")

    assert await crud_item.update(session, item_id=item.id, obj_in=ItemUpdate(name="Impact drill")) is True
    got = await crud_item.get(session, item.id)
    assert (got.name, got.description) == ("Impact drill", "20V")


async def test_update_missing_row_reports_not_found(session):
    assert await crud_item.update(session, item_id=404, obj_in=ItemUpdate(name="x")) is False


async def test_remove_uses_affected_rows(session):
    item = await crud_item.create(session, obj_in=ItemCreate(name="Level"))

    assert await crud_item.remove(session, item_id=item.id) is True
    assert await crud_item.get(session, item.id) is None
    assert await crud_item.remove(session, item_id=item.id) is False


async def test_get_photo_name(session):
    plain = await crud_item.create(session, obj_in=ItemCreate(name="Tape"))
    pictured = await crud_item.create(session, obj_in=ItemCreate(name="Clamp", photo="1700000000000.jpg"))

    assert await crud_item.get_photo_name(session, plain.id) is None
    assert await crud_item.get_photo_name(session, pictured.id) == "1700000000000.jpg"
    assert await crud_item.get_photo_name(session, 9999) is None


async def test_ids_outside_the_column_range_never_match(session):
    for item_id in (0, -1, MAX_ITEM_ID + 1):
        assert await crud_item.get(session, item_id) is None
        assert await crud_item.update(session, item_id=item_id, obj_in=ItemUpdate(name="x")) is False
        assert await crud_item.remove(session, item_id=item_id) is False
        assert await crud_item.get_photo_name(session, item_id) is None
