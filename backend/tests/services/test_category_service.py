"""Category Service - create, ordered list, full replace, duplicate ids."""

from uuid import uuid4

import pytest

from autoconnect.core.errors import PersistenceError, ResourceNotFoundError
from autoconnect.schemas.category import CategoryCreate
from autoconnect.services import category_service


def _payload(categoryid="fuel", name="Fuel", **overrides):
    data = {
        "categoryid": categoryid, "name": name, "type": "expense",
        "color": "#ff7043", "icon": "local_gas_station",
    }
    data.update(overrides)
    return CategoryCreate.model_validate(data)


async def test_create_and_list_sorted_by_name(test_db):
    await category_service.create_category(test_db, _payload("salary", "Salary", type="income"))
    await category_service.create_category(test_db, _payload("fuel", "Fuel"))

    names = [c.name for c in await category_service.list_categories(test_db)]
    assert names == ["Fuel", "Salary"]


async def test_duplicate_categoryid_raises_persistence_error(test_db):
    await category_service.create_category(test_db, _payload())
    with pytest.raises(PersistenceError) as exc_info:
        await category_service.create_category(test_db, _payload(name="Fuel again"))
    assert "UNIQUE" in exc_info.value.message


async def test_update_replaces_every_field(test_db):
    category = await category_service.create_category(test_db, _payload())
    updated = await category_service.update_category(
        test_db, category.id,
        _payload("transport", "Transport", color="#42a5f5", icon="directions_car"),
    )
    assert updated.id == category.id
    assert updated.categoryid == "transport"
    assert updated.icon == "directions_car"


async def test_get_missing_raises_not_found(test_db):
    with pytest.raises(ResourceNotFoundError, match="Category"):
        await category_service.get_category(test_db, uuid4())
