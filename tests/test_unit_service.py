from decimal import Decimal

import pytest

from azure_blob import UploadedFile
from fixtures_data import PNG_BYTES
from models import Unit, UnitFacility, UnitImage, UnitStatus
from schemas.unit import UnitCreate, UnitUpdate
from services.errors import BadRequest, Forbidden, NotFound
from services.unit_service import UnitService


def _image(name):
    return UploadedFile(filename=name, content=PNG_BYTES, content_type="image/png")


def _unit_data(seed, **overrides):
    values = {
        "floor_id": seed.floor.id,
        "room_type_id": seed.room_type.id,
        "unit_code": "B-201",
        "price_offer": Decimal("980000000"),
        "semi_gross_area": Decimal("36.5"),
        "facilities": [seed.pool.id, seed.gym.id],
    }
    values.update(overrides)
    return UnitCreate(**values)


def test_create_unit_with_facilities_and_images(db, seed, admin, blob_store):
    unit = UnitService.create_unit(db, admin, _unit_data(seed), [_image("a.png"), _image("b.png")], blob_store)

    assert unit.status == UnitStatus.AVAILABLE
    assert {link.facility_id for link in unit.facilities} == {seed.pool.id, seed.gym.id}
    assert [image.image_url for image in unit.images] == list(blob_store.blobs)
    assert len(unit.images) == 2


def test_create_unit_rejects_non_available_status(db, seed, admin, blob_store):
    with pytest.raises(BadRequest) as exc:
        UnitService.create_unit(db, admin, _unit_data(seed, status="reserved"), [], blob_store)

    assert exc.value.message == "Unit status can only be set to available"
    assert db.query(Unit).count() == 0


def test_create_unit_with_missing_floor(db, seed, admin, blob_store):
    with pytest.raises(BadRequest) as exc:
        UnitService.create_unit(db, admin, _unit_data(seed, floor_id=9999), [_image("a.png")], blob_store)

    assert exc.value.message == "Floor not found"
    assert db.query(Unit).count() == 0
    assert blob_store.blobs == {}


def test_create_unit_with_missing_facility_stores_nothing(db, seed, admin, blob_store):
    data = _unit_data(seed, facilities=[seed.pool.id, 9999])

    with pytest.raises(BadRequest):
        UnitService.create_unit(db, admin, data, [_image("a.png")], blob_store)

    assert db.query(Unit).count() == 0
    assert db.query(UnitImage).count() == 0
    assert blob_store.blobs == {}


def test_create_unit_requires_admin(db, seed, salesman, blob_store):
    with pytest.raises(Forbidden):
        UnitService.create_unit(db, salesman, _unit_data(seed), [], blob_store)


def test_update_unit_keeps_composition_when_not_sent(db, seed, admin, blob_store):
    unit = UnitService.create_unit(db, admin, _unit_data(seed), [_image("a.png")], blob_store)

    updated = UnitService.update_unit(
        db, admin, unit.id, UnitUpdate(price_offer=Decimal("1000000000")), None, blob_store
    )

    assert updated.price_offer == Decimal("1000000000")
    assert {link.facility_id for link in updated.facilities} == {seed.pool.id, seed.gym.id}
    assert len(updated.images) == 1


def test_update_unit_replaces_facilities_and_images(db, seed, admin, blob_store):
    unit = UnitService.create_unit(db, admin, _unit_data(seed), [_image("a.png"), _image("b.png")], blob_store)

    data = UnitUpdate(unit_code="B-202", facilities=[seed.parking.id])
    updated = UnitService.update_unit(db, admin, unit.id, data, [_image("c.png")], blob_store)

    assert updated.unit_code == "B-202"
    assert db.query(UnitFacility).filter(UnitFacility.unit_id == unit.id).count() == 1
    assert db.query(UnitImage).filter(UnitImage.unit_id == unit.id).count() == 1
    assert len(blob_store.blobs) == 1


def test_update_missing_unit(db, seed, admin, blob_store):
    with pytest.raises(NotFound):
        UnitService.update_unit(db, admin, 9999, UnitUpdate(unit_code="X"), None, blob_store)


def test_update_unit_cannot_set_booked(db, seed, admin, unit, blob_store):
    with pytest.raises(BadRequest):
        UnitService.update_unit(db, admin, unit.id, UnitUpdate(status=UnitStatus.BOOKED), None, blob_store)


def test_list_units_filters(db, seed, admin, salesman, blob_store):
    UnitService.create_unit(db, admin, _unit_data(seed, unit_code="C-301"), [], blob_store)
    UnitService.create_unit(
        db, admin, _unit_data(seed, unit_code="C-302", facilities=[seed.parking.id]), [], blob_store
    )

    by_code = UnitService.list_units(db, salesman, unit_code="302")
    assert [unit.unit_code for unit in by_code["data"]] == ["C-302"]

    by_facility = UnitService.list_units(db, salesman, facility_id=seed.pool.id)
    assert [unit.unit_code for unit in by_facility["data"]] == ["C-301"]

    by_room_type = UnitService.list_units(db, salesman, room_type_id=seed.room_type.id, page=1, limit=1)
    assert by_room_type["total"] == 2
    assert by_room_type["data"][0].unit_code == "C-302"
    assert by_room_type["next_page"] == 2


def test_delete_unit_removes_rows_and_blobs(db, seed, admin, blob_store):
    unit = UnitService.create_unit(db, admin, _unit_data(seed), [_image("a.png")], blob_store)

    UnitService.delete_unit(db, admin, unit.id, blob_store)

    assert db.get(Unit, unit.id) is None
    assert db.query(UnitImage).count() == 0
    assert db.query(UnitFacility).count() == 0
    assert blob_store.blobs == {}


def test_get_missing_unit(db, seed, salesman):
    with pytest.raises(NotFound):
        UnitService.get_unit(db, salesman, 9999)
