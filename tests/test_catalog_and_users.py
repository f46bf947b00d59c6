import pytest

from azure_blob import UploadedFile
from fixtures_data import PNG_BYTES
from models import Facility, Floor, RoomType, Tower, Unit, UnitFacility, UnitImage, User, UserRole
from schemas.catalog import CatalogItemCreate, CatalogItemUpdate
from schemas.floor import FloorCreate, FloorUpdate
from schemas.user import UserCreate, UserUpdate
from services.building_service import FloorService, TowerService
from services.catalog_service import FacilityService, RoomTypeService
from services.errors import BadRequest, Forbidden, NotFound, Unauthorized
from services.user_service import UserService, pwd_context


def _image(name):
    return UploadedFile(filename=name, content=PNG_BYTES, content_type="image/png")


def test_salesman_cannot_create_facility(db, salesman):
    with pytest.raises(Forbidden):
        FacilityService.create(db, salesman, CatalogItemCreate(name="Sauna"))

    assert db.query(Facility).filter(Facility.name == "Sauna").count() == 0


def test_anonymous_caller_cannot_list_towers(db):
    with pytest.raises(Unauthorized):
        TowerService.list(db, None)


def test_admin_manages_room_types(db, admin, salesman):
    room_type = RoomTypeService.create(db, admin, CatalogItemCreate(name="2BR"))
    RoomTypeService.update(db, admin, room_type.id, CatalogItemUpdate(name="Two bedroom"))

    assert RoomTypeService.get(db, salesman, room_type.id).name == "Two bedroom"
    listed = RoomTypeService.list(db, salesman)
    assert listed["total"] == 2
    assert room_type.id in [item.id for item in listed["data"]]

    RoomTypeService.delete(db, admin, room_type.id)
    with pytest.raises(NotFound) as exc:
        RoomTypeService.get(db, admin, room_type.id)
    assert exc.value.message == "Room type not found"


def test_room_type_in_use_cannot_be_deleted(db, seed, admin, unit):
    with pytest.raises(BadRequest):
        RoomTypeService.delete(db, admin, seed.room_type.id)

    assert db.get(RoomType, seed.room_type.id) is not None


def test_deleting_facility_removes_unit_links(db, seed, admin, unit):
    db.add(UnitFacility(unit_id=unit.id, facility_id=seed.gym.id))
    db.commit()

    FacilityService.delete(db, admin, seed.gym.id)

    assert db.get(Facility, seed.gym.id) is None
    assert db.query(UnitFacility).count() == 0
    assert db.get(Unit, unit.id) is not None


def test_create_floor_with_and_without_plan(db, seed, admin, blob_store):
    plain = FloorService.create_floor(db, admin, FloorCreate(tower_id=seed.tower.id, label="L2", number=2), None, blob_store)
    assert plain.floor_plan_image_url is None

    planned = FloorService.create_floor(
        db, admin, FloorCreate(tower_id=seed.tower.id, label="L3", number=3), _image("plan.png"), blob_store
    )
    assert planned.floor_plan_image_url in blob_store.blobs


def test_create_floor_in_missing_tower(db, seed, admin, blob_store):
    with pytest.raises(BadRequest) as exc:
        FloorService.create_floor(db, admin, FloorCreate(tower_id=9999, label="L9", number=9), None, blob_store)

    assert exc.value.message == "Tower not found"


def test_new_floor_plan_replaces_old_blob(db, seed, admin, blob_store):
    floor = FloorService.create_floor(
        db, admin, FloorCreate(tower_id=seed.tower.id, label="L2", number=2), _image("old.png"), blob_store
    )
    old_reference = floor.floor_plan_image_url

    updated = FloorService.update_floor(db, admin, floor.id, FloorUpdate(label="Level 2"), _image("new.png"), blob_store)

    assert updated.label == "Level 2"
    assert updated.floor_plan_image_url != old_reference
    assert list(blob_store.blobs) == [updated.floor_plan_image_url]


def test_deleting_tower_discards_all_blobs(db, seed, admin, unit, blob_store):
    seed.floor.floor_plan_image_url = blob_store.store(PNG_BYTES, "plan.png").reference
    db.add(UnitImage(unit_id=unit.id, image_url=blob_store.store(PNG_BYTES, "unit.png").reference))
    db.commit()

    TowerService.delete(db, admin, seed.tower.id, blob_store)

    assert db.get(Tower, seed.tower.id) is None
    assert db.query(Floor).count() == 0
    assert db.query(Unit).count() == 0
    assert blob_store.blobs == {}


def test_create_user_hashes_password(db, admin):
    user = UserService.create_user(
        db, admin, UserCreate(name="New Sales", email="new@example.com", password="hunter22", role="salesman")
    )

    assert user.role == UserRole.SALESMAN
    assert user.password != "hunter22"
    assert pwd_context.verify("hunter22", user.password)


def test_duplicate_email_is_rejected(db, seed, admin):
    data = UserCreate(name="Copy", email="sales@example.com", password="hunter22", role="salesman")

    with pytest.raises(BadRequest) as exc:
        UserService.create_user(db, admin, data)

    assert exc.value.message == "Email already exists as a user"


def test_update_user_to_taken_email_is_rejected(db, seed, admin):
    with pytest.raises(BadRequest):
        UserService.update_user(db, admin, seed.salesman.id, UserUpdate(email="super@example.com"))


def test_admin_cannot_delete_self(db, seed, admin):
    with pytest.raises(Forbidden) as exc:
        UserService.delete_user(db, admin, admin.id)

    assert exc.value.message == "You are not allowed to delete yourself"
    assert db.get(User, admin.id) is not None


def test_delete_user(db, seed, admin):
    UserService.delete_user(db, admin, seed.supervisor.id)

    assert db.get(User, seed.supervisor.id) is None


def test_authenticate(db, seed):
    assert UserService.authenticate(db, "sales@example.com", "secret123").id == seed.salesman.id
    assert UserService.authenticate(db, "sales@example.com", "wrong-password") is None
    assert UserService.authenticate(db, "nobody@example.com", "secret123") is None
