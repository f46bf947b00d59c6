from decimal import Decimal
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from azure_blob import BlobStore, StoredBlob
from database import build_engine, init_db
from models import Facility, Floor, RoomType, Tower, Unit, UnitStatus, User, UserRole
from services.access_control import Caller
from services.user_service import pwd_context

PASSWORD = "secret123"


class InMemoryBlobStore(BlobStore):
    """Blob store double keeping content in a dict; references listed in `failing` cannot be deleted."""

    def __init__(self):
        self.blobs = {}
        self.failing = set()
        self._counter = 0

    def store(self, content, original_filename):
        self._counter += 1
        reference = f"mem://blobs/{self._counter}-{original_filename}"
        self.blobs[reference] = content
        return StoredBlob(reference=reference, mime_type="image/png", size=len(content))

    def delete(self, reference):
        if reference in self.failing:
            raise OSError(f"cannot delete {reference}")
        self.blobs.pop(reference, None)


@pytest.fixture
def engine():
    engine = build_engine("sqlite+pysqlite:///:memory:", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    testing_session_local = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    session = testing_session_local()
    yield session
    session.close()


@pytest.fixture
def blob_store():
    return InMemoryBlobStore()


@pytest.fixture
def seed(db):
    hashed = pwd_context.hash(PASSWORD)
    admin = User(name="Ayu Admin", email="admin@example.com", password=hashed, role=UserRole.ADMIN)
    salesman = User(name="Sari Sales", email="sales@example.com", password=hashed, role=UserRole.SALESMAN)
    supervisor = User(name="Budi Supervisor", email="super@example.com", password=hashed, role=UserRole.SUPERVISOR)

    tower = Tower(name="Tower A")
    floor = Floor(tower=tower, label="L1", number=1, floor_plan_image_url=None)
    room_type = RoomType(name="Studio")
    pool = Facility(name="Pool")
    gym = Facility(name="Gym")
    parking = Facility(name="Parking")

    db.add_all([admin, salesman, supervisor, tower, floor, room_type, pool, gym, parking])
    db.commit()

    return SimpleNamespace(
        admin=admin,
        salesman=salesman,
        supervisor=supervisor,
        tower=tower,
        floor=floor,
        room_type=room_type,
        pool=pool,
        gym=gym,
        parking=parking,
    )


@pytest.fixture
def admin(seed):
    return Caller(id=seed.admin.id, role=UserRole.ADMIN, email=seed.admin.email)


@pytest.fixture
def salesman(seed):
    return Caller(id=seed.salesman.id, role=UserRole.SALESMAN, email=seed.salesman.email)


@pytest.fixture
def supervisor(seed):
    return Caller(id=seed.supervisor.id, role=UserRole.SUPERVISOR, email=seed.supervisor.email)


@pytest.fixture
def unit(db, seed):
    unit = Unit(
        floor_id=seed.floor.id,
        room_type_id=seed.room_type.id,
        unit_code="A-101",
        price_offer=Decimal("1500000000.00"),
        semi_gross_area=Decimal("45.50"),
        status=UnitStatus.AVAILABLE,
    )
    db.add(unit)
    db.commit()
    return unit


@pytest.fixture
def client(db, blob_store, seed):
    import main
    from database import get_session
    from dependencies import get_blob_store

    main.app.dependency_overrides[get_session] = lambda: db
    main.app.dependency_overrides[get_blob_store] = lambda: blob_store

    with TestClient(main.app) as test_client:
        yield test_client

    main.app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Log in through the API and return the Authorization header for that user."""

    def _login(email, password=PASSWORD):
        response = client.post("/api/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
