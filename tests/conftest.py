"""
Pytest configuration and shared fixtures.

Provides:
- In-memory SQLite engine per test (foreign keys and case-sensitive LIKE on)
- Session fixtures, empty and seeded with the bootstrap catalog
- FastAPI TestClient whose get_session dependency yields the test session
- Small factories for creating rows through the services
"""
import os
import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# Add project root to path for imports
if str(ROOT) not in sys.path:
     sys.path.insert(0, str(ROOT))

# Configure before importing the app: no file database, no startup table creation
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest  # noqa: E402 (import after env setup)
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from database import build_engine, get_session  # noqa: E402
from main import app  # noqa: E402
from models import Base  # noqa: E402
from schemas import OwnerCreate, PropertyCreate, PropertyTraceCreate, PropertyImageCreate  # noqa: E402
from seed import seed_catalog  # noqa: E402
from services import OwnerService, PropertyService, PropertyImageService, PropertyTraceService  # noqa: E402


@pytest.fixture
def engine():
     test_engine = build_engine("sqlite://", poolclass=StaticPool)
     Base.metadata.create_all(bind=test_engine)
     yield test_engine
     Base.metadata.drop_all(bind=test_engine)
     test_engine.dispose()


@pytest.fixture
def db_session(engine):
     TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
     session = TestingSession()
     yield session
     session.close()


@pytest.fixture
def seeded_session(db_session):
     seed_catalog(db_session)
     return db_session


@pytest.fixture
def client(db_session):
     def _override_get_session():
          yield db_session

     app.dependency_overrides[get_session] = _override_get_session
     with TestClient(app) as test_client:
          yield test_client
     app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(seeded_session, client):
     return client


# ============================================================================
# Factories
# ============================================================================


@pytest.fixture
def make_owner(db_session):
     def _make(name="Ada Owner", address="1 Main St", birthday=date(1970, 1, 1), photo=None):
          return OwnerService.add(db_session, OwnerCreate(name=name, address=address, birthday=birthday), photo)
     return _make


@pytest.fixture
def make_property(db_session, make_owner):
     def _make(owner_id=None, name="Test House", price=1000, year=2000, address="2 Side St", code_internal="TH1"):
          if owner_id is None:
               owner_id = make_owner().id
          return PropertyService.add(db_session, PropertyCreate(
               name=name,
               address=address,
               price=price,
               code_internal=code_internal,
               year=year,
               owner_id=owner_id,
          ))
     return _make


@pytest.fixture
def make_image(db_session):
     def _make(property_id, enabled=True, file=None):
          return PropertyImageService.add(
               db_session, PropertyImageCreate(property_id=property_id, enabled=enabled), file
          )
     return _make


@pytest.fixture
def make_trace(db_session):
     def _make(property_id, name="Sale", value=100, tax=10, date_sale=date(2020, 1, 1)):
          return PropertyTraceService.add(db_session, PropertyTraceCreate(
               date_sale=date_sale,
               name=name,
               value=value,
               tax=tax,
               property_id=property_id,
          ))
     return _make
