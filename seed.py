"""
Bootstrap catalog data: two owners, one property each, and one image and
one sale trace per property.

The rows are plain dicts with explicit ids; the initial Alembic revision
keeps its own copy of the same rows.
"""
from datetime import date

from sqlalchemy.orm import Session

from models import Owner, Property, PropertyImage, PropertyTrace
from utils.logger import get_logger

logger = get_logger(__name__)

SEED_OWNERS = [
     {"id": 1, "name": "John Doe", "address": "123 Elm Street", "birthday": date(1975, 8, 15), "photo": None},
     {"id": 2, "name": "Jane Smith", "address": "456 Oak Avenue", "birthday": date(1980, 5, 22), "photo": None},
]

SEED_PROPERTIES = [
     {
          "id": 1, "name": "Modern Villa", "address": "789 Pine Road", "price": 500000,
          "code_internal": "MODV123", "year": 2015, "owner_id": 1,
     },
     {
          "id": 2, "name": "Beachfront Condo", "address": "10 Ocean Drive", "price": 300000,
          "code_internal": "BFCD456", "year": 2018, "owner_id": 2,
     },
]

SEED_PROPERTY_IMAGES = [
     {"id": 1, "file": None, "enabled": True, "property_id": 1},
     {"id": 2, "file": None, "enabled": True, "property_id": 2},
]

SEED_PROPERTY_TRACES = [
     {"id": 1, "date_sale": date(2020, 7, 15), "name": "Initial Sale", "value": 450000, "tax": 45000, "property_id": 1},
     {"id": 2, "date_sale": date(2021, 3, 10), "name": "Initial Sale", "value": 280000, "tax": 28000, "property_id": 2},
]


def _without(row: dict, *keys: str) -> dict:
     return {k: v for k, v in row.items() if k not in keys}


def seed_catalog(db: Session) -> bool:
     """
     Insert the bootstrap rows into an empty catalog.

     Parents and children are linked through the ORM relationships, so the
     foreign keys come out right whatever ids the database hands out.

     Returns:
          False if owners already exist (nothing is inserted), True otherwise
     """
     if db.query(Owner.id).first() is not None:
          logger.info("Catalog already has data, skipping seed")
          return False

     for owner_row in SEED_OWNERS:
          owner = Owner(**_without(owner_row, "id"))
          for property_row in SEED_PROPERTIES:
               if property_row["owner_id"] != owner_row["id"]:
                    continue
               prop = Property(**_without(property_row, "id", "owner_id"))
               prop.property_images = [
                    PropertyImage(**_without(row, "id", "property_id"))
                    for row in SEED_PROPERTY_IMAGES if row["property_id"] == property_row["id"]
               ]
               prop.property_traces = [
                    PropertyTrace(**_without(row, "id", "property_id"))
                    for row in SEED_PROPERTY_TRACES if row["property_id"] == property_row["id"]
               ]
               owner.properties.append(prop)
          db.add(owner)

     db.commit()
     logger.info(f"Seeded {len(SEED_OWNERS)} owners and {len(SEED_PROPERTIES)} properties")
     return True
