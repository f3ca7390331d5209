"""
Owner Service - business logic for owner records.

Owners sit at the top of the ownership chain, so creating one needs no
parent check; deleting one removes its properties together with their
images and traces.
"""
from typing import Optional
from sqlalchemy.orm import Session

from models import Owner, Property
from repositories import OwnerRepository, PropertyRepository
from schemas.owner import OwnerCreate, OwnerUpdate


def build_owner(data: OwnerCreate, photo: Optional[bytes] = None) -> Owner:
     """Construct an Owner from validated input, field by field."""
     return Owner(
          name=data.name,
          address=data.address,
          birthday=data.birthday,
          photo=photo,
     )


class OwnerService:
     """Service class for owner-related business logic."""

     @staticmethod
     def get_all(db: Session) -> list[Owner]:
          return OwnerRepository(db).list_all()

     @staticmethod
     def get_by_id(db: Session, owner_id: int) -> Optional[Owner]:
          """Return the owner, or None if it does not exist."""
          return OwnerRepository(db).get_by_id(owner_id)

     @staticmethod
     def add(db: Session, data: OwnerCreate, photo: Optional[bytes] = None) -> Owner:
          """
          Create an owner.

          Args:
               db: SQLAlchemy database session
               data: Validated owner fields
               photo: Raw photo bytes, stored as-is

          Returns:
               The created Owner with its id assigned
          """
          return OwnerRepository(db).insert(build_owner(data, photo))

     @staticmethod
     def update(db: Session, owner_id: int, data: OwnerUpdate, photo: Optional[bytes] = None) -> bool:
          """
          Overwrite name, address, birthday and photo of an owner.

          The photo is replaced as well: updating without one clears it.

          Returns:
               False if the owner does not exist
          """
          return OwnerRepository(db).update(owner_id, {
               "name": data.name,
               "address": data.address,
               "birthday": data.birthday,
               "photo": photo,
          })

     @staticmethod
     def delete(db: Session, owner_id: int) -> bool:
          """Delete an owner and, transitively, everything it owns."""
          return OwnerRepository(db).delete(owner_id)

     @staticmethod
     def get_properties(db: Session, owner_id: int) -> Optional[list[Property]]:
          """
          List the properties of an owner.

          Returns:
               None if the owner does not exist, otherwise its properties (possibly empty)
          """
          if not OwnerRepository(db).exists(owner_id):
               return None
          return PropertyRepository(db).list_by_owner(owner_id)
