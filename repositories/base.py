"""
repositories/base.py
--------------------
Shared CRUD operations for the entity repositories.

Every write commits on its own; a failed write rolls the session back
before the error is re-raised as a catalog exception.
"""
from typing import Any, Generic, Mapping, Optional, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from errors import ConstraintViolation, StorageFailure
from models import Base
from utils.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
     """Repository over one mapped table keyed by an integer ``id``."""

     model: type[ModelT]
     # Columns overwritten by update(); identity and anything fixed at creation stay out
     mutable_fields: tuple[str, ...] = ()

     def __init__(self, db: Session):
          self.db = db

     @property
     def entity_name(self) -> str:
          return self.model.__name__

     # ── READ ──────────────────────────────────────────────

     def list_all(self) -> list[ModelT]:
          """Return every row ordered by id."""
          return self.db.query(self.model).order_by(self.model.id).all()

     def get_by_id(self, entity_id: int) -> Optional[ModelT]:
          """Point lookup; None when the id is unknown."""
          return self.db.get(self.model, entity_id)

     def exists(self, entity_id: int) -> bool:
          return self.db.query(self.model.id).filter(self.model.id == entity_id).first() is not None

     # ── WRITE ─────────────────────────────────────────────

     def insert(self, record: ModelT) -> ModelT:
          """
          Persist a new row and return it with its id assigned.

          Raises:
               ConstraintViolation: a foreign key or column constraint was rejected.
               StorageFailure: any other database error.
          """
          self.db.add(record)
          self._commit("insert")
          logger.info(f"Inserted {self.entity_name} #{record.id}")
          return record

     def update(self, entity_id: int, values: Mapping[str, Any]) -> bool:
          """
          Overwrite every mutable field of the row with the given values.

          Returns:
               False if no row has this id, True otherwise.
          """
          unknown = set(values) - set(self.mutable_fields)
          if unknown:
               raise ValueError(f"{self.entity_name} fields are not updatable: {sorted(unknown)}")

          row = self.get_by_id(entity_id)
          if row is None:
               return False

          for field in self.mutable_fields:
               setattr(row, field, values[field])

          self._commit("update")
          logger.info(f"Updated {self.entity_name} #{entity_id}")
          return True

     def delete(self, entity_id: int) -> bool:
          """
          Remove the row and everything that depends on it.

          Dependent rows go in the same transaction through the ORM cascade,
          so the result does not depend on the engine supporting ON DELETE CASCADE.

          Returns:
               False if no row has this id, True otherwise.
          """
          row = self.get_by_id(entity_id)
          if row is None:
               return False

          # Collections loaded earlier may predate a re-parenting; cascade from what is stored
          self.db.expire_all()
          self.db.delete(row)
          self._commit("delete")
          logger.info(f"Deleted {self.entity_name} #{entity_id}")
          return True

     def _commit(self, action: str) -> None:
          try:
               self.db.commit()
          except IntegrityError as exc:
               self.db.rollback()
               logger.warning(f"{self.entity_name} {action} rejected by constraint: {exc.orig}")
               raise ConstraintViolation(
                    f"{self.entity_name} {action} violates a database constraint",
                    details={"entity": self.entity_name, "action": action},
               ) from exc
          except SQLAlchemyError as exc:
               self.db.rollback()
               logger.error(f"{self.entity_name} {action} failed: {exc}")
               raise StorageFailure(
                    f"{self.entity_name} {action} failed",
                    details={"entity": self.entity_name, "action": action},
               ) from exc
