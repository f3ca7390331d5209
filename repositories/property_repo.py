"""
repositories/property_repo.py
-----------------------------
Data access for the `properties` table, including the filtered search.
"""
from typing import Optional

from models import Property
from schemas.property import PropertyFilter
from .base import BaseRepository
from .property_filter import apply_property_filter


class PropertyRepository(BaseRepository[Property]):

     model = Property
     mutable_fields = ("name", "address", "price", "code_internal", "year", "owner_id")

     def list_by_owner(self, owner_id: int) -> list[Property]:
          return (
               self.db.query(Property)
               .filter(Property.owner_id == owner_id)
               .order_by(Property.id)
               .all()
          )

     def search(self, criteria: PropertyFilter, case_sensitive: Optional[bool] = None) -> list[Property]:
          """
          Return the properties matching every criterion that is set.

          An empty filter returns the same rows as list_all().
          """
          query = apply_property_filter(self.db.query(Property), criteria, case_sensitive)
          return query.order_by(Property.id).all()
