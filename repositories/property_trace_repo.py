"""
repositories/property_trace_repo.py
-----------------------------------
Data access for the `property_traces` table.
"""
from models import PropertyTrace
from .base import BaseRepository


class PropertyTraceRepository(BaseRepository[PropertyTrace]):

     model = PropertyTrace
     mutable_fields = ("date_sale", "name", "value", "tax", "property_id")

     def list_by_property(self, property_id: int) -> list[PropertyTrace]:
          return (
               self.db.query(PropertyTrace)
               .filter(PropertyTrace.property_id == property_id)
               .order_by(PropertyTrace.date_sale, PropertyTrace.id)
               .all()
          )
