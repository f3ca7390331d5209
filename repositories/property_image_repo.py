"""
repositories/property_image_repo.py
-----------------------------------
Data access for the `property_images` table.
"""
from models import PropertyImage
from .base import BaseRepository


class PropertyImageRepository(BaseRepository[PropertyImage]):

     model = PropertyImage
     # property_id and file are fixed when the image is uploaded
     mutable_fields = ("enabled",)

     def list_by_property(self, property_id: int) -> list[PropertyImage]:
          return (
               self.db.query(PropertyImage)
               .filter(PropertyImage.property_id == property_id)
               .order_by(PropertyImage.id)
               .all()
          )
