"""
repositories/owner_repo.py
--------------------------
Data access for the `owners` table.
"""
from models import Owner
from .base import BaseRepository


class OwnerRepository(BaseRepository[Owner]):
     """Owners. Deleting one removes its properties, their images and traces."""

     model = Owner
     mutable_fields = ("name", "address", "birthday", "photo")
