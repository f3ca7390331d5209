"""
repositories/ - Entity store
============================
One repository per entity. Each owns the SQL for its table and turns
database errors into catalog exceptions.
"""
from .base import BaseRepository
from .owner_repo import OwnerRepository
from .property_repo import PropertyRepository
from .property_image_repo import PropertyImageRepository
from .property_trace_repo import PropertyTraceRepository

__all__ = [
     "BaseRepository",
     "OwnerRepository",
     "PropertyRepository",
     "PropertyImageRepository",
     "PropertyTraceRepository",
]
