from .base import Base
from .owner import Owner
from .property import Property
from .property_image import PropertyImage
from .property_trace import PropertyTrace

__all__ = [
     "Base",
     "Owner",
     "Property",
     "PropertyImage",
     "PropertyTrace",
]
