from .owner import OwnerCreate, OwnerUpdate, OwnerResponse
from .property import PropertyCreate, PropertyUpdate, PropertyFilter, PropertyResponse
from .property_image import PropertyImageCreate, PropertyImageUpdate, PropertyImageResponse
from .property_trace import PropertyTraceCreate, PropertyTraceUpdate, PropertyTraceResponse

__all__ = [
     "OwnerCreate",
     "OwnerUpdate",
     "OwnerResponse",
     "PropertyCreate",
     "PropertyUpdate",
     "PropertyFilter",
     "PropertyResponse",
     "PropertyImageCreate",
     "PropertyImageUpdate",
     "PropertyImageResponse",
     "PropertyTraceCreate",
     "PropertyTraceUpdate",
     "PropertyTraceResponse",
]
