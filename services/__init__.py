from .owner_service import OwnerService, build_owner
from .property_service import PropertyService, build_property
from .property_image_service import PropertyImageService, build_property_image
from .property_trace_service import PropertyTraceService, build_property_trace

__all__ = [
     "OwnerService",
     "PropertyService",
     "PropertyImageService",
     "PropertyTraceService",
     "build_owner",
     "build_property",
     "build_property_image",
     "build_property_trace",
]
