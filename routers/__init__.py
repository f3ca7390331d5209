from .owners import router as owners_router
from .properties import router as properties_router
from .property_images import router as property_images_router
from .property_traces import router as property_traces_router

__all__ = [
     "owners_router",
     "properties_router",
     "property_images_router",
     "property_traces_router",
]
