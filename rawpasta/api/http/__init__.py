from rawpasta.api.http.health import router as health_router
from rawpasta.api.http.keys import router as keys_router
from rawpasta.api.http.documents import router as documents_router

__all__ = [
    "health_router",
    "keys_router",
    "documents_router"
]
