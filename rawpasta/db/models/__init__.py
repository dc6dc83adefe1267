from rawpasta.db.models.document import Document
from rawpasta.db.models.api_key import ApiKey

__all__ = [
    "Document",
    "ApiKey"
]
