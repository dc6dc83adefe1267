from rawpasta.db.repositories.document_repository import DocumentRepository
from rawpasta.db.repositories.api_key_repository import ApiKeyRepository

__all__ = [
    "DocumentRepository",
    "ApiKeyRepository"
]
