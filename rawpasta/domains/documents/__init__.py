from rawpasta.domains.documents.entities import Document, DocumentSummary
from rawpasta.domains.documents.schemas import DocumentCreatedResponse, DocumentSummaryResponse
from rawpasta.domains.documents.services import DocumentService

__all__ = [
    "Document", "DocumentSummary",
    "DocumentCreatedResponse", "DocumentSummaryResponse",
    "DocumentService"
]
