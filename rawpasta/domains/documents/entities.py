from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from rawpasta.core.security import generate_default_name, generate_file_id


class Document:
    """Сущность документа домена Documents"""

    def __init__(
        self,
        id: str,
        name: str,
        content: str,
        pk: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.name = name
        self.content = content
        self.pk = pk
        self.created_at = created_at
        self.updated_at = updated_at

    @classmethod
    def create_document(cls, content: str, name: Optional[str] = None) -> "Document":
        """Создание нового документа со свежим id; имя по умолчанию генерируется"""
        return cls(
            id=generate_file_id(),
            name=name or generate_default_name(),
            content=content
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Document(id={self.id}, name={self.name})"


@dataclass
class DocumentSummary:
    # content в списки не попадает
    id: str
    name: str
