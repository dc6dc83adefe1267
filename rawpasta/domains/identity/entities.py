from datetime import datetime
from typing import Optional

from rawpasta.core.security import generate_api_key, generate_api_key_id


class ApiKey:
    """Сущность API-ключа домена Identity"""

    def __init__(
        self,
        id: str,
        secret: str,
        pk: Optional[int] = None,
        created_at: Optional[datetime] = None
    ):
        self.id = id
        self.secret = secret
        self.pk = pk
        self.created_at = created_at

    @classmethod
    def create_api_key(cls) -> "ApiKey":
        """Выпуск нового ключа со случайными id и секретом"""
        return cls(id=generate_api_key_id(), secret=generate_api_key())

    def __eq__(self, other) -> bool:
        if not isinstance(other, ApiKey):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"ApiKey(id={self.id})"
