from sqlalchemy import Column, String

from rawpasta.db.base import BaseModel


class ApiKey(BaseModel):
    __tablename__ = "api_keys"

    id = Column(String(8), unique=True, index=True, nullable=False)
    secret = Column(String(64), unique=True, index=True, nullable=False)
