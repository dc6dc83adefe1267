from sqlalchemy import Column, String, Text

from rawpasta.db.base import BaseModel


class Document(BaseModel):
    __tablename__ = "documents"

    id = Column(String(5), unique=True, index=True, nullable=False)
    name = Column(String(255), unique=True, index=True, nullable=False)
    content = Column(Text, nullable=False)
