from pydantic import BaseModel, ConfigDict


class DocumentCreatedResponse(BaseModel):
    """Схема ответа на загрузку документа"""
    id: str


class DocumentSummaryResponse(BaseModel):
    """Схема документа в списке (без содержимого)"""
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)
