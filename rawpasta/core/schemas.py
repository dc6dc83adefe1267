from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    timestamp: int
    date: str
    status: str
    uptime: str
