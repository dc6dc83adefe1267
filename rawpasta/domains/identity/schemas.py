from pydantic import BaseModel, ConfigDict, Field


class ApiKeyResponse(BaseModel):
    """Схема ключа в списке"""
    id: str
    key: str


class ApiKeyCreatedResponse(ApiKeyResponse):
    """Схема только что выпущенного ключа"""
    version: int = Field(0, alias="__v")

    model_config = ConfigDict(populate_by_name=True)


class OtpValidationResponse(BaseModel):
    """Результат проверки OTP"""
    is_valid: int = Field(..., alias="isValid")
    timestamp: int

    model_config = ConfigDict(populate_by_name=True)
