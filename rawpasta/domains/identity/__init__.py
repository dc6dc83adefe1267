from rawpasta.domains.identity.entities import ApiKey
from rawpasta.domains.identity.schemas import (
    ApiKeyResponse, ApiKeyCreatedResponse, OtpValidationResponse
)
from rawpasta.domains.identity.services import IdentityService

__all__ = [
    "ApiKey",
    "ApiKeyResponse", "ApiKeyCreatedResponse", "OtpValidationResponse",
    "IdentityService"
]
