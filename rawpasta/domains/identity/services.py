import logging
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from rawpasta.core.config import settings
from rawpasta.core.errors import InvalidInputError, UnauthorizedError
from rawpasta.core.security import otp_timestamp, verify_otp
from rawpasta.db.repositories.api_key_repository import ApiKeyRepository
from rawpasta.domains.identity.entities import ApiKey

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис выпуска и проверки API-ключей"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.api_key_repository = ApiKeyRepository(session)

    def validate_otp(self, token: Optional[str]) -> Tuple[bool, int]:
        """Проверка OTP на момент "сейчас + смещение"; токен можно повторять в пределах окна"""
        timestamp = otp_timestamp(settings.totp_skew_ms)
        is_valid = verify_otp(settings.totp_secret, token, timestamp, window=settings.totp_window)
        return is_valid, timestamp

    def check_otp(self, token: Optional[str]) -> Tuple[bool, int]:
        """Проверка OTP для открытого эндпоинта /validate"""
        if not token:
            raise InvalidInputError("OTP (One-Time Password) is required")
        return self.validate_otp(token)

    async def create_api_key(self, token: Optional[str]) -> ApiKey:
        """Выпуск нового ключа по действующему OTP"""
        if not token:
            raise UnauthorizedError("OTP (One-Time Password) is required")

        is_valid, _ = self.validate_otp(token)
        if not is_valid:
            raise UnauthorizedError("Invalid OTP (One-Time Password)")

        api_key = await self.api_key_repository.create(ApiKey.create_api_key())
        logger.info("API key %s created", api_key.id)
        return api_key

    async def list_api_keys(self) -> List[ApiKey]:
        return await self.api_key_repository.get_all()

    async def delete_api_key(self, key_id: Optional[str]) -> None:
        if not key_id:
            raise InvalidInputError("API Key ID is required")

        if not await self.api_key_repository.delete_by_id(key_id):
            raise InvalidInputError("Invalid API Key ID")

        logger.info("API key %s deleted", key_id)

    async def authenticate(self, credential: Optional[str]) -> ApiKey:
        """Проверка предъявленного ключа; без ролей и областей действия"""
        if not credential:
            raise UnauthorizedError("API key is required")

        api_key = await self.api_key_repository.get_by_secret(credential)
        if not api_key:
            raise UnauthorizedError("Invalid API key")

        return api_key
