from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rawpasta.core.errors import ConflictError
from rawpasta.db.models.api_key import ApiKey as ApiKeyModel

if TYPE_CHECKING:
    from rawpasta.domains.identity.entities import ApiKey


class ApiKeyRepository:
    """Репозиторий для работы с API-ключами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, api_key: "ApiKey") -> "ApiKey":
        """Создание ключа; id и секрет уникальны на уровне БД"""
        db_key = ApiKeyModel(id=api_key.id, secret=api_key.secret)

        self.session.add(db_key)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError("API key already exists")

        await self.session.refresh(db_key)
        return self._to_domain(db_key)

    async def get_by_secret(self, secret: str) -> Optional["ApiKey"]:
        result = await self.session.execute(
            select(ApiKeyModel).where(ApiKeyModel.secret == secret)
        )
        db_key = result.scalar_one_or_none()
        return self._to_domain(db_key) if db_key else None

    async def delete_by_id(self, key_id: str) -> bool:
        """Удаление ключа по id; False, если такого ключа нет"""
        stmt = delete(ApiKeyModel).where(ApiKeyModel.id == key_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def get_all(self) -> List["ApiKey"]:
        result = await self.session.execute(select(ApiKeyModel).order_by(ApiKeyModel.pk))
        return [self._to_domain(db_key) for db_key in result.scalars().all()]

    def _to_domain(self, db_key: ApiKeyModel) -> "ApiKey":
        """Преобразование модели БД в доменную сущность"""
        from rawpasta.domains.identity.entities import ApiKey

        return ApiKey(
            id=db_key.id,
            secret=db_key.secret,
            pk=db_key.pk,
            created_at=db_key.created_at
        )
