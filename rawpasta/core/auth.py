from typing import Optional

from fastapi import Depends, Security
from fastapi.security import APIKeyHeader, APIKeyQuery
from sqlalchemy.ext.asyncio import AsyncSession

from rawpasta.core.db import get_db
from rawpasta.domains.identity.entities import ApiKey
from rawpasta.domains.identity.services import IdentityService

api_key_header = APIKeyHeader(name="apikey", auto_error=False)
api_key_query = APIKeyQuery(name="apiKey", auto_error=False)


async def require_api_key(
    header_key: Optional[str] = Security(api_key_header),
    query_key: Optional[str] = Security(api_key_query),
    db: AsyncSession = Depends(get_db)
) -> ApiKey:
    """Зависимость защищенных маршрутов: заголовок apikey проверяется раньше параметра apiKey"""
    credential = header_key or query_key
    return await IdentityService(db).authenticate(credential)
