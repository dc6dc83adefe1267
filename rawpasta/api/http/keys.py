from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from rawpasta.core.auth import require_api_key
from rawpasta.core.db import get_db
from rawpasta.core.schemas import MessageResponse
from rawpasta.domains.identity.schemas import (
    ApiKeyCreatedResponse, ApiKeyResponse, OtpValidationResponse
)
from rawpasta.domains.identity.services import IdentityService

router = APIRouter(tags=["api-keys"])


@router.get("/validate", response_model=OtpValidationResponse)
async def validate_otp(
    otp: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    """Проверка OTP без выпуска ключа"""
    is_valid, timestamp = IdentityService(db).check_otp(otp)
    return OtpValidationResponse(is_valid=1 if is_valid else 0, timestamp=timestamp)


@router.post("/create-key", response_model=List[ApiKeyCreatedResponse])
async def create_key(
    otp: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    """Выпуск API-ключа по действующему OTP"""
    api_key = await IdentityService(db).create_api_key(otp)
    return [ApiKeyCreatedResponse(id=api_key.id, key=api_key.secret)]


@router.delete("/delete-key", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
async def delete_key_without_id(db: AsyncSession = Depends(get_db)):
    await IdentityService(db).delete_api_key(None)


@router.delete("/delete-key/{key_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
async def delete_key(key_id: str, db: AsyncSession = Depends(get_db)):
    """Удаление API-ключа по id"""
    await IdentityService(db).delete_api_key(key_id)
    return MessageResponse(message="API key deleted successfully")


@router.get("/list-keys", response_model=List[ApiKeyResponse], dependencies=[Depends(require_api_key)])
async def list_keys(db: AsyncSession = Depends(get_db)):
    """Список всех ключей"""
    api_keys = await IdentityService(db).list_api_keys()
    return [ApiKeyResponse(id=api_key.id, key=api_key.secret) for api_key in api_keys]
