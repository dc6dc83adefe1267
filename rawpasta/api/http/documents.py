from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from rawpasta.core.auth import require_api_key
from rawpasta.core.db import get_db
from rawpasta.core.errors import InvalidInputError
from rawpasta.core.schemas import MessageResponse
from rawpasta.domains.documents.schemas import DocumentCreatedResponse, DocumentSummaryResponse
from rawpasta.domains.documents.services import DocumentService

router = APIRouter(tags=["documents"])

ALLOWED_CONTENT_TYPES = {
    "application/json",
    "text/plain",
    "application/xml",
    "text/xml",
    "application/x-yaml",
    "text/yaml",
}


async def read_text_upload(file: Optional[UploadFile], missing_message: str) -> str:
    """Содержимое загруженного файла как UTF-8 текст"""
    if file is None:
        raise InvalidInputError(missing_message)

    content_type = (file.content_type or "").split(";")[0].strip().lower()
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise InvalidInputError("Only JSON, TXT, XML, and YAML files are allowed")

    data = await file.read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidInputError("File content must be UTF-8 text")


@router.post("/upload", response_model=DocumentCreatedResponse, dependencies=[Depends(require_api_key)])
async def upload_document(
    file: Optional[UploadFile] = File(None),
    query_file_name: Optional[str] = Query(None, alias="fileName"),
    form_file_name: Optional[str] = Form(None, alias="fileName"),
    overwrite: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    """Загрузка нового документа"""
    content = await read_text_upload(file, "No file uploaded")

    document = await DocumentService(db).create_document(
        content=content,
        name=query_file_name or form_file_name,
        overwrite=overwrite == "true"
    )
    return DocumentCreatedResponse(id=document.id)


@router.get("/raw", response_class=PlainTextResponse)
async def get_raw_without_identifier(db: AsyncSession = Depends(get_db)):
    await DocumentService(db).get_document(None)


@router.get("/raw/{identifier}", response_class=PlainTextResponse)
async def get_raw(identifier: str, db: AsyncSession = Depends(get_db)):
    """Сырое содержимое документа по id или имени; доступно без ключа"""
    document = await DocumentService(db).get_document(identifier)
    return PlainTextResponse(document.content)


@router.get("/list", response_model=List[DocumentSummaryResponse], dependencies=[Depends(require_api_key)])
async def list_documents(db: AsyncSession = Depends(get_db)):
    """Список документов без содержимого"""
    return await DocumentService(db).list_documents()


@router.put("/edit", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
async def edit_without_identifier(db: AsyncSession = Depends(get_db)):
    await DocumentService(db).update_document(None, "")


@router.put("/edit/{identifier}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
async def edit_document(
    identifier: str,
    file: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db)
):
    """Замена содержимого документа"""
    content = await read_text_upload(file, "File is required")

    await DocumentService(db).update_document(identifier, content)
    return MessageResponse(message="File updated successfully")


@router.delete("/delete", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
async def delete_without_identifier(db: AsyncSession = Depends(get_db)):
    await DocumentService(db).delete_document(None)


@router.delete("/delete/{identifier}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
async def delete_document(identifier: str, db: AsyncSession = Depends(get_db)):
    """Удаление документа по id или имени"""
    await DocumentService(db).delete_document(identifier)
    return MessageResponse(message="File deleted successfully")
