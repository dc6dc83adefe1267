import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from rawpasta.core.errors import ConflictError, InvalidInputError, NotFoundError
from rawpasta.db.repositories.document_repository import DocumentRepository
from rawpasta.domains.documents.entities import Document, DocumentSummary

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)

    async def create_document(
        self,
        content: str,
        name: Optional[str] = None,
        overwrite: bool = False
    ) -> Document:
        """Создание документа.

        Занятое имя без overwrite дает ConflictError. С overwrite прежний
        документ удаляется и вставляется новый (с новым id) в одной
        транзакции. Проверка существования не атомарна: окончательно
        конфликт решает ограничение уникальности в БД.
        """
        if name and len(name) > MAX_NAME_LENGTH:
            raise InvalidInputError("File name is too long")

        document = Document.create_document(content=content, name=name)

        existing = await self.document_repository.get_by_name(document.name)
        if existing and not overwrite:
            raise ConflictError("File name already exists")

        created = await self.document_repository.create(document, replaces=existing)

        if existing:
            logger.info("File %s replaced %s under name %r", created.id, existing.id, created.name)
        else:
            logger.info("File %s created under name %r", created.id, created.name)
        return created

    async def resolve_document(self, identifier: str) -> Optional[Document]:
        """Поиск документа по id или имени"""
        return await self.document_repository.resolve(identifier)

    async def get_document(self, identifier: Optional[str]) -> Document:
        """Документ по id или имени; NotFoundError, если не найден"""
        return await self._resolve_or_fail(identifier)

    async def update_document(self, identifier: Optional[str], content: str) -> Document:
        """Замена содержимого документа; id и имя не меняются"""
        document = await self._resolve_or_fail(identifier)

        updated = await self.document_repository.update_content(document.pk, content)
        if not updated:
            raise NotFoundError("File not found")

        logger.info("File %s updated", updated.id)
        return updated

    async def delete_document(self, identifier: Optional[str]) -> None:
        document = await self._resolve_or_fail(identifier)

        if not await self.document_repository.delete(document.pk):
            raise NotFoundError("File not found")

        logger.info("File %s deleted", document.id)

    async def list_documents(self) -> List[DocumentSummary]:
        return await self.document_repository.get_all_summaries()

    async def _resolve_or_fail(self, identifier: Optional[str]) -> Document:
        if not identifier:
            raise InvalidInputError("Identifier is required")

        document = await self.document_repository.resolve(identifier)
        if not document:
            raise NotFoundError("File not found")
        return document
