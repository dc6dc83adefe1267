from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rawpasta.core.errors import ConflictError
from rawpasta.db.models.document import Document as DocumentModel

if TYPE_CHECKING:
    from rawpasta.domains.documents.entities import Document, DocumentSummary


class DocumentRepository:
    """Репозиторий для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document: "Document", replaces: Optional["Document"] = None) -> "Document":
        """Вставка документа; replaces удаляется в той же транзакции"""
        if replaces is not None:
            await self.session.execute(
                delete(DocumentModel).where(DocumentModel.pk == replaces.pk)
            )

        db_document = DocumentModel(
            id=document.id,
            name=document.name,
            content=document.content
        )

        self.session.add(db_document)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            # Совпадение id или проигрыш в гонке за имя
            if await self.get_by_id(document.id):
                raise ConflictError("File ID already exists")
            raise ConflictError("File name already exists")

        await self.session.refresh(db_document)
        return self._to_domain(db_document)

    async def get_by_id(self, document_id: str) -> Optional["Document"]:
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.id == document_id)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def get_by_name(self, name: str) -> Optional["Document"]:
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.name == name)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def resolve(self, identifier: str) -> Optional["Document"]:
        """Поиск по id ИЛИ имени; при нескольких совпадениях берется первое"""
        result = await self.session.execute(
            select(DocumentModel)
            .where(or_(DocumentModel.id == identifier, DocumentModel.name == identifier))
            .order_by(DocumentModel.pk)
            .limit(1)
        )
        db_document = result.scalars().first()
        return self._to_domain(db_document) if db_document else None

    async def update_content(self, pk: int, content: str) -> Optional["Document"]:
        """Замена содержимого; id и имя не меняются"""
        stmt = (
            update(DocumentModel)
            .where(DocumentModel.pk == pk)
            .values(content=content)
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_pk(pk)

    async def get_by_pk(self, pk: int) -> Optional["Document"]:
        result = await self.session.execute(
            select(DocumentModel)
            .where(DocumentModel.pk == pk)
            .execution_options(populate_existing=True)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def delete(self, pk: int) -> bool:
        """Удаление по внутреннему ключу записи"""
        stmt = delete(DocumentModel).where(DocumentModel.pk == pk)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def get_all_summaries(self) -> List["DocumentSummary"]:
        """Список id и имен без содержимого"""
        from rawpasta.domains.documents.entities import DocumentSummary

        result = await self.session.execute(
            select(DocumentModel.id, DocumentModel.name).order_by(DocumentModel.pk)
        )
        return [DocumentSummary(id=row.id, name=row.name) for row in result.all()]

    def _to_domain(self, db_document: DocumentModel) -> "Document":
        """Преобразование модели БД в доменную сущность"""
        from rawpasta.domains.documents.entities import Document

        return Document(
            id=db_document.id,
            name=db_document.name,
            content=db_document.content,
            pk=db_document.pk,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
