"""
Document Session: Unit of Work над хранилищем JSON-документов.

Сессия накапливает изменения (store/delete) и записывает их одной
транзакцией в save_changes(). Чтение (load/query) идет напрямую в БД
и не видит несохраненных изменений.

Использование:
    >>> session = DocumentSession(db)
    >>> session.store(product)          # product.id назначается здесь
    >>> await session.save_changes()    # единственный commit
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.entities import Document
from .models import DocumentModel

logger = logging.getLogger("catalog-api.infrastructure.document_session")

TDocument = TypeVar("TDocument", bound=Document)


def document_type_name(document_type: Type[Document]) -> str:
    """Имя типа документа, под которым он хранится в таблице."""
    return document_type.__name__.lower()


class DocumentSession:
    """
    Unit of Work для документов.

    Сессия живет в рамках одного HTTP запроса и владеет
    ожидающими изменениями; AsyncSession ей передается снаружи.

    Атрибуты:
        _db: Сессия SQLAlchemy
        _pending: Ожидающие изменения; None означает удаление
    """

    def __init__(self, db: AsyncSession):
        self._db = db
        self._pending: Dict[Tuple[str, str], Optional[Document]] = {}

    def store(self, *documents: Document) -> None:
        """
        Пометить документы для вставки или обновления.

        Документу без id назначается новый UUID.
        """
        for document in documents:
            if document.id is None:
                document.id = uuid.uuid4()
            key = (document_type_name(type(document)), str(document.id))
            self._pending[key] = document
            logger.debug(f"Stored {key[0]} {key[1]}")

    def delete(self, document_type: Type[Document], document_id: uuid.UUID) -> None:
        """Пометить документ для удаления."""
        key = (document_type_name(document_type), str(document_id))
        self._pending[key] = None
        logger.debug(f"Marked {key[0]} {key[1]} for deletion")

    async def load(
        self,
        document_type: Type[TDocument],
        document_id: uuid.UUID
    ) -> Optional[TDocument]:
        """
        Загрузить документ по id.

        Returns:
            Документ если найден, None иначе
        """
        model = await self._db.get(
            DocumentModel,
            (document_type_name(document_type), str(document_id))
        )
        if model is None:
            return None
        return document_type.model_validate(model.data)

    async def query(
        self,
        document_type: Type[TDocument],
        limit: Optional[int] = None,
        offset: Optional[int] = None
    ) -> List[TDocument]:
        """
        Получить документы типа в порядке создания.

        Обновление документа не меняет его позицию в выборке.

        Args:
            document_type: Тип документа
            limit: Максимальное количество
            offset: Смещение от начала
        """
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.doc_type == document_type_name(document_type))
            .order_by(DocumentModel.created_at.asc(), DocumentModel.id.asc())
        )
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._db.execute(stmt)
        return [document_type.model_validate(model.data) for model in result.scalars().all()]

    async def count(self, document_type: Type[Document]) -> int:
        """Количество сохраненных документов типа."""
        result = await self._db.execute(
            select(func.count())
            .select_from(DocumentModel)
            .where(DocumentModel.doc_type == document_type_name(document_type))
        )
        return result.scalar_one()

    async def save_changes(self) -> None:
        """
        Записать все ожидающие изменения одной транзакцией.

        При ошибке транзакция откатывается, изменения остаются
        в сессии, исключение пробрасывается без изменений.
        """
        if not self._pending:
            return

        now = datetime.now(timezone.utc)
        try:
            for (doc_type, doc_id), document in self._pending.items():
                if document is None:
                    await self._db.execute(
                        delete(DocumentModel).where(
                            DocumentModel.doc_type == doc_type,
                            DocumentModel.id == doc_id,
                        )
                    )
                    continue

                data = document.model_dump(mode="json")
                existing = await self._db.get(DocumentModel, (doc_type, doc_id))
                if existing is None:
                    self._db.add(
                        DocumentModel(
                            doc_type=doc_type,
                            id=doc_id,
                            data=data,
                            created_at=now,
                            last_modified=now,
                        )
                    )
                else:
                    existing.data = data
                    existing.last_modified = now
            await self._db.commit()
        except Exception as e:
            logger.error(f"save_changes failed, rolling back: {e}")
            await self._db.rollback()
            raise

        logger.debug(f"Committed {len(self._pending)} change(s)")
        self._pending.clear()
