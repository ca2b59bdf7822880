"""
Команда удаления товара.
"""

import logging
from uuid import UUID

from building_blocks.cqrs import VoidCommand, VoidCommandHandler

from ...domain.entities import Product
from ...infrastructure.persistence.document_session import DocumentSession

logger = logging.getLogger("catalog-api.application.delete_product")


class DeleteProductCommand(VoidCommand):
    id: UUID


class DeleteProductHandler(VoidCommandHandler[DeleteProductCommand]):
    """
    Обработчик команды удаления товара.

    Удаление отсутствующего товара ничего не делает и считается успешным.
    """

    def __init__(self, session: DocumentSession):
        self._session = session

    async def execute(self, command: DeleteProductCommand) -> None:
        self._session.delete(Product, command.id)
        await self._session.save_changes()

        logger.info(f"Deleted product {command.id}")
