"""
Команда обновления товара.
"""

import logging
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel

from building_blocks.cqrs import Command, CommandHandler

from ...core.errors import ProductNotFoundError
from ...domain.entities import Product
from ...infrastructure.persistence.document_session import DocumentSession

logger = logging.getLogger("catalog-api.application.update_product")


class UpdateProductResult(BaseModel):
    is_success: bool


class UpdateProductCommand(Command[UpdateProductResult]):
    """
    Команда обновления товара.

    Все поля товара заменяются значениями из команды.
    """

    id: UUID
    name: str
    category: List[str]
    description: str
    image_file: str
    price: Decimal


class UpdateProductHandler(CommandHandler[UpdateProductCommand, UpdateProductResult]):

    def __init__(self, session: DocumentSession):
        self._session = session

    async def handle(self, command: UpdateProductCommand) -> UpdateProductResult:
        """
        Обработать команду обновления товара.

        Raises:
            ProductNotFoundError: Если товара с таким id нет
        """
        product = await self._session.load(Product, command.id)
        if product is None:
            raise ProductNotFoundError(command.id)

        product.name = command.name
        product.category = list(command.category)
        product.description = command.description
        product.image_file = command.image_file
        product.price = command.price

        self._session.store(product)
        await self._session.save_changes()

        logger.info(f"Updated product {product.id}")
        return UpdateProductResult(is_success=True)
