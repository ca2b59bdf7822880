"""
Команда создания товара.
"""

import logging
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel

from building_blocks.cqrs import Command, CommandHandler

from ...domain.entities import Product
from ...infrastructure.persistence.document_session import DocumentSession

logger = logging.getLogger("catalog-api.application.create_product")


class CreateProductResult(BaseModel):
    """Результат: идентификатор созданного товара."""

    id: UUID


class CreateProductCommand(Command[CreateProductResult]):
    """
    Команда создания товара.

    Пример:
        >>> command = CreateProductCommand(
        ...     name="Desk",
        ...     category=["Furniture"],
        ...     description="Oak desk",
        ...     image_file="desk.png",
        ...     price=Decimal("199.99")
        ... )
    """

    name: str
    category: List[str]
    description: str
    image_file: str
    price: Decimal


class CreateProductHandler(CommandHandler[CreateProductCommand, CreateProductResult]):
    """
    Обработчик команды создания товара.

    Копирует поля команды в новый Product, сохраняет его через
    document session и возвращает назначенный идентификатор.
    Ошибки хранилища пробрасываются без изменений.
    """

    def __init__(self, session: DocumentSession):
        self._session = session

    async def handle(self, command: CreateProductCommand) -> CreateProductResult:
        product = Product(
            name=command.name,
            category=list(command.category),
            description=command.description,
            image_file=command.image_file,
            price=command.price,
        )

        self._session.store(product)
        await self._session.save_changes()

        logger.info(f"Created product {product.id}")
        return CreateProductResult(id=product.id)
