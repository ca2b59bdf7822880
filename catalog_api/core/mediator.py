"""
Регистрация обработчиков в медиаторе.

Таблица строится один раз при старте приложения.
"""

import logging

from building_blocks.cqrs import Mediator

from ..application.commands import (
    CreateProductCommand,
    CreateProductHandler,
    DeleteProductCommand,
    DeleteProductHandler,
    UpdateProductCommand,
    UpdateProductHandler,
)
from ..application.queries import (
    GetProductByIdHandler,
    GetProductByIdQuery,
    GetProductsByCategoryHandler,
    GetProductsByCategoryQuery,
    GetProductsHandler,
    GetProductsQuery,
)

logger = logging.getLogger("catalog-api.core.mediator")


def build_mediator() -> Mediator:
    """Создать медиатор со всеми обработчиками каталога."""
    mediator = Mediator()

    # Commands
    mediator.register(CreateProductCommand, CreateProductHandler)
    mediator.register(UpdateProductCommand, UpdateProductHandler)
    mediator.register(DeleteProductCommand, DeleteProductHandler)

    # Queries
    mediator.register(GetProductsQuery, GetProductsHandler)
    mediator.register(GetProductByIdQuery, GetProductByIdHandler)
    mediator.register(GetProductsByCategoryQuery, GetProductsByCategoryHandler)

    logger.info("Mediator initialized")
    return mediator
