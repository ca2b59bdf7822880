"""
Запрос товара по идентификатору.
"""

from uuid import UUID

from pydantic import BaseModel

from building_blocks.cqrs import Query, QueryHandler

from ...core.errors import ProductNotFoundError
from ...domain.entities import Product
from ...infrastructure.persistence.document_session import DocumentSession


class GetProductByIdResult(BaseModel):
    product: Product


class GetProductByIdQuery(Query[GetProductByIdResult]):
    id: UUID


class GetProductByIdHandler(QueryHandler[GetProductByIdQuery, GetProductByIdResult]):
    """
    Обработчик запроса товара по id.

    Raises:
        ProductNotFoundError: Если товара нет
    """

    def __init__(self, session: DocumentSession):
        self._session = session

    async def handle(self, query: GetProductByIdQuery) -> GetProductByIdResult:
        product = await self._session.load(Product, query.id)
        if product is None:
            raise ProductNotFoundError(query.id)
        return GetProductByIdResult(product=product)
