"""
Запрос списка товаров с постраничной выборкой.
"""

import logging
from typing import List

from pydantic import BaseModel, Field

from building_blocks.cqrs import Query, QueryHandler

from ...domain.entities import Product
from ...infrastructure.persistence.document_session import DocumentSession

logger = logging.getLogger("catalog-api.application.get_products")

# offset = (page_number - 1) * page_size должен помещаться в 64-битный INTEGER
MAX_PAGE_NUMBER = 1_000_000
MAX_PAGE_SIZE = 1000


class GetProductsResult(BaseModel):
    """
    Результат: страница товаров.

    Атрибуты:
        products: Товары на странице
        page_number: Номер страницы (с 1)
        page_size: Размер страницы
        total_count: Общее количество товаров
    """

    products: List[Product]
    page_number: int
    page_size: int
    total_count: int


class GetProductsQuery(Query[GetProductsResult]):
    """
    Запрос страницы товаров.

    Пример:
        >>> query = GetProductsQuery(page_number=2, page_size=10)
    """

    page_number: int = Field(default=1, ge=1, le=MAX_PAGE_NUMBER, description="Номер страницы")
    page_size: int = Field(default=10, ge=1, le=MAX_PAGE_SIZE, description="Размер страницы")


class GetProductsHandler(QueryHandler[GetProductsQuery, GetProductsResult]):

    def __init__(self, session: DocumentSession):
        self._session = session

    async def handle(self, query: GetProductsQuery) -> GetProductsResult:
        offset = (query.page_number - 1) * query.page_size
        products = await self._session.query(Product, limit=query.page_size, offset=offset)
        total_count = await self._session.count(Product)

        logger.debug(
            f"Loaded {len(products)} product(s), page={query.page_number}, total={total_count}"
        )
        return GetProductsResult(
            products=products,
            page_number=query.page_number,
            page_size=query.page_size,
            total_count=total_count,
        )
