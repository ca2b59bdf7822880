"""
Запрос товаров по категории.
"""

import logging
from typing import List

from pydantic import BaseModel

from building_blocks.cqrs import Query, QueryHandler

from ...domain.entities import Product
from ...infrastructure.persistence.document_session import DocumentSession

logger = logging.getLogger("catalog-api.application.get_products_by_category")


class GetProductsByCategoryResult(BaseModel):
    products: List[Product]


class GetProductsByCategoryQuery(Query[GetProductsByCategoryResult]):
    """
    Запрос товаров, у которых среди категорий есть указанная.

    Сравнение точное, с учетом регистра.
    """

    category: str


class GetProductsByCategoryHandler(
    QueryHandler[GetProductsByCategoryQuery, GetProductsByCategoryResult]
):

    def __init__(self, session: DocumentSession):
        self._session = session

    async def handle(self, query: GetProductsByCategoryQuery) -> GetProductsByCategoryResult:
        products = [
            product
            for product in await self._session.query(Product)
            if query.category in product.category
        ]
        logger.debug(f"Found {len(products)} product(s) in category '{query.category}'")
        return GetProductsByCategoryResult(products=products)
