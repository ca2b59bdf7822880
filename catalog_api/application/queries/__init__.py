"""
Queries (Запросы).

Запросы читают каталог и никогда не сохраняют изменения.
"""

from .get_products import (
    MAX_PAGE_NUMBER,
    MAX_PAGE_SIZE,
    GetProductsHandler,
    GetProductsQuery,
    GetProductsResult,
)
from .get_product_by_id import GetProductByIdHandler, GetProductByIdQuery, GetProductByIdResult
from .get_products_by_category import (
    GetProductsByCategoryHandler,
    GetProductsByCategoryQuery,
    GetProductsByCategoryResult,
)

__all__ = [
    "GetProductsQuery",
    "GetProductsHandler",
    "GetProductsResult",
    "GetProductByIdQuery",
    "GetProductByIdHandler",
    "GetProductByIdResult",
    "GetProductsByCategoryQuery",
    "GetProductsByCategoryHandler",
    "GetProductsByCategoryResult",
    "MAX_PAGE_NUMBER",
    "MAX_PAGE_SIZE",
]
