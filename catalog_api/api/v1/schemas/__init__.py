"""
API схемы v1.

Транспортные DTO: существуют только на время одного HTTP вызова
и отделены от команд и доменных сущностей.
"""

from .health_schemas import HealthResponse
from .product_schemas import (
    CreateProductRequest,
    CreateProductResponse,
    DeleteProductResponse,
    GetProductByIdResponse,
    GetProductsByCategoryResponse,
    GetProductsResponse,
    ProductResponse,
    UpdateProductRequest,
    UpdateProductResponse,
)

__all__ = [
    "HealthResponse",
    "CreateProductRequest",
    "CreateProductResponse",
    "DeleteProductResponse",
    "GetProductByIdResponse",
    "GetProductsByCategoryResponse",
    "GetProductsResponse",
    "ProductResponse",
    "UpdateProductRequest",
    "UpdateProductResponse",
]
