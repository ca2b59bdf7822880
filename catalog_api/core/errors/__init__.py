"""
Кастомные исключения для Catalog API.

Этот модуль содержит иерархию исключений для различных
ошибочных ситуаций в системе.
"""

from .base import (
    CatalogApiError,
    DomainError,
)

from .domain_errors import (
    ProductNotFoundError,
)

__all__ = [
    # Базовые исключения
    "CatalogApiError",
    "DomainError",

    # Доменные исключения
    "ProductNotFoundError",
]
