"""
Доменные исключения.
"""

from typing import Optional, Dict, Any
from uuid import UUID

from .base import DomainError


class ProductNotFoundError(DomainError):
    """
    Исключение: товар не найден.

    Пример:
        >>> raise ProductNotFoundError(product_id)
    """

    def __init__(self, product_id: UUID, details: Optional[Dict[str, Any]] = None):
        message = f"Product '{product_id}' not found"
        super().__init__(
            message=message,
            details={"product_id": str(product_id), **(details or {})},
            error_code="PRODUCT_NOT_FOUND"
        )
