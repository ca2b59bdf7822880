"""
Commands (Команды).

Команды представляют намерение изменить состояние каталога.
"""

from .create_product import CreateProductCommand, CreateProductHandler, CreateProductResult
from .update_product import UpdateProductCommand, UpdateProductHandler, UpdateProductResult
from .delete_product import DeleteProductCommand, DeleteProductHandler

__all__ = [
    "CreateProductCommand",
    "CreateProductHandler",
    "CreateProductResult",
    "UpdateProductCommand",
    "UpdateProductHandler",
    "UpdateProductResult",
    "DeleteProductCommand",
    "DeleteProductHandler",
]
