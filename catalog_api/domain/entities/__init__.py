"""
Доменные сущности каталога.
"""

from .document import Document
from .product import Product

__all__ = [
    "Document",
    "Product",
]
