"""
API роутеры v1.

Каждый роутер отвечает за свою область функциональности.
"""

from .health_router import router as health_router
from .products_router import router as products_router

__all__ = [
    "health_router",
    "products_router",
]
