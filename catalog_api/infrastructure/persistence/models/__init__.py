"""
SQLAlchemy models for Catalog API.
"""

from .base import Base
from .document import DocumentModel

__all__ = [
    "Base",
    "DocumentModel",
]
