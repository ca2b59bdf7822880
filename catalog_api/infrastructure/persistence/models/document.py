"""
SQLAlchemy model for JSON documents.

Every document type shares one table; rows are keyed by
(doc_type, id) and the document body is stored as JSON.
"""
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class DocumentModel(Base):
    """
    SQLAlchemy model for a stored document.

    created_at is set once on insert and defines listing order;
    last_modified changes on every store.
    """
    __tablename__ = "documents"

    doc_type: Mapped[str] = mapped_column(String(255), primary_key=True)
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    data: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    last_modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index('idx_documents_type_created', 'doc_type', 'created_at'),
    )
