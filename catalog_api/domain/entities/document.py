"""
Base document class for the document store.

The id stays None until the document session stores the document
for the first time.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class Document(BaseModel):
    """
    Base class for all persisted documents.

    Attributes:
        id: Unique identifier (assigned on first store)
    """

    id: Optional[UUID] = Field(default=None, description="Unique identifier")
