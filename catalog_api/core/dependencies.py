"""
FastAPI dependency injection providers.

Сессия БД и document session создаются на каждый HTTP запрос;
медиатор один на процесс и хранится в app.state.
"""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from building_blocks.cqrs import Mediator, Sender

from .config import Settings
from ..infrastructure.persistence.database import get_db
from ..infrastructure.persistence.document_session import DocumentSession


def get_settings(request: Request) -> Settings:
    """Get application settings"""
    return request.app.state.settings


def get_mediator(request: Request) -> Mediator:
    """Get process-wide mediator"""
    return request.app.state.mediator


async def get_document_session(
    db: AsyncSession = Depends(get_db)
) -> DocumentSession:
    """
    Получить document session текущего запроса.

    Args:
        db: Сессия БД (инжектируется)
    """
    return DocumentSession(db)


async def get_sender(
    mediator: Mediator = Depends(get_mediator),
    session: DocumentSession = Depends(get_document_session),
) -> Sender:
    """
    Получить Sender, привязанный к сессии текущего запроса.

    Args:
        mediator: Медиатор (инжектируется)
        session: Document session (инжектируется)
    """
    return mediator.sender(session=session)
