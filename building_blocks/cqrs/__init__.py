"""
CQRS (Command Query Responsibility Segregation).

Команды изменяют состояние системы, запросы только читают его.
Каждая команда и каждый запрос объявляют тип результата на уровне типа,
а медиатор направляет их единственному зарегистрированному обработчику.
"""

from .command import Command, CommandHandler, Unit, VoidCommand, VoidCommandHandler
from .query import Query, QueryHandler
from .mediator import (
    HandlerAlreadyRegisteredError,
    HandlerNotFoundError,
    Mediator,
    MediatorError,
    Sender,
)

__all__ = [
    "Command",
    "CommandHandler",
    "Unit",
    "VoidCommand",
    "VoidCommandHandler",
    "Query",
    "QueryHandler",
    "Mediator",
    "Sender",
    "MediatorError",
    "HandlerNotFoundError",
    "HandlerAlreadyRegisteredError",
]
