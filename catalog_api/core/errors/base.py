"""
Базовые исключения Catalog API.

Ошибки хранилища сюда не заворачиваются: они пробрасываются как есть.
"""

from typing import Any, Dict, Optional


class CatalogApiError(Exception):
    """
    Базовое исключение сервиса каталога.

    Атрибуты:
        message: Сообщение об ошибке
        details: Данные для клиента (например, id товара)
        error_code: Машиночитаемый код; по умолчанию имя класса

    to_dict() отдается клиенту как detail HTTP ответа.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class DomainError(CatalogApiError):
    """Нарушение правил каталога (например, товар не найден)."""
