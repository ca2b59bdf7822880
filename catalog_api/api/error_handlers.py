"""
Обработчики исключений уровня HTTP.

Ошибки привязки запроса (тело, параметры пути и query) отдаются как 400.
Необработанные исключения (например, ошибки хранилища) отдаются как 500
с X-Correlation-ID; сервер все равно получает исходное исключение.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..middleware.logging import CORRELATION_ID_HEADER
from .v1.schemas.common import ProblemDetails

logger = logging.getLogger("catalog-api.api.errors")


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Bad request: {request.method} {request.url.path}: {exc.errors()}")

    problem = ProblemDetails(
        title="Bad Request",
        status=400,
        detail="Request validation failed",
        errors=jsonable_encoder(exc.errors()),
    )
    return JSONResponse(status_code=400, content=problem.model_dump())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Ответ 500 для исключений, которые никто не перехватил.

    Вызывается снаружи StructuredLoggingMiddleware, поэтому
    correlation id берется из request.state.
    """
    problem = ProblemDetails(
        title="Internal Server Error",
        status=500,
        detail="An unexpected error occurred",
    )
    headers = {}
    correlation_id = getattr(request.state, "correlation_id", None)
    if correlation_id:
        headers[CORRELATION_ID_HEADER] = correlation_id

    return JSONResponse(status_code=500, content=problem.model_dump(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
