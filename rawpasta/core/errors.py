import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class RawPastaError(Exception):
    """Базовая ошибка сервиса: статус ответа и сообщение для клиента"""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidInputError(RawPastaError):
    status_code = 400
    message = "Invalid input"


class UnauthorizedError(RawPastaError):
    status_code = 401
    message = "Unauthorized"


class NotFoundError(RawPastaError):
    status_code = 404
    message = "Not found"


class ConflictError(RawPastaError):
    status_code = 409
    message = "Conflict"


class InternalError(RawPastaError):
    pass


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Единый формат ошибок: {"error": message}"""

    @app.exception_handler(RawPastaError)
    async def handle_service_error(request: Request, exc: RawPastaError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        else:
            logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("%s %s: invalid request %s", request.method, request.url.path, exc.errors())
        return error_response(400, "Invalid request")

    @app.exception_handler(SQLAlchemyError)
    async def handle_storage_error(request: Request, exc: SQLAlchemyError):
        logger.error("%s %s storage failure", request.method, request.url.path, exc_info=exc)
        return error_response(InternalError.status_code, InternalError.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        # Любой неизвестный маршрут или метод отвечает 405
        if exc.status_code in (404, 405):
            logger.warning("%s %s: method not allowed", request.method, request.url.path)
            return error_response(405, "Method Not Allowed")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("%s %s unexpected failure", request.method, request.url.path, exc_info=exc)
        return error_response(InternalError.status_code, InternalError.message)
