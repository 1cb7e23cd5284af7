import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    EdmError, InvalidCredentialsError, ResourceInUseError, ResourceNotFoundError,
    UserAlreadyExistsError, WrongDateError
)

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    ResourceNotFoundError: status.HTTP_404_NOT_FOUND,
    ResourceInUseError: status.HTTP_409_CONFLICT,
    UserAlreadyExistsError: status.HTTP_409_CONFLICT,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    WrongDateError: status.HTTP_409_CONFLICT,
}


async def edm_error_handler(request: Request, exc: EdmError) -> JSONResponse:
    """Перевод доменных исключений в HTTP-ответ"""
    status_code = next(
        (code for error_type, code in ERROR_STATUS_CODES.items() if isinstance(exc, error_type)),
        status.HTTP_400_BAD_REQUEST
    )
    logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EdmError, edm_error_handler)
