import logging
from typing import List, Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from catalog.core.exceptions import (
    AppException,
    InvalidArgumentError,
    GameAlreadyExistsError,
    GameNotFoundError,
    StorageError,
)
from catalog.core.schemas import ErrorResponse, ErrorResponseDetail

logger = logging.getLogger(__name__)

GAME_NOT_FOUND_MESSAGE = "Game does not exist"
GAME_ALREADY_EXISTS_MESSAGE = "A game with this name already exists for this producer"


def _error(status_code: int, message: str, error_code: str, details: Optional[List[ErrorResponseDetail]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, error_code=error_code, details=details).model_dump(exclude_none=True)
    )


def register_exception_handlers(app: FastAPI):
    """Register custom exception handlers for the FastAPI app."""

    @app.exception_handler(GameNotFoundError)
    async def game_not_found_handler(request: Request, exc: GameNotFoundError):
        logger.info(f"Game not found: {exc}")
        return _error(status.HTTP_404_NOT_FOUND, GAME_NOT_FOUND_MESSAGE, "game_not_found")

    @app.exception_handler(GameAlreadyExistsError)
    async def game_already_exists_handler(request: Request, exc: GameAlreadyExistsError):
        logger.info(f"Duplicate game rejected: {exc}")
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, GAME_ALREADY_EXISTS_MESSAGE, "game_already_exists")

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        logger.info(f"Invalid argument: {exc}")
        return _error(status.HTTP_400_BAD_REQUEST, str(exc), "invalid_argument")

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details: List[ErrorResponseDetail] = []
        for error in exc.errors():
            details.append(ErrorResponseDetail(
                loc=[str(loc) for loc in error.get('loc', [])],
                msg=error.get('msg', 'Validation error'),
                type=error.get('type', 'value_error')
            ))
        logger.info(f"Request validation failed: {details}")
        return _error(
            status.HTTP_422_UNPROCESSABLE_ENTITY, "Request validation failed", "request_validation_error", details
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"Storage error: {exc}", exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected storage error occurred.", "storage_error")

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        logger.warning(f"Application error: {exc}")
        return _error(exc.status_code, exc.message, "application_error")

    # Catch-all
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception occurred: {exc}")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected internal server error occurred.", "internal_server_error"
        )

    logger.info("Standard exception handlers registered.")
