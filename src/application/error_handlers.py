import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.commons.exceptions import (
    TradeIdMismatchError,
    TradeNotFoundError,
    TradeUpdateConflictError,
)

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def trade_not_found_handler(request: Request, exc: TradeNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def trade_id_mismatch_handler(request: Request, exc: TradeIdMismatchError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"❌ Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(TradeNotFoundError, trade_not_found_handler)
    app.add_exception_handler(TradeIdMismatchError, trade_id_mismatch_handler)
    app.add_exception_handler(TradeUpdateConflictError, storage_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
