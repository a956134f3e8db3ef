"""Map domain and storage failures to HTTP responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from voting.errors import CryptoVoteError

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid cryptocurrency ID"
INVALID_PAYLOAD_MESSAGE = "Invalid request payload"
INTERNAL_ERROR_MESSAGE = "Internal server error"


async def crypto_vote_error_handler(_: Request, exc: CryptoVoteError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed ids and bodies as 400 instead of FastAPI's default 422."""
    in_path = any((err.get("loc") or ("",))[0] == "path" for err in exc.errors())
    detail = INVALID_ID_MESSAGE if in_path else INVALID_PAYLOAD_MESSAGE
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CryptoVoteError, crypto_vote_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
