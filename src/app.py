from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_cors_origins, get_log_level, load_env_file
from db.db_conn import DbConn
from log_config import setup_logging
from voting.service import CryptoVoteService
from web.errors import register_error_handlers
from web.routes import cryptovote


def create_app(db_conn: Optional[DbConn] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``db_conn`` is the storage client handed to the vote service; when omitted
    one is built from DATABASE_URL or the DB_* variables.
    """
    load_env_file()
    setup_logging(get_log_level())

    db = db_conn or DbConn()
    owns_db = db_conn is None

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            yield
        finally:
            if owns_db:
                db.dispose()

    app = FastAPI(
        title="Crypto Vote API",
        version="0.1.0",
        description="Create, vote on and delete cryptocurrencies.",
        lifespan=lifespan,
    )
    app.state.vote_service = CryptoVoteService(db)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_error_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(cryptovote.router)
    # Versioned alias kept for clients of the /v1 prefix.
    app.include_router(cryptovote.router, prefix="/v1", include_in_schema=False)

    return app
