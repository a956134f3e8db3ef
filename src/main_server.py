"""Run the crypto vote API under uvicorn.

Run from project root:
    python src/main_server.py --port 8080
    python src/main_server.py --check-db --create-schema

Reads DATABASE_URL or DB_* values (and optionally PORT/HOST) from the
environment or resources/.env. ``--check-db`` verifies the database
instead of serving.
"""
from __future__ import annotations

import argparse
import logging

import uvicorn

from config import get_log_level, get_server_host, get_server_port, load_env_file
from db.db_conn import DbConn
from log_config import setup_logging

logger = logging.getLogger("main_server")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the crypto vote API")
    parser.add_argument("--host", dest="host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", dest="port", type=int, default=None, help="Listening port (default: PORT or 8080)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    parser.add_argument("--check-db", action="store_true", help="Check the database connection and exit")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="With --check-db, create the crypto_vote table if it is missing",
    )
    return parser.parse_args(argv)


def check_database(db: DbConn, create_schema: bool = False) -> int:
    """Report connectivity and schema state; return a process exit code."""
    if not db.test_connection():
        logger.error("Database connection failed")
        return 1
    logger.info("Database connection OK")

    if create_schema:
        db.create_schema()
        logger.info("crypto_vote table ensured")

    rev = db.get_alembic_revision()
    logger.info("Alembic revision: %s", rev or "none (no alembic_version table)")
    return 0


def main(argv=None) -> int:
    load_env_file()
    setup_logging(get_log_level())
    args = parse_args(argv)

    if args.check_db:
        try:
            db = DbConn()
        except ValueError as exc:
            logger.error("%s", exc)
            return 2
        try:
            return check_database(db, create_schema=args.create_schema)
        finally:
            db.dispose()

    uvicorn.run(
        "app:create_app",
        factory=True,
        host=args.host or get_server_host(),
        port=args.port or get_server_port(),
        reload=args.reload,
        log_level=get_log_level().lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
