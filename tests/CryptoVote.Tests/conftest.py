"""Shared fixtures: an in-memory SQLite DbConn, the service and an API client."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app import create_app
from db.db_conn import DbConn
from voting.service import CryptoVoteService


@pytest.fixture
def db():
    conn = DbConn(db_url="sqlite://")
    conn.create_schema()
    yield conn
    conn.dispose()


@pytest.fixture
def service(db):
    return CryptoVoteService(db)


@pytest.fixture
def client(db):
    with TestClient(create_app(db_conn=db)) as test_client:
        yield test_client
