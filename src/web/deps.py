"""Shared FastAPI dependencies."""
from __future__ import annotations

from fastapi import Request

from voting.service import CryptoVoteService


def get_vote_service(request: Request) -> CryptoVoteService:
    """Return the service built by ``create_app`` for this application."""
    return request.app.state.vote_service
