from __future__ import annotations


class CryptoVoteError(Exception):
    """Base error for crypto vote operations; carries the HTTP status to report."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CryptoVoteError):
    status_code = 400


class NotFoundError(CryptoVoteError):
    status_code = 404


class ConflictError(CryptoVoteError):
    status_code = 409
