"""Validation and vote-mutation logic for the crypto vote API."""
from voting.errors import ConflictError, CryptoVoteError, NotFoundError, ValidationError
from voting.service import CryptoRecord, CryptoVoteService, VoteType
from voting.validation import validate_name

__all__ = [
    "ConflictError",
    "CryptoRecord",
    "CryptoVoteError",
    "CryptoVoteService",
    "NotFoundError",
    "ValidationError",
    "VoteType",
    "validate_name",
]
