"""Crypto vote business logic.

The service owns no connection state of its own: it is built with a
``DbConn`` storage client and opens one session scope per operation.
Vote increments and deletes detect missing records from the affected
row count of the mutating statement itself.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from db.crypto_votes_repo import CryptoVotesRepo, NewCryptoCurrency
from db.db_conn import DbConn
from db.poco.crypto_currency import CryptoCurrency
from voting.errors import ConflictError, NotFoundError
from voting.validation import validate_name

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Cryptocurrency does not exist"
DUPLICATE_MESSAGE = "Cryptocurrency with this name already exists"


class VoteType(str, enum.Enum):
    """Which counter a vote touches; the value is the column name."""

    UP_VOTE = "up_vote"
    DOWN_VOTE = "down_vote"


@dataclass(frozen=True)
class CryptoRecord:
    id: int
    name: str
    up_vote: int
    down_vote: int
    total_votes: int

    @classmethod
    def from_row(cls, row: CryptoCurrency) -> "CryptoRecord":
        return cls(
            id=int(row.id),
            name=row.name,
            up_vote=int(row.up_vote),
            down_vote=int(row.down_vote),
            total_votes=int(row.total_votes),
        )


class CryptoVoteService:
    """Create, read, vote on and delete cryptocurrencies."""

    def __init__(self, db: DbConn, repo: Optional[CryptoVotesRepo] = None) -> None:
        self.db = db
        self.repo = repo or CryptoVotesRepo()

    def get_all(self) -> List[CryptoRecord]:
        with self.db.session_scope() as session:
            return [CryptoRecord.from_row(r) for r in self.repo.list_all(session)]

    def get_by_id(self, crypto_id: int) -> CryptoRecord:
        with self.db.session_scope() as session:
            return self._load(session, crypto_id)

    def create(self, name: str) -> CryptoRecord:
        """Validate ``name`` and insert a record with both counters at zero."""
        validate_name(name)
        try:
            with self.db.session_scope() as session:
                if self.repo.exists_by_name(session, name):
                    raise ConflictError(DUPLICATE_MESSAGE)
                obj = self.repo.create(session, NewCryptoCurrency(name=name))
                record = CryptoRecord.from_row(obj)
        except IntegrityError as exc:
            # lost a race with a concurrent insert of the same name
            raise ConflictError(DUPLICATE_MESSAGE) from exc

        logger.info("Created cryptocurrency id=%s name=%r", record.id, record.name)
        return record

    def apply_up_vote(self, crypto_id: int) -> CryptoRecord:
        return self.apply_vote(crypto_id, VoteType.UP_VOTE)

    def apply_down_vote(self, crypto_id: int) -> CryptoRecord:
        return self.apply_vote(crypto_id, VoteType.DOWN_VOTE)

    def apply_vote(self, crypto_id: int, vote_type: VoteType) -> CryptoRecord:
        with self.db.session_scope() as session:
            affected = self.repo.increment_vote(session, crypto_id, vote_type.value)
            if affected == 0:
                raise NotFoundError(NOT_FOUND_MESSAGE)
            record = self._load(session, crypto_id)

        logger.info("Applied %s to id=%s (total=%s)", vote_type.value, crypto_id, record.total_votes)
        return record

    def delete(self, crypto_id: int) -> None:
        with self.db.session_scope() as session:
            if self.repo.delete(session, crypto_id) == 0:
                raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Deleted cryptocurrency id=%s", crypto_id)

    def _load(self, session: Session, crypto_id: int) -> CryptoRecord:
        obj = self.repo.get_by_id(session, crypto_id)
        if obj is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return CryptoRecord.from_row(obj)
