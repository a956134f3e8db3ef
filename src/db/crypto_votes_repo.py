from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import delete, exists, select, update
from sqlalchemy.orm import Session

from db.poco.crypto_currency import CryptoCurrency

VOTE_COLUMNS = ("up_vote", "down_vote")

# Range of the INTEGER id column; ids outside it cannot name a stored row.
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


def is_storable_id(crypto_id: int) -> bool:
    return ID_MIN <= crypto_id <= ID_MAX


@dataclass(frozen=True)
class NewCryptoCurrency:
    name: str


class CryptoVotesRepo:
    """Repository for CRUD and vote operations on the crypto_vote table.

    Ids outside the column range are treated as missing rather than sent to
    the driver, which would reject them.
    """

    def list_all(self, session: Session) -> List[CryptoCurrency]:
        stmt = select(CryptoCurrency).order_by(CryptoCurrency.id)
        return list(session.scalars(stmt).all())

    def get_by_id(self, session: Session, crypto_id: int) -> Optional[CryptoCurrency]:
        if not is_storable_id(crypto_id):
            return None
        return session.get(CryptoCurrency, crypto_id, populate_existing=True)

    def exists_by_id(self, session: Session, crypto_id: int) -> bool:
        """Read-only existence check.

        Votes and deletes do not call this; they detect missing rows from
        the affected row count of their own statement.
        """
        if not is_storable_id(crypto_id):
            return False
        stmt = select(exists().where(CryptoCurrency.id == crypto_id))
        return bool(session.scalar(stmt))

    def exists_by_name(self, session: Session, name: str) -> bool:
        stmt = select(exists().where(CryptoCurrency.name == name))
        return bool(session.scalar(stmt))

    def create(self, session: Session, new_crypto: NewCryptoCurrency) -> CryptoCurrency:
        obj = CryptoCurrency(name=new_crypto.name, up_vote=0, down_vote=0)
        session.add(obj)
        session.flush()  # ensures PK is populated
        session.refresh(obj)
        return obj

    def increment_vote(self, session: Session, crypto_id: int, column: str) -> int:
        """Add exactly one to ``column`` in a single UPDATE; return affected rows."""
        if column not in VOTE_COLUMNS:
            raise ValueError(f"Invalid vote column '{column}'. Allowed: {VOTE_COLUMNS}")
        if not is_storable_id(crypto_id):
            return 0

        counter = getattr(CryptoCurrency, column)
        stmt = (
            update(CryptoCurrency)
            .where(CryptoCurrency.id == crypto_id)
            .values({counter: counter + 1})
            .execution_options(synchronize_session=False)
        )
        result = session.execute(stmt)
        return int(result.rowcount or 0)

    def delete(self, session: Session, crypto_id: int) -> int:
        if not is_storable_id(crypto_id):
            return 0
        stmt = (
            delete(CryptoCurrency)
            .where(CryptoCurrency.id == crypto_id)
            .execution_options(synchronize_session=False)
        )
        result = session.execute(stmt)
        return int(result.rowcount or 0)
