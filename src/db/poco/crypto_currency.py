from __future__ import annotations

from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import column_property

from db.base import Base


class CryptoCurrency(Base):
    __tablename__ = "crypto_vote"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    up_vote = Column(Integer, nullable=False, default=0, server_default="0")
    down_vote = Column(Integer, nullable=False, default=0, server_default="0")

    # Derived on every load, never stored.
    total_votes = column_property(up_vote + down_vote)

    __table_args__ = (
        UniqueConstraint("name", name="uq_crypto_vote_name"),
    )
