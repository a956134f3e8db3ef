from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from voting.service import CryptoRecord, CryptoVoteService
from web.deps import get_vote_service

router = APIRouter(prefix="/cryptovote", tags=["cryptovote"])


class CryptoCurrency(BaseModel):
    id: int
    name: str
    up_vote: int = 0
    down_vote: int = 0
    total_votes: int = 0


class CreateCryptoCurrencyRequest(BaseModel):
    # Only the name is read; vote counts in the payload are ignored.
    name: str


def _to_schema(record: CryptoRecord) -> CryptoCurrency:
    return CryptoCurrency(
        id=record.id,
        name=record.name,
        up_vote=record.up_vote,
        down_vote=record.down_vote,
        total_votes=record.total_votes,
    )


@router.get("", response_model=List[CryptoCurrency])
def list_crypto_currencies(service: CryptoVoteService = Depends(get_vote_service)) -> List[CryptoCurrency]:
    """List every cryptocurrency with its vote tallies."""
    return [_to_schema(r) for r in service.get_all()]


@router.get("/{crypto_id}", response_model=CryptoCurrency)
def get_crypto_currency(
    crypto_id: int,
    service: CryptoVoteService = Depends(get_vote_service),
) -> CryptoCurrency:
    return _to_schema(service.get_by_id(crypto_id))


@router.post("", response_model=CryptoCurrency, status_code=status.HTTP_201_CREATED)
def create_crypto_currency(
    payload: CreateCryptoCurrencyRequest,
    service: CryptoVoteService = Depends(get_vote_service),
) -> CryptoCurrency:
    """Create a cryptocurrency with zeroed vote counters."""
    return _to_schema(service.create(payload.name))


@router.put("/{crypto_id}/upvote", response_model=CryptoCurrency)
def up_vote_crypto_currency(
    crypto_id: int,
    service: CryptoVoteService = Depends(get_vote_service),
) -> CryptoCurrency:
    return _to_schema(service.apply_up_vote(crypto_id))


@router.put("/{crypto_id}/downvote", response_model=CryptoCurrency)
def down_vote_crypto_currency(
    crypto_id: int,
    service: CryptoVoteService = Depends(get_vote_service),
) -> CryptoCurrency:
    return _to_schema(service.apply_down_vote(crypto_id))


@router.delete("/{crypto_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_crypto_currency(
    crypto_id: int,
    service: CryptoVoteService = Depends(get_vote_service),
) -> Response:
    service.delete(crypto_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT, media_type="application/json")
