"""Tests for the crypto vote service."""
import pytest

from db.crypto_votes_repo import CryptoVotesRepo
from voting.errors import ConflictError, NotFoundError, ValidationError
from voting.service import CryptoVoteService, VoteType


class NameCheckSkippingRepo(CryptoVotesRepo):
    """Repo whose duplicate-name pre-check always misses, leaving the unique constraint to fire."""

    def exists_by_name(self, session, name):
        return False


def test_create_starts_with_zero_votes(service):
    record = service.create("Bitcoin")

    assert record.id >= 1
    assert record.name == "Bitcoin"
    assert (record.up_vote, record.down_vote, record.total_votes) == (0, 0, 0)


@pytest.mark.parametrize("name", ["", "123"])
def test_create_rejects_invalid_names(service, name):
    with pytest.raises(ValidationError):
        service.create(name)

    assert service.get_all() == []


def test_create_duplicate_name_conflicts(service):
    service.create("Bitcoin")

    with pytest.raises(ConflictError) as err:
        service.create("Bitcoin")

    assert err.value.status_code == 409
    assert len(service.get_all()) == 1


def test_names_are_case_sensitive(service):
    service.create("Bitcoin")
    service.create("bitcoin")

    assert [r.name for r in service.get_all()] == ["Bitcoin", "bitcoin"]


def test_unique_constraint_reported_as_conflict(db):
    service = CryptoVoteService(db, repo=NameCheckSkippingRepo())
    service.create("Monero")

    with pytest.raises(ConflictError):
        service.create("Monero")


def test_votes_add_exactly_one_and_keep_total_in_sync(service):
    crypto_id = service.create("Ether").id

    up = service.apply_up_vote(crypto_id)
    assert (up.up_vote, up.down_vote, up.total_votes) == (1, 0, 1)

    down = service.apply_down_vote(crypto_id)
    assert (down.up_vote, down.down_vote, down.total_votes) == (1, 1, 2)

    again = service.apply_vote(crypto_id, VoteType.UP_VOTE)
    assert (again.up_vote, again.down_vote, again.total_votes) == (2, 1, 3)
    assert again.total_votes == again.up_vote + again.down_vote
    assert service.get_by_id(crypto_id) == again


@pytest.mark.parametrize(
    "operation",
    [
        lambda s: s.get_by_id(42),
        lambda s: s.apply_up_vote(42),
        lambda s: s.apply_down_vote(42),
        lambda s: s.delete(42),
    ],
)
def test_missing_id_is_not_found(service, operation):
    with pytest.raises(NotFoundError) as err:
        operation(service)

    assert err.value.status_code == 404


def test_delete_then_get_is_not_found(service):
    crypto_id = service.create("Ripple").id

    service.delete(crypto_id)

    with pytest.raises(NotFoundError):
        service.get_by_id(crypto_id)


def test_get_all_is_stable(service):
    for name in ("Bitcoin", "Ether", "Solana"):
        service.create(name)

    assert service.get_all() == service.get_all()


def test_vote_type_values_name_columns():
    assert [v.value for v in VoteType] == ["up_vote", "down_vote"]
