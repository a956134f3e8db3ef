"""HTTP tests for the /cryptovote endpoints."""
import pytest
from fastapi.testclient import TestClient

from app import create_app
from db.base import Base
from voting.service import CryptoVoteService


def _create(client, name):
    resp = client.post("/cryptovote", json={"name": name})
    assert resp.status_code == 201
    return resp.json()


def test_vote_lifecycle_scenario(client):
    resp = client.post("/cryptovote", json={"name": "Bitcoin"})
    assert resp.status_code == 201
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"id": 1, "name": "Bitcoin", "up_vote": 0, "down_vote": 0, "total_votes": 0}

    resp = client.put("/cryptovote/1/upvote")
    assert resp.status_code == 200
    assert resp.json()["up_vote"] == 1
    assert resp.json()["total_votes"] == 1

    resp = client.put("/cryptovote/1/downvote")
    assert resp.status_code == 200
    assert resp.json()["down_vote"] == 1
    assert resp.json()["total_votes"] == 2

    resp = client.delete("/cryptovote/1")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = client.get("/cryptovote/1")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Cryptocurrency does not exist"}


def test_list_returns_all_records(client):
    assert client.get("/cryptovote").json() == []

    _create(client, "Crypto1")
    _create(client, "Crypto2")

    resp = client.get("/cryptovote")
    assert resp.status_code == 200
    assert [r["name"] for r in resp.json()] == ["Crypto1", "Crypto2"]


def test_get_by_id(client):
    created = _create(client, "Ether")

    resp = client.get(f"/cryptovote/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_create_ignores_votes_in_payload(client):
    resp = client.post("/cryptovote", json={"name": "Solana", "up_vote": 10, "down_vote": 5, "total_votes": 15})
    assert resp.status_code == 201
    body = resp.json()
    assert (body["up_vote"], body["down_vote"], body["total_votes"]) == (0, 0, 0)


@pytest.mark.parametrize(
    "payload, detail",
    [
        ({"name": ""}, "Name cannot be empty"),
        ({"name": "123"}, "Name cannot be a number"),
        ({}, "Invalid request payload"),
        ({"name": 123}, "Invalid request payload"),
    ],
)
def test_create_bad_payload_is_400(client, payload, detail):
    resp = client.post("/cryptovote", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"detail": detail}


def test_create_malformed_json_is_400(client):
    resp = client.post(
        "/cryptovote",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid request payload"}


def test_create_duplicate_is_409(client):
    _create(client, "Bitcoin")

    resp = client.post("/cryptovote", json={"name": "Bitcoin"})
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Cryptocurrency with this name already exists"}


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/cryptovote/abc"),
        ("PUT", "/cryptovote/abc/upvote"),
        ("PUT", "/cryptovote/abc/downvote"),
        ("DELETE", "/cryptovote/abc"),
    ],
)
def test_malformed_id_is_400(client, method, path):
    resp = client.request(method, path)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid cryptocurrency ID"}


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/cryptovote/999"),
        ("PUT", "/cryptovote/999/upvote"),
        ("PUT", "/cryptovote/999/downvote"),
        ("DELETE", "/cryptovote/999"),
    ],
)
def test_missing_id_is_404(client, method, path):
    resp = client.request(method, path)
    assert resp.status_code == 404


@pytest.mark.parametrize("crypto_id", [2**31, 99999999999999999999, -(2**31) - 1])
@pytest.mark.parametrize(
    "method, suffix",
    [("GET", ""), ("PUT", "/upvote"), ("PUT", "/downvote"), ("DELETE", "")],
)
def test_id_beyond_storage_range_is_404(client, crypto_id, method, suffix):
    resp = client.request(method, f"/cryptovote/{crypto_id}{suffix}")
    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"detail": "Cryptocurrency does not exist"}


def test_whitespace_name_is_created(client):
    resp = client.post("/cryptovote", json={"name": "   "})
    assert resp.status_code == 201
    assert resp.json()["name"] == "   "


def test_long_name_is_created(client):
    name = "Coin" * 100

    created = _create(client, name)

    assert created["name"] == name
    assert client.get(f"/cryptovote/{created['id']}").json()["name"] == name


def test_versioned_prefix_serves_same_routes(client):
    created = _create(client, "Cardano")

    resp = client.put(f"/v1/cryptovote/{created['id']}/upvote")
    assert resp.status_code == 200
    assert resp.json()["up_vote"] == 1


def test_storage_failure_is_generic_500(client, db):
    Base.metadata.drop_all(db.engine)

    resp = client.get("/cryptovote")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}


def test_cors_preflight(client):
    resp = client.options(
        "/cryptovote",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


class ExplodingService(CryptoVoteService):
    def get_all(self):
        raise RuntimeError("boom")


def test_unexpected_error_is_generic_json_500(db):
    app = create_app(db_conn=db)
    app.state.vote_service = ExplodingService(db)

    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/cryptovote")

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"detail": "Internal server error"}
