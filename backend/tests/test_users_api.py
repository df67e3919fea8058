from src.infrastructure.storage import MemoryKeyValueStore


def test_list_users_never_exposes_digests(client, register):
    register("alice")
    register("Bob")

    res = client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == [{"username": "Bob"}, {"username": "alice"}]


def test_update_status(client, register):
    alice = register("alice")

    res = client.post("/api/users/status", json={"online": True}, headers=alice)
    assert res.status_code == 200
    assert res.json() == {"message": "Status updated"}


def test_update_status_requires_login(client):
    assert client.post("/api/users/status", json={"online": True}).status_code == 401


def test_update_status_for_unknown_user(client, auth_headers):
    # A validly signed token for a name that was never registered
    res = client.post("/api/users/status", json={"online": True}, headers=auth_headers)
    assert res.status_code == 404


def test_legacy_register_returns_no_token(client):
    res = client.post("/api/users/register", json={"username": "dave", "password": "pass1"})
    assert res.status_code == 201
    assert res.json() == {"message": "User registered successfully", "username": "dave"}

    login = client.post("/api/auth/login", json={"username": "dave", "password": "pass1"})
    assert login.status_code == 200


def test_store_failure_is_a_generic_500(client, monkeypatch):
    async def refuse(self, pk):
        raise ConnectionError("connection refused")

    monkeypatch.setattr(MemoryKeyValueStore, "query", refuse)

    res = client.get("/api/users")
    assert res.status_code == 500
    assert res.json() == {"error": "Server error while loading users"}
    assert "connection refused" not in res.text


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
