from conftest import bearer


def test_register_then_login(client):
    res = client.post("/api/auth/register", json={"username": "alice", "password": "pass1"})
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "alice"
    assert body["message"] == "User registered successfully"

    res = client.post("/api/auth/login", json={"username": "alice", "password": "pass1"})
    assert res.status_code == 200
    token = res.json()["token"]

    # The login token works on a login-required endpoint
    res = client.get("/api/channels/all", headers=bearer(token))
    assert res.status_code == 200


def test_two_users_get_distinct_tokens(client):
    alice = client.post("/api/auth/register", json={"username": "alice", "password": "pass1"})
    bob = client.post("/api/auth/register", json={"username": "bob", "password": "pass1"})
    assert alice.status_code == bob.status_code == 201
    assert alice.json()["token"] != bob.json()["token"]


def test_duplicate_username_is_rejected(client, register):
    register("alice")
    res = client.post("/api/auth/register", json={"username": "alice", "password": "other"})
    assert res.status_code == 400
    assert res.json() == {"error": "Username already exists"}


def test_register_validation_lists_every_reason(client):
    res = client.post("/api/auth/register", json={"username": "a", "password": "123"})
    assert res.status_code == 400
    assert res.json() == {
        "error": [
            "Username must be at least 2 characters",
            "Password must be at least 4 characters",
        ]
    }


def test_login_wrong_password(client, register):
    register("alice")
    res = client.post("/api/auth/login", json={"username": "alice", "password": "wrong"})
    assert res.status_code == 401
    assert res.json() == {"error": "Invalid password"}


def test_login_unknown_user(client):
    res = client.post("/api/auth/login", json={"username": "ghost", "password": "pass1"})
    assert res.status_code == 401
    assert res.json() == {"error": "User not found"}


def test_login_validation(client):
    res = client.post("/api/auth/login", json={"username": "alice"})
    assert res.status_code == 400
    assert res.json()["error"] == ["Password must be at least 4 characters"]


def test_logout(client):
    res = client.post("/api/auth/logout", json={"username": "alice"})
    assert res.status_code == 200
    assert res.json() == {"message": "Logged out"}


def test_logout_requires_username(client):
    assert client.post("/api/auth/logout", json={}).status_code == 400
    res = client.post("/api/auth/logout")
    assert res.status_code == 400
    assert res.json() == {"error": "Username required"}


def test_username_differing_only_in_case_is_rejected(client, register):
    register("alice")
    res = client.post("/api/auth/register", json={"username": "ALICE", "password": "pass1"})
    assert res.status_code == 400
    assert res.json() == {"error": "Username already exists"}

    res = client.post("/api/users/register", json={"username": "Alice", "password": "pass1"})
    assert res.status_code == 400
