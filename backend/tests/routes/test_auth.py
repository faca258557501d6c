MY_BOARDS_QUERY = "query ($token: String!) { myBoards(token: $token) { pk } }"


def test_valid_login(client):
    resp = client.post("/api/auth/login", json={"name": "user", "password": "password"})
    assert resp.status_code == 200
    data = resp.json()
    assert "token" in data
    assert data["name"] == "user"
    assert data["user_pk"] == "user-1"


def test_wrong_password(client):
    resp = client.post("/api/auth/login", json={"name": "user", "password": "wrong"})
    assert resp.status_code == 401


def test_wrong_name(client):
    resp = client.post("/api/auth/login", json={"name": "admin", "password": "password"})
    assert resp.status_code == 401


def test_login_missing_fields(client):
    resp = client.post("/api/auth/login", json={"name": "user"})
    assert resp.status_code == 422


def test_login_token_works_for_graphql(client, gql):
    token = client.post("/api/auth/login", json={"name": "alice", "password": "password"}).json()["token"]
    result = gql(MY_BOARDS_QUERY, token=token)
    assert [b["pk"] for b in result["data"]["myBoards"]] == [3, 5, 6]


def test_logout(client, gql):
    token = client.post("/api/auth/login", json={"name": "user", "password": "password"}).json()["token"]
    resp = client.post("/api/auth/logout", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 204

    # Token is now invalid
    result = gql(MY_BOARDS_QUERY, token=token)
    assert result["errors"][0]["extensions"]["code"] == "INVALID_TOKEN"


def test_logout_requires_auth(client):
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 401


def test_malformed_auth_header(client):
    resp = client.post("/api/auth/logout", headers={"Authorization": "Token abc"})
    assert resp.status_code == 401


def test_invalid_token(client):
    resp = client.post("/api/auth/logout", headers={"Authorization": "Bearer invalid-token"})
    assert resp.status_code == 401


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
