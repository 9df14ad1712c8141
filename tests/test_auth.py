# tests/test_auth.py

AUTH = "/api/v1/auth"
PASSWORD = "password123"


def _sign_up(client, username="carol", password=PASSWORD):
    return client.post(f"{AUTH}/sign-up", json={"username": username, "password": password})


def _sign_in(client, username="carol", password=PASSWORD):
    return client.post(f"{AUTH}/sign-in", json={"username": username, "password": password})


def test_sign_up_returns_user_without_password(client):
    r = _sign_up(client)
    assert r.status_code == 201
    body = r.json()
    assert body["username"] == "carol"
    assert "hashed_password" not in body
    assert "password" not in body


def test_sign_up_duplicate_username_conflicts(client):
    _sign_up(client)
    r = _sign_up(client)
    assert r.status_code == 409


def test_sign_up_validates_lengths(client):
    assert _sign_up(client, username="ab").status_code == 422
    assert _sign_up(client, password="short").status_code == 422


def test_sign_in_and_me(client):
    _sign_up(client)
    r = _sign_in(client)
    assert r.status_code == 200
    pair = r.json()
    assert pair["token_type"] == "bearer"
    assert pair["expires_in"] == 15 * 60
    assert "refresh_token" in r.cookies

    me = client.get(f"{AUTH}/me", headers={"Authorization": f"Bearer {pair['access_token']}"})
    assert me.status_code == 200
    assert me.json()["username"] == "carol"


def test_sign_in_wrong_password(client):
    _sign_up(client)
    assert _sign_in(client, password="wrong-password").status_code == 401
    assert _sign_in(client, username="nobody").status_code == 401


def test_refresh_token_is_not_an_access_token(client):
    _sign_up(client)
    pair = _sign_in(client).json()
    r = client.get(f"{AUTH}/me", headers={"Authorization": f"Bearer {pair['refresh_token']}"})
    assert r.status_code == 401


def test_refresh_rotates_and_revokes_old_token(client):
    _sign_up(client)
    old = _sign_in(client).json()

    r = client.post(f"{AUTH}/refresh", json={"refresh_token": old["refresh_token"]})
    assert r.status_code == 200
    new = r.json()
    assert new["refresh_token"] != old["refresh_token"]

    # l'ancien refresh a été révoqué par la rotation
    r = client.post(f"{AUTH}/refresh", json={"refresh_token": old["refresh_token"]})
    assert r.status_code == 401


def test_logout_revokes_refresh(client):
    _sign_up(client)
    pair = _sign_in(client).json()

    r = client.post(f"{AUTH}/logout", json={"refresh_token": pair["refresh_token"]})
    assert r.status_code == 204

    r = client.post(f"{AUTH}/refresh", json={"refresh_token": pair["refresh_token"]})
    assert r.status_code == 401


def test_logout_with_garbage_token_is_silent(client):
    r = client.post(f"{AUTH}/logout", json={"refresh_token": "garbage"})
    assert r.status_code == 204


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
