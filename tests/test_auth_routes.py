from fastapi.testclient import TestClient

from kisaanmitra.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from kisaanmitra.main import app

client = TestClient(app)


def _signup(**overrides):
    data = {"email": "a@example.com", "username": "asha", "password": "secret-pw"}
    data.update(overrides)
    return client.post("/auth/signup", data=data)


def test_signup_returns_json():
    r = _signup()
    assert r.status_code == 201
    assert "application/json" in r.headers["content-type"]
    assert r.json()["message"] == "Signup successful"


def test_signup_rejects_duplicates_and_unknown_roles():
    assert _signup().status_code == 201
    assert _signup(username="other").status_code == 400
    assert _signup(email="b@example.com").status_code == 400
    assert _signup(email="c@example.com", username="c", role="Admin").status_code == 400


def test_login_sets_cookie_and_accepts_email():
    _signup()
    r = client.post("/auth/login", data={"email_or_username": "a@example.com", "password": "secret-pw"})

    assert r.status_code == 200
    assert r.json()["token_type"] == "bearer"
    assert "access_token" in r.cookies

    me = client.get("/api/me/progress")
    assert me.status_code == 200
    assert me.json()["username"] == "asha"
    client.cookies.clear()


def test_login_with_wrong_password_is_401():
    _signup()
    r = client.post("/auth/login", data={"email_or_username": "asha", "password": "nope"})
    assert r.status_code == 401


def test_garbage_token_is_401():
    r = client.get("/api/me/progress", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_root_redirects_to_catalog():
    r = client.get("/", follow_redirects=False)
    assert r.status_code in (302, 307)
    assert r.headers["location"] == "/catalog/crops"


def test_password_hashing():
    stored = hash_password("pw")
    assert verify_password("pw", stored)
    assert not verify_password("other", stored)
    assert not verify_password("pw", "malformed")


def test_token_round_trip():
    assert decode_access_token(create_access_token("asha"))["sub"] == "asha"
