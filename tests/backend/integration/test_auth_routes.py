import uuid

import pytest


pytestmark = pytest.mark.asyncio


async def register(client, name: str, email: str, password: str):
    return await client.post(
        "/auth/register",
        json={"name": name, "email": email, "password": password},
    )


async def login(client, email: str, password: str):
    return await client.post("/auth/login", json={"email": email, "password": password})


async def test_register_and_login_flow(client):
    email = f"user_{uuid.uuid4().hex[:6]}@example.com"
    password = "StrongPass!23"

    resp = await register(client, "Alice", email, password)
    body = resp.json()
    assert resp.status_code == 201
    assert body["message"] == "User registered successfully"
    assert body["user"]["email"] == email
    assert "password" not in str(body["user"]).lower()
    assert "userToken" in resp.cookies
    client.cookies.clear()

    # Duplicate email is a conflict, even with different casing
    dup = await register(client, "Alice again", email.upper(), password)
    assert dup.status_code == 409
    assert dup.json() == {
        "statusCode": 409,
        "error": "Conflict",
        "message": "This email already exists",
    }

    ok = await login(client, email, password)
    assert ok.status_code == 200
    assert ok.json()["message"] == "Login successfully"
    assert ok.json()["user"]["id"] == body["user"]["id"]
    assert "userToken" in ok.cookies
    client.cookies.clear()

    bad_password = await login(client, email, "wrong-password")
    assert bad_password.status_code == 403
    assert bad_password.json()["message"] == "Invalid password"

    unknown = await login(client, "nobody@example.com", password)
    assert unknown.status_code == 404
    assert unknown.json()["message"] == "Email not found"


async def test_register_validation_error_shape(client):
    resp = await register(client, "", "x@example.com", "short")
    body = resp.json()
    assert resp.status_code == 400
    assert body["statusCode"] == 400
    assert body["error"] == "Bad Request"
    assert body["message"]


async def test_me_with_cookie_and_bearer(client, register_user):
    user = await register_user(name="Bob")

    by_cookie = await client.get("/users/me", headers=user["headers"])
    assert by_cookie.status_code == 200
    assert by_cookie.json()["user"]["name"] == "Bob"

    by_bearer = await client.get("/users/me", headers={"Authorization": f"Bearer {user['token']}"})
    assert by_bearer.status_code == 200
    assert by_bearer.json()["user"]["id"] == user["id"]


async def test_protected_routes_require_session(client):
    for method, path in [
        ("GET", "/users/me"),
        ("GET", "/collections"),
        ("POST", "/collections"),
        ("GET", "/collections/1/tasks"),
    ]:
        resp = await client.request(method, path, json={"name": "x"} if method == "POST" else None)
        assert resp.status_code == 401, path
        assert resp.json() == {"statusCode": 401, "error": "Unauthorized", "message": "Unauthorized"}


async def test_invalid_token_is_unauthorized(client):
    resp = await client.get("/users/me", headers={"Cookie": "userToken=not-a-jwt"})
    assert resp.status_code == 401


async def test_logout_clears_cookie(client, register_user):
    user = await register_user()

    resp = await client.post("/auth/logout", headers=user["headers"])
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logout successfully"}
    assert "userToken=" in resp.headers.get("set-cookie", "")


async def test_healthz(client):
    resp = await client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
