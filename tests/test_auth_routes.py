from fastapi.testclient import TestClient


EMAIL = "user@example.com"
PASSWORD = "super-secret-password"


def sign_up(client: TestClient, email: str = EMAIL, **extra):
    payload = {"email": email, "name": "Test User", "password": PASSWORD, **extra}
    return client.post("/auth/sign-up", json=payload)


def test_sign_up_creates_user_and_sets_cookie(client: TestClient):
    response = sign_up(client)

    assert response.status_code == 201
    body = response.json()
    assert body["access_token"]
    assert body["user"]["email"] == EMAIL
    assert body["user"]["role"] == "user"
    assert "password" not in body["user"]
    assert client.cookies.get("token") == body["access_token"]


def test_sign_up_with_taken_email_conflicts(client: TestClient):
    assert sign_up(client).status_code == 201

    response = sign_up(client)

    assert response.status_code == 409
    assert response.json() == {"detail": "A user with this email is already registered"}


def test_sign_up_validates_body(client: TestClient):
    response = client.post(
        "/auth/sign-up",
        json={"email": "not-an-email", "name": "X", "password": "123"},
    )

    assert response.status_code == 422


def test_sign_in_with_valid_credentials(client: TestClient):
    sign_up(client)
    client.cookies.clear()

    response = client.post("/auth/sign-in", json={"email": EMAIL, "password": PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["email"] == EMAIL
    assert client.cookies.get("token") == body["access_token"]


def test_sign_in_with_wrong_password(client: TestClient):
    sign_up(client)

    response = client.post("/auth/sign-in", json={"email": EMAIL, "password": "wrong-password"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid email or password"}


def test_sign_in_with_unknown_email(client: TestClient):
    response = client.post(
        "/auth/sign-in", json={"email": "ghost@example.com", "password": PASSWORD}
    )

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid email or password"}


def test_sign_out_clears_cookie(client: TestClient):
    sign_up(client)
    assert client.get("/users").status_code == 200

    response = client.post("/auth/sign-out")

    assert response.status_code == 200
    assert response.json() == {"detail": "Signed out successfully"}
    assert "token" not in client.cookies
    assert client.get("/users").status_code == 401


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_sign_up_cannot_request_admin_role(client: TestClient):
    response = sign_up(client, email="evil@example.com", role="admin")

    assert response.status_code == 201
    assert response.json()["user"]["role"] == "user"
