from src.school_entry.school_entry.main import create_app


def test_login_success(client, token_service):
    resp = client.post("/login", json={"email": "teacher1@school.edu", "password": "teacher123"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["user"] == {"id": 2, "email": "teacher1@school.edu", "role": "teacher", "name": "Mr. John Smith"}
    assert token_service.verify(body["token"]).email == "teacher1@school.edu"
    assert "auth-token=" in resp.headers["Set-Cookie"]


def test_login_missing_fields(client):
    resp = client.post("/login", json={"email": "teacher1@school.edu"})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Email and password are required"}


def test_login_non_json_body(client):
    resp = client.post("/login", data="email=x", content_type="text/plain")

    assert resp.status_code == 400


def test_login_wrong_password(client):
    resp = client.post("/login", json={"email": "teacher1@school.edu", "password": "bad"})

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid credentials"}


def test_login_unknown_user(client):
    resp = client.post("/login", json={"email": "ghost@school.edu", "password": "teacher123"})

    assert resp.status_code == 401


def test_login_storage_down_keeps_legacy_200(client, users_repo):
    users_repo.fail = True

    resp = client.post("/login", json={"email": "teacher1@school.edu", "password": "teacher123"})

    assert resp.status_code == 200
    assert resp.get_json() == {"error": "Database connection failed. Using demo mode."}


def test_login_storage_down_status_is_configurable(container, users_repo):
    app = create_app("config.testing", container=container)
    app.config["LOGIN_STORAGE_ERROR_STATUS"] = 503
    users_repo.fail = True

    resp = app.test_client().post("/login", json={"email": "teacher1@school.edu", "password": "teacher123"})

    assert resp.status_code == 503
    assert "error" in resp.get_json()


def test_me_requires_token(client):
    resp = client.get("/me")

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "No authentication token provided"}


def test_me_with_login_cookie(client):
    client.post("/login", json={"email": "principal@school.edu", "password": "principal123"})

    resp = client.get("/me")

    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "principal"


def test_logout_clears_cookie(client):
    client.post("/login", json={"email": "principal@school.edu", "password": "principal123"})

    assert client.post("/logout").status_code == 200
    assert client.get("/me").status_code == 401
