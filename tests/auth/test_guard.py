import pytest
from flask import Flask, g, jsonify

from src.school_entry.school_entry.auth.guard import (
    INSUFFICIENT_PERMISSIONS,
    INVALID_TOKEN,
    MISSING_TOKEN,
    auth_required,
    authenticate,
    authorize,
    require_role,
    token_from_request,
)
from src.school_entry.school_entry.core.enums import Role
from src.school_entry.school_entry.core.exceptions import AuthorizationError

_app = Flask(__name__)


def test_authorize_is_hierarchical(teacher, principal):
    assert authorize(teacher, Role.TEACHER)
    assert authorize(principal, Role.TEACHER)
    assert authorize(principal, Role.PRINCIPAL)
    assert not authorize(teacher, Role.PRINCIPAL)


def test_bearer_header_wins_over_cookie():
    with _app.test_request_context(
        "/", headers={"Authorization": "Bearer from-header", "Cookie": "auth-token=from-cookie"}
    ) as ctx:
        assert token_from_request(ctx.request) == "from-header"


def test_cookie_used_when_no_bearer_header():
    with _app.test_request_context("/", headers={"Cookie": "auth-token=from-cookie"}) as ctx:
        assert token_from_request(ctx.request) == "from-cookie"


def test_non_bearer_authorization_header_is_ignored():
    with _app.test_request_context("/", headers={"Authorization": "Basic abc"}) as ctx:
        assert token_from_request(ctx.request) is None


def test_authenticate_missing_token(token_service):
    with _app.test_request_context("/") as ctx:
        result = authenticate(ctx.request, token_service)

    assert not result.success
    assert result.error == MISSING_TOKEN


def test_authenticate_invalid_token(token_service):
    with _app.test_request_context("/", headers={"Authorization": "Bearer forged"}) as ctx:
        result = authenticate(ctx.request, token_service)

    assert not result.success
    assert result.error == INVALID_TOKEN


def test_authenticate_valid_token(token_service, teacher):
    token = token_service.issue(teacher)
    with _app.test_request_context("/", headers={"Authorization": f"Bearer {token}"}) as ctx:
        result = authenticate(ctx.request, token_service)

    assert result.success
    assert result.principal == teacher


def test_require_role_raises_for_teacher_on_principal_action(teacher, principal):
    require_role(principal, Role.PRINCIPAL)

    with pytest.raises(AuthorizationError):
        require_role(teacher, Role.PRINCIPAL)


def _principal_only_app(token_service):
    app = Flask(__name__)

    @app.route("/reports")
    @auth_required(token_service, Role.PRINCIPAL)
    def reports():
        return jsonify({"success": True, "by": g.principal.name})

    return app


def test_principal_only_view_forbids_teacher(token_service, teacher):
    client = _principal_only_app(token_service).test_client()

    resp = client.get("/reports", headers={"Authorization": f"Bearer {token_service.issue(teacher)}"})

    assert resp.status_code == 403
    assert resp.get_json() == {"error": INSUFFICIENT_PERMISSIONS}


def test_principal_only_view_allows_principal(token_service, principal):
    client = _principal_only_app(token_service).test_client()

    resp = client.get("/reports", headers={"Authorization": f"Bearer {token_service.issue(principal)}"})

    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "by": "Dr. Sarah Johnson"}
