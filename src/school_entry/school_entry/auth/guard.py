from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import Request, current_app, g, jsonify, request

from ..core.constants import AUTH_COOKIE_NAME
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .model import AuthResult, Principal
from .tokens import TokenService

MISSING_TOKEN = "No authentication token provided"
INVALID_TOKEN = "Invalid or expired token"
INSUFFICIENT_PERMISSIONS = "Insufficient permissions"


def token_from_request(request: Request, *, cookie_name: str = AUTH_COOKIE_NAME) -> Optional[str]:
    """Bearer header first, then the auth cookie."""
    header = request.headers.get("Authorization", "")
    if header.startswith("Bearer "):
        return header[len("Bearer "):]

    return request.cookies.get(cookie_name) or None


def authenticate(request: Request, tokens: TokenService, *, cookie_name: str = AUTH_COOKIE_NAME) -> AuthResult:
    token = token_from_request(request, cookie_name=cookie_name)
    if not token:
        return AuthResult(success=False, error=MISSING_TOKEN)

    principal = tokens.verify(token)
    if principal is None:
        return AuthResult(success=False, error=INVALID_TOKEN)

    return AuthResult(success=True, principal=principal)


def authorize(principal: Principal, required_role: Role) -> bool:
    """Hierarchical check: a principal satisfies every teacher requirement."""
    if required_role == Role.TEACHER:
        return principal.role in (Role.TEACHER, Role.PRINCIPAL)
    return principal.role == required_role


def require_role(principal: Principal, required_role: Role) -> None:
    if not authorize(principal, required_role):
        raise AuthorizationError(INSUFFICIENT_PERMISSIONS)


def auth_required(tokens: TokenService, role: Optional[Role] = None):
    """Flask view decorator: 401 without a valid token, 403 on role mismatch.

    The verified Principal is available as ``g.principal`` inside the view.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            cookie_name = current_app.config.get("AUTH_COOKIE_NAME", AUTH_COOKIE_NAME)
            result = authenticate(request, tokens, cookie_name=cookie_name)
            if not result.success:
                return jsonify({"error": result.error}), 401

            if role is not None:
                try:
                    require_role(result.principal, role)
                except AuthorizationError as e:
                    return jsonify({"error": str(e)}), 403

            g.principal = result.principal
            return view(*args, **kwargs)

        return wrapper

    return decorator
