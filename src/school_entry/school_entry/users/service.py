from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..auth.model import Principal
from ..auth.tokens import TokenService
from ..core.exceptions import AuthenticationError, ValidationError
from .passwords import verify_password
from .repository import UserRepository


@dataclass(frozen=True)
class LoginResult:
    token: str
    principal: Principal

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "token": self.token, "user": self.principal.to_dict()}


class AuthService:
    """Use case: authenticate staff (login) and issue a token."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def authenticate(self, email: Any, password: Any) -> LoginResult:
        if not email or not password:
            raise ValidationError("Email and password are required")

        # StorageError propagates; the login route decides how to answer it.
        user = self._users.get_by_email(str(email))
        if not user:
            raise AuthenticationError("Invalid credentials")

        if not verify_password(str(password), user.password):
            raise AuthenticationError("Invalid credentials")

        principal = Principal(id=user.id, email=user.email, role=user.role, name=user.name)
        return LoginResult(token=self._tokens.issue(principal), principal=principal)
