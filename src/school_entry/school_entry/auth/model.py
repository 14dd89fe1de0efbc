from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Principal:
    """Identity decoded from a verified token; lives for one request."""

    id: int
    email: str
    role: Role
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "email": self.email, "role": self.role.value, "name": self.name}


@dataclass(frozen=True)
class AuthResult:
    success: bool
    principal: Optional[Principal] = None
    error: Optional[str] = None
