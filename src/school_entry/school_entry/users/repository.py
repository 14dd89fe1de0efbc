from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Read access to staff accounts.

    Implementations return None when no row matches and raise StorageError
    when the store itself fails.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError
