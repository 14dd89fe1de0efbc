"""Password comparison for staff accounts.

Stored passwords are either plain text or a reversible base64 encoding.
Neither is a one-way hash; a real deployment needs salted hashing instead.
"""

from __future__ import annotations

import base64


def encode_password(password: str) -> str:
    return base64.b64encode(password.encode("utf-8")).decode("ascii")


def verify_password(password: str, stored: str) -> bool:
    """Accept a plain-text match or a match against the encoded form."""
    if password == stored:
        return True
    return encode_password(password) == stored
