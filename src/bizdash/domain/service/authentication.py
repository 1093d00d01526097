"""Domain service: demo authentication.

There is exactly one account and its credentials are literals.  This is
a convenience gate for the demo dashboard, not a security mechanism:
no hashing, no lockout, no rate limiting.
"""

from __future__ import annotations

from bizdash.domain.model.session import User

ADMIN_EMAIL = "admin@empresa.com"
ADMIN_PASSWORD = "admin123"

ADMIN_USER = User(
    id="1",
    name="Administrador",
    email=ADMIN_EMAIL,
    role="admin",
)


def authenticate(email: str, password: str) -> User | None:
    """Return the admin identity when the credentials match, else None."""
    if email == ADMIN_EMAIL and password == ADMIN_PASSWORD:
        return ADMIN_USER
    return None
