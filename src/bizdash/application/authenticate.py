"""Application service: Login / Logout use cases.

Login keeps a boolean contract; the session simply gains or loses its
user.
"""

from __future__ import annotations

import logging

from bizdash.domain.model.session import Session
from bizdash.domain.service.authentication import authenticate

logger = logging.getLogger(__name__)


class LoginHandler:

    def __init__(self, session: Session) -> None:
        self._session = session

    def handle(self, email: str, password: str) -> bool:
        """Log in with the demo credentials.

        On failure the session is left exactly as it was.
        """
        user = authenticate(email, password)
        if user is None:
            logger.warning("Rejected login for %r", email)
            return False

        self._session.user = user
        logger.info("User %s logged in", user.email)
        return True


class LogoutHandler:

    def __init__(self, session: Session) -> None:
        self._session = session

    def handle(self) -> None:
        if self._session.user is not None:
            logger.info("User %s logged out", self._session.user.email)
        self._session.user = None
