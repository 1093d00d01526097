"""Application service: display settings (theme, currency, logo).

None of these values are validated; the currency is a free-form symbol
used only when formatting amounts.
"""

from __future__ import annotations

import logging

from bizdash.domain.model.session import Session, Theme

logger = logging.getLogger(__name__)


class ToggleThemeHandler:

    def __init__(self, session: Session) -> None:
        self._session = session

    def handle(self) -> Theme:
        self._session.theme = self._session.theme.toggled()
        logger.debug("Theme switched to %s", self._session.theme.value)
        return self._session.theme


class UpdateCurrencyHandler:

    def __init__(self, session: Session) -> None:
        self._session = session

    def handle(self, currency: str) -> None:
        self._session.currency = currency
        logger.debug("Currency set to %r", currency)


class UpdateCompanyLogoHandler:

    def __init__(self, session: Session) -> None:
        self._session = session

    def handle(self, logo: str) -> None:
        self._session.company_logo = logo
