"""Session and display preferences.

Plain key-value state with no relational constraints: who is logged in,
which theme is active, which currency symbol prices are shown with and
the company logo reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: str


@dataclass
class Session:
    user: User | None = None
    theme: Theme = Theme.DARK
    currency: str = "$"
    company_logo: str = ""

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
