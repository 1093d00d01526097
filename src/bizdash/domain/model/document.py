"""Uploaded document reference.

The store never holds file contents, only a transient URL pointing at
wherever the upload lives for the current session.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from bizdash.domain.exceptions import ValidationError

DEFAULT_CATEGORY = "General"


class DocumentKind(Enum):
    IMAGE = "image"
    PDF = "pdf"
    OTHER = "other"


@dataclass(frozen=True)
class Document:

    id: str
    name: str
    category: str
    date: date
    url: str
    type: str  # MIME-like, only used to pick an icon

    @staticmethod
    def create(
        document_id: str,
        name: str,
        url: str,
        type: str,
        created_on: date,
        category: str | None = None,
    ) -> Document:
        if not name or not name.strip():
            raise ValidationError("Document name is required")
        return Document(
            id=document_id,
            name=name.strip(),
            category=(category or "").strip() or DEFAULT_CATEGORY,
            date=created_on,
            url=url,
            type=type or "",
        )

    @property
    def kind(self) -> DocumentKind:
        if "image" in self.type:
            return DocumentKind.IMAGE
        if "pdf" in self.type:
            return DocumentKind.PDF
        return DocumentKind.OTHER
