"""Unit tests for Document references."""

from datetime import date

import pytest

from bizdash.domain.exceptions import ValidationError
from bizdash.domain.model.document import DEFAULT_CATEGORY, Document, DocumentKind


def _doc(type: str = "application/pdf", category: str | None = None) -> Document:
    return Document.create("1", "invoice.pdf", "blob:abc", type, date(2025, 11, 12), category)


class TestDocument:

    def test_blank_category_defaults_to_general(self):
        assert _doc(category="  ").category == DEFAULT_CATEGORY
        assert _doc(category=None).category == "General"

    def test_keeps_explicit_category(self):
        assert _doc(category="Invoices").category == "Invoices"

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            Document.create("1", "", "blob:abc", "image/png", date(2025, 11, 12))

    @pytest.mark.parametrize(
        "mime, kind",
        [
            ("image/png", DocumentKind.IMAGE),
            ("application/pdf", DocumentKind.PDF),
            ("text/csv", DocumentKind.OTHER),
            ("", DocumentKind.OTHER),
        ],
    )
    def test_kind_from_type(self, mime, kind):
        assert _doc(type=mime).kind == kind
