"""Integration tests for the document use cases."""

from datetime import date

import pytest

from bizdash.application.add_document import AddDocumentHandler
from bizdash.application.delete_document import DeleteDocumentHandler
from bizdash.application.search_documents import SearchDocumentsHandler
from bizdash.domain.exceptions import EntityNotFoundError
from bizdash.infrastructure.clock import FixedClock
from bizdash.infrastructure.persistence.id_sequence import IdSequence
from bizdash.infrastructure.persistence.in_memory_document_repository import (
    InMemoryDocumentRepository,
)
from tests.fakes import TODAY


def _setup():
    repo = InMemoryDocumentRepository(IdSequence())
    return AddDocumentHandler(repo, FixedClock(TODAY)), repo


class TestAddDocument:

    def test_defaults(self):
        add, repo = _setup()
        doc = add.handle("logo.png", "blob:1", "image/png")
        assert doc.id == "1"
        assert doc.category == "General"
        assert doc.date == TODAY
        assert repo.list_all() == [doc]

    def test_explicit_date_and_category(self):
        add, _ = _setup()
        doc = add.handle("march.pdf", "blob:2", "application/pdf", "Invoices", date(2025, 3, 1))
        assert doc.category == "Invoices"
        assert doc.date == date(2025, 3, 1)

    def test_unique_ids(self):
        add, _ = _setup()
        ids = {add.handle(f"f{i}.txt", "blob:x", "text/plain").id for i in range(10)}
        assert len(ids) == 10


class TestDeleteDocument:

    def test_delete(self):
        add, repo = _setup()
        doc = add.handle("logo.png", "blob:1", "image/png")
        assert DeleteDocumentHandler(repo).handle(doc.id) is True
        assert repo.list_all() == []

    def test_unknown_id_is_a_no_op(self):
        _, repo = _setup()
        assert DeleteDocumentHandler(repo).handle("7") is False

    def test_unknown_id_strict(self):
        _, repo = _setup()
        with pytest.raises(EntityNotFoundError, match="Document"):
            DeleteDocumentHandler(repo, strict=True).handle("7")


class TestSearchDocuments:

    def test_filters_by_name_and_counts_kinds(self):
        add, repo = _setup()
        add.handle("Logo.png", "blob:1", "image/png")
        add.handle("invoice-march.pdf", "blob:2", "application/pdf")
        add.handle("prices.csv", "blob:3", "text/csv")

        listing = SearchDocumentsHandler(repo).handle("LOGO")
        assert [d.name for d in listing.documents] == ["Logo.png"]
        assert listing.documents[0].kind == "image"
        assert (listing.total, listing.images, listing.pdfs) == (3, 1, 1)
