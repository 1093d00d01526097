"""Application service: Search Documents use case (query)."""

from __future__ import annotations

from bizdash.application.dto import DocumentDTO, DocumentListingDTO
from bizdash.domain.model.document import DocumentKind
from bizdash.domain.repository.document_repository import DocumentRepository


class SearchDocumentsHandler:

    def __init__(self, document_repo: DocumentRepository) -> None:
        self._document_repo = document_repo

    def handle(self, query: str = "") -> DocumentListingDTO:
        """List documents whose name contains *query*.

        The image/PDF counters always describe the whole collection, not
        the filtered rows.
        """
        everything = self._document_repo.list_all()
        needle = query.strip().lower()

        return DocumentListingDTO(
            documents=[
                DocumentDTO(
                    id=doc.id,
                    name=doc.name,
                    category=doc.category,
                    date=doc.date.isoformat(),
                    kind=doc.kind.value,
                    url=doc.url,
                )
                for doc in everything
                if needle in doc.name.lower()
            ],
            total=len(everything),
            images=sum(1 for doc in everything if doc.kind == DocumentKind.IMAGE),
            pdfs=sum(1 for doc in everything if doc.kind == DocumentKind.PDF),
        )
