"""In-memory implementation of DocumentRepository."""

from __future__ import annotations

from bizdash.domain.model.document import Document
from bizdash.domain.repository.document_repository import DocumentRepository
from bizdash.domain.repository.id_generator import IdGenerator


class InMemoryDocumentRepository(DocumentRepository):

    def __init__(self, ids: IdGenerator, documents: list[Document] | None = None) -> None:
        self._ids = ids
        self._store: dict[str, Document] = {}
        for doc in documents or []:
            self._store[doc.id] = doc

    def next_id(self) -> str:
        return self._ids.next_id()

    def get_by_id(self, document_id: str) -> Document | None:
        return self._store.get(document_id)

    def list_all(self) -> list[Document]:
        return list(self._store.values())

    def save(self, document: Document) -> None:
        self._store[document.id] = document

    def delete(self, document_id: str) -> bool:
        return self._store.pop(document_id, None) is not None
