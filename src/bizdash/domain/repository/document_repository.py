"""Abstract repository for uploaded Document references."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bizdash.domain.model.document import Document


class DocumentRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique document ID."""

    @abstractmethod
    def get_by_id(self, document_id: str) -> Document | None:
        """Return a document by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Document]:
        """Return every document in upload order."""

    @abstractmethod
    def save(self, document: Document) -> None:
        """Persist a new document."""

    @abstractmethod
    def delete(self, document_id: str) -> bool:
        """Remove a document. Return False if it did not exist."""
