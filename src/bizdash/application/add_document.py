"""Application service: Add Document use case."""

from __future__ import annotations

import logging
from datetime import date

from bizdash.domain.model.document import Document
from bizdash.domain.repository.document_repository import DocumentRepository
from bizdash.domain.service.clock import Clock

logger = logging.getLogger(__name__)


class AddDocumentHandler:

    def __init__(self, document_repo: DocumentRepository, clock: Clock) -> None:
        self._document_repo = document_repo
        self._clock = clock

    def handle(
        self,
        name: str,
        url: str,
        type: str,
        category: str | None = None,
        created_on: date | None = None,
    ) -> Document:
        """Register an uploaded file.  A blank category becomes "General"."""
        document = Document.create(
            document_id=self._document_repo.next_id(),
            name=name,
            url=url,
            type=type,
            created_on=created_on or self._clock.today(),
            category=category,
        )
        self._document_repo.save(document)
        logger.info("Added document #%s '%s' [%s]", document.id, document.name, document.category)
        return document
