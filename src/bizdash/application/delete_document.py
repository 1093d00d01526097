"""Application service: Delete Document use case."""

from __future__ import annotations

import logging

from bizdash.domain.exceptions import EntityNotFoundError
from bizdash.domain.repository.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class DeleteDocumentHandler:

    def __init__(self, document_repo: DocumentRepository, strict: bool = False) -> None:
        self._document_repo = document_repo
        self._strict = strict

    def handle(self, document_id: str) -> bool:
        if self._document_repo.delete(document_id):
            logger.info("Deleted document #%s", document_id)
            return True

        if self._strict:
            raise EntityNotFoundError(f"Document with ID '{document_id}' not found")
        logger.warning("Ignoring delete of unknown document #%s", document_id)
        return False
