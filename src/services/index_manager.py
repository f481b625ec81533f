"""Destructive (re)creation of the search index."""

from __future__ import annotations

import logging

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.search.documents.indexes import SearchIndexClient

from src.models.errors import IndexProvisionError
from src.models.schema import IndexDefinition

logger = logging.getLogger(__name__)


class IndexManager:
    """Resets the index to exactly the declared definition.

    Field changes cannot be merged into a live index, so an existing index
    of the same name is deleted before the new one is created. The index is
    briefly absent between the two calls.
    """

    def __init__(self, client: SearchIndexClient) -> None:
        self._client = client

    def index_exists(self, name: str) -> bool:
        try:
            self._client.get_index(name)
        except ResourceNotFoundError:
            return False
        return True

    def create_index(self, definition: IndexDefinition) -> IndexProvisionError | None:
        """Delete any index with the same name, then create it fresh.

        Args:
            definition: Declared schema, scoring profiles and suggesters.

        Returns:
            None on success, otherwise the wrapped service error.
        """
        log_extra = {"index_name": definition.name}
        logger.info("Creating index", extra=log_extra)

        try:
            if self.index_exists(definition.name):
                logger.info("Deleting existing index", extra=log_extra)
                self._client.delete_index(definition.name)
            self._client.create_index(definition.to_search_index())
        except AzureError as exc:
            logger.error("Something went wrong creating index", exc_info=True, extra=log_extra)
            return IndexProvisionError(definition.name, exc)

        logger.info("Index created", extra=log_extra)
        return None
