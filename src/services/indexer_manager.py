"""Creation and immediate triggering of scheduled indexers."""

from __future__ import annotations

import logging

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.search.documents.indexes import SearchIndexerClient

from src.models.errors import IndexerProvisionError, Origin
from src.models.provisioning import (
    BLOB_FIELD_MAPPINGS,
    CONTENT_DATA_SOURCE_NAME,
    CONTENT_INDEXER_NAME,
    FILES_DATA_SOURCE_NAME,
    FILES_INDEXER_NAME,
    INDEXER_SCHEDULE,
    IndexerJob,
)

logger = logging.getLogger(__name__)


def blob_indexer_job(target_index_name: str) -> IndexerJob:
    """Files indexer: blob container to index, remapping metadata names."""
    return IndexerJob(
        name=FILES_INDEXER_NAME,
        origin=Origin.BLOB,
        data_source_name=FILES_DATA_SOURCE_NAME,
        target_index_name=target_index_name,
        schedule=INDEXER_SCHEDULE,
        field_mappings=list(BLOB_FIELD_MAPPINGS),
    )


def relational_indexer_job(target_index_name: str) -> IndexerJob:
    """Content indexer: SQL table to index; columns already match the schema."""
    return IndexerJob(
        name=CONTENT_INDEXER_NAME,
        origin=Origin.RELATIONAL,
        data_source_name=CONTENT_DATA_SOURCE_NAME,
        target_index_name=target_index_name,
        schedule=INDEXER_SCHEDULE,
    )


class IndexerManager:
    """Resets an indexer to the declared job and runs it once.

    Uses the same delete-then-create policy as the index so schedule and
    mapping changes never merge partially. The run is triggered right after
    creation so a fresh service is queryable without waiting a full
    schedule interval.
    """

    def __init__(self, client: SearchIndexerClient) -> None:
        self._client = client

    def indexer_exists(self, name: str) -> bool:
        try:
            self._client.get_indexer(name)
        except ResourceNotFoundError:
            return False
        return True

    def create_and_run_indexer(self, job: IndexerJob) -> IndexerProvisionError | None:
        """Delete any indexer with the same name, create it, and run it.

        Args:
            job: Declared indexer (data source, target index, schedule, mappings).

        Returns:
            None on success, otherwise the wrapped service error.
        """
        log_extra = {
            "origin": job.origin.value,
            "indexer_name": job.name,
            "data_source_name": job.data_source_name,
            "index_name": job.target_index_name,
        }
        logger.info("Creating indexer", extra=log_extra)

        try:
            if self.indexer_exists(job.name):
                logger.info("Deleting existing indexer", extra=log_extra)
                self._client.delete_indexer(job.name)
            self._client.create_indexer(job.to_search_indexer())
            self._client.run_indexer(job.name)
        except AzureError as exc:
            logger.error("Something went wrong creating indexer", exc_info=True, extra=log_extra)
            return IndexerProvisionError(job.origin, exc)

        logger.info("Indexer created and running", extra=log_extra)
        return None
