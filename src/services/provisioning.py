"""Ordered, fail-fast provisioning of data sources, index and indexers."""

from __future__ import annotations

import logging
from collections.abc import Callable

from azure.search.documents.indexes import SearchIndexClient, SearchIndexerClient

from src.config import Settings
from src.models.errors import ProvisionError
from src.models.provisioning import ProvisioningResult, ProvisioningState, ProvisionStep
from src.models.schema import IndexDefinition, build_article_index
from src.services.data_sources import DataSourceRegistrar
from src.services.index_manager import IndexManager
from src.services.indexer_manager import (
    IndexerManager,
    blob_indexer_job,
    relational_indexer_job,
)

logger = logging.getLogger(__name__)


class ProvisioningOrchestrator:
    """Runs the provisioning steps in dependency order.

    Both data sources must exist before their indexers, and the index must
    exist before any indexer that targets it. The first failed step ends the
    run; completed steps are not rolled back because every step is an upsert
    or a reset and re-running the whole sequence is safe.
    """

    def __init__(
        self,
        registrar: DataSourceRegistrar,
        index_manager: IndexManager,
        indexer_manager: IndexerManager,
        *,
        db_connection_string: str,
        db_table_name: str,
        blob_connection_string: str,
        blob_container_name: str,
        index_definition: IndexDefinition | None = None,
    ) -> None:
        self._registrar = registrar
        self._index_manager = index_manager
        self._indexer_manager = indexer_manager
        self._db_connection_string = db_connection_string
        self._db_table_name = db_table_name
        self._blob_connection_string = blob_connection_string
        self._blob_container_name = blob_container_name
        self._index = index_definition or build_article_index()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        index_client: SearchIndexClient,
        indexer_client: SearchIndexerClient,
    ) -> ProvisioningOrchestrator:
        return cls(
            DataSourceRegistrar(indexer_client),
            IndexManager(index_client),
            IndexerManager(indexer_client),
            db_connection_string=settings.db_connection_string,
            db_table_name=settings.db_table_name,
            blob_connection_string=settings.blob_connection_string,
            blob_container_name=settings.blob_container_name,
            index_definition=build_article_index(settings.azure_search_index_name),
        )

    def _steps(self) -> list[tuple[ProvisionStep, Callable[[], ProvisionError | None]]]:
        index_name = self._index.name
        return [
            (
                ProvisionStep.REGISTER_RELATIONAL_SOURCE,
                lambda: self._registrar.register_relational_source(
                    self._db_connection_string, self._db_table_name
                ),
            ),
            (
                ProvisionStep.REGISTER_BLOB_SOURCE,
                lambda: self._registrar.register_blob_source(
                    self._blob_connection_string, self._blob_container_name
                ),
            ),
            (
                ProvisionStep.CREATE_INDEX,
                lambda: self._index_manager.create_index(self._index),
            ),
            (
                ProvisionStep.CREATE_BLOB_INDEXER,
                lambda: self._indexer_manager.create_and_run_indexer(
                    blob_indexer_job(index_name)
                ),
            ),
            (
                ProvisionStep.CREATE_RELATIONAL_INDEXER,
                lambda: self._indexer_manager.create_and_run_indexer(
                    relational_indexer_job(index_name)
                ),
            ),
        ]

    def run(self) -> ProvisioningResult:
        """Execute every step in order, stopping at the first failure.

        Returns:
            ``DONE`` with all steps completed, or ``FAILED`` naming the
            failing step and its error.
        """
        completed: list[ProvisionStep] = []

        for step, action in self._steps():
            logger.info("Provisioning step started", extra={"step": step.value})
            error = action()
            if error is not None:
                logger.error(
                    "Provisioning failed",
                    extra={"step": step.value},
                )
                return ProvisioningResult(
                    state=ProvisioningState.FAILED,
                    completed_steps=completed,
                    failed_step=step,
                    error=error,
                )
            completed.append(step)

        logger.info("Provisioning complete", extra={"index_name": self._index.name})
        return ProvisioningResult(state=ProvisioningState.DONE, completed_steps=completed)
