"""Data source registration for the relational and blob origins."""

from __future__ import annotations

import logging

from azure.core.exceptions import AzureError
from azure.search.documents.indexes import SearchIndexerClient

from src.models.errors import DataSourceProvisionError, Origin
from src.models.provisioning import (
    CONTENT_DATA_SOURCE_NAME,
    FILES_DATA_SOURCE_NAME,
    DataSourceDescriptor,
)

logger = logging.getLogger(__name__)


class DataSourceRegistrar:
    """Upserts one data source per origin under a fixed, well-known name.

    Create-or-update absorbs both the first run and every re-run, so no
    existence check is needed.
    """

    def __init__(self, client: SearchIndexerClient) -> None:
        self._client = client

    def register_relational_source(
        self, connection_string: str, table_name: str
    ) -> DataSourceProvisionError | None:
        """Register the SQL table the content indexer pulls from.

        Returns:
            None on success, otherwise the wrapped service error.
        """
        return self.register(
            DataSourceDescriptor(
                name=CONTENT_DATA_SOURCE_NAME,
                origin=Origin.RELATIONAL,
                connection_string=connection_string,
                target=table_name,
            )
        )

    def register_blob_source(
        self, connection_string: str, container_name: str
    ) -> DataSourceProvisionError | None:
        """Register the blob container the files indexer pulls from.

        Returns:
            None on success, otherwise the wrapped service error.
        """
        return self.register(
            DataSourceDescriptor(
                name=FILES_DATA_SOURCE_NAME,
                origin=Origin.BLOB,
                connection_string=connection_string,
                target=container_name,
            )
        )

    def register(self, descriptor: DataSourceDescriptor) -> DataSourceProvisionError | None:
        log_extra = {"origin": descriptor.origin.value, "data_source_name": descriptor.name}
        logger.info("Creating data source", extra=log_extra)

        try:
            self._client.create_or_update_data_source_connection(
                descriptor.to_data_source_connection()
            )
        except AzureError as exc:
            logger.error("Something went wrong registering data source", exc_info=True, extra=log_extra)
            return DataSourceProvisionError(descriptor.origin, exc)

        logger.info("Data source registered", extra=log_extra)
        return None
