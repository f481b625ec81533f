"""Data source, indexer and provisioning-outcome models."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum

from azure.search.documents.indexes.models import (
    FieldMapping,
    IndexingSchedule,
    SearchIndexer,
    SearchIndexerDataContainer,
    SearchIndexerDataSourceConnection,
)
from pydantic import BaseModel, Field, field_validator

from src.models.errors import Origin, ProvisionError
from src.models.schema import CONTENT_FIELD, TITLE_FIELD, validate_resource_name

CONTENT_DATA_SOURCE_NAME = "content-source"
FILES_DATA_SOURCE_NAME = "files-source"
CONTENT_INDEXER_NAME = "content-indexer"
FILES_INDEXER_NAME = "files-indexer"

INDEXER_SCHEDULE = timedelta(days=1)

# Service-side data source type per origin
_DATA_SOURCE_TYPES: dict[Origin, str] = {
    Origin.RELATIONAL: "azuresql",
    Origin.BLOB: "azureblob",
}


class DataSourceDescriptor(BaseModel):
    """Registered description of one external origin.

    ``target`` is the table name for a relational origin and the container
    name for a blob origin.
    """

    name: str
    origin: Origin
    connection_string: str = Field(..., repr=False)
    target: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def _valid_name(cls, value: str) -> str:
        return validate_resource_name(value)

    def to_data_source_connection(self) -> SearchIndexerDataSourceConnection:
        return SearchIndexerDataSourceConnection(
            name=self.name,
            type=_DATA_SOURCE_TYPES[self.origin],
            connection_string=self.connection_string,
            container=SearchIndexerDataContainer(name=self.target),
        )


class FieldMappingSpec(BaseModel):
    """Rename of an origin field to a schema field at ingestion time."""

    source_field_name: str
    target_field_name: str

    model_config = {"frozen": True}

    def to_field_mapping(self) -> FieldMapping:
        return FieldMapping(
            source_field_name=self.source_field_name,
            target_field_name=self.target_field_name,
        )


# Blob metadata names differ from the schema; SQL columns already match it.
BLOB_FIELD_MAPPINGS: tuple[FieldMappingSpec, ...] = (
    FieldMappingSpec(source_field_name="title", target_field_name=TITLE_FIELD),
    FieldMappingSpec(source_field_name="content", target_field_name=CONTENT_FIELD),
)


class IndexerJob(BaseModel):
    """Scheduled pull job binding one data source to one index."""

    name: str
    origin: Origin
    data_source_name: str
    target_index_name: str
    schedule: timedelta = INDEXER_SCHEDULE
    field_mappings: list[FieldMappingSpec] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("name", "data_source_name", "target_index_name")
    @classmethod
    def _valid_names(cls, value: str) -> str:
        return validate_resource_name(value)

    @field_validator("schedule")
    @classmethod
    def _positive_schedule(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("indexer schedule interval must be positive")
        return value

    def to_search_indexer(self) -> SearchIndexer:
        return SearchIndexer(
            name=self.name,
            data_source_name=self.data_source_name,
            target_index_name=self.target_index_name,
            schedule=IndexingSchedule(interval=self.schedule),
            field_mappings=[m.to_field_mapping() for m in self.field_mappings] or None,
        )


class ProvisionStep(str, Enum):
    """Provisioning steps in execution order."""

    REGISTER_RELATIONAL_SOURCE = "register_relational_source"
    REGISTER_BLOB_SOURCE = "register_blob_source"
    CREATE_INDEX = "create_index"
    CREATE_BLOB_INDEXER = "create_blob_indexer"
    CREATE_RELATIONAL_INDEXER = "create_relational_indexer"


class ProvisioningState(str, Enum):
    DONE = "done"
    FAILED = "failed"


class ProvisioningResult(BaseModel):
    """Terminal outcome of one orchestrator run."""

    state: ProvisioningState
    completed_steps: list[ProvisionStep] = Field(default_factory=list)
    failed_step: ProvisionStep | None = None
    error: ProvisionError | None = None

    model_config = {"arbitrary_types_allowed": True}

    @property
    def succeeded(self) -> bool:
        return self.state is ProvisioningState.DONE
