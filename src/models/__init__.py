"""Pydantic data models for article search provisioning and queries."""

from src.models.document import ResultRecord, SearchResultSet, Suggestion
from src.models.errors import (
    DataSourceProvisionError,
    IndexerProvisionError,
    IndexProvisionError,
    MissingFieldError,
    Origin,
    ProvisionError,
    QueryError,
)
from src.models.provisioning import (
    DataSourceDescriptor,
    FieldMappingSpec,
    IndexerJob,
    ProvisioningResult,
    ProvisioningState,
    ProvisionStep,
)
from src.models.schema import IndexDefinition, IndexField, ScoringProfileSpec, SuggesterSpec

__all__ = [
    "DataSourceDescriptor",
    "DataSourceProvisionError",
    "FieldMappingSpec",
    "IndexDefinition",
    "IndexField",
    "IndexProvisionError",
    "IndexerJob",
    "IndexerProvisionError",
    "MissingFieldError",
    "Origin",
    "ProvisionError",
    "ProvisionStep",
    "ProvisioningResult",
    "ProvisioningState",
    "QueryError",
    "ResultRecord",
    "ScoringProfileSpec",
    "SearchResultSet",
    "SuggesterSpec",
    "Suggestion",
]
