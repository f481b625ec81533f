"""Error taxonomy for provisioning steps and search queries."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Origin(str, Enum):
    """Kind of external source an index is populated from."""

    RELATIONAL = "relational"
    BLOB = "blob"


class ProvisionError(Exception):
    """Base class for a failed provisioning step.

    Wraps the underlying service/transport error as ``cause``. Provisioning
    services return these instead of raising them so the orchestrator can
    inspect each outcome.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class DataSourceProvisionError(ProvisionError):
    """Registering the data source for an origin failed."""

    def __init__(self, origin: Origin, cause: BaseException | None = None) -> None:
        self.origin = origin
        super().__init__(f"failed to register {origin.value} data source", cause)


class IndexProvisionError(ProvisionError):
    """Creating (or resetting) the search index failed."""

    def __init__(self, index_name: str, cause: BaseException | None = None) -> None:
        self.index_name = index_name
        super().__init__(f"failed to create index '{index_name}'", cause)


class IndexerProvisionError(ProvisionError):
    """Creating or running the indexer for an origin failed."""

    def __init__(self, origin: Origin, cause: BaseException | None = None) -> None:
        self.origin = origin
        super().__init__(f"failed to create and run {origin.value} indexer", cause)


class QueryError(Exception):
    """Base class for query-time failures."""


class MissingFieldError(QueryError):
    """A search hit lacks (or has null for) a field the result record requires.

    Means the live index and this client disagree about the schema; fix by
    re-provisioning, not by retrying.
    """

    def __init__(self, field: str, document_keys: Iterable[str]) -> None:
        self.field = field
        self.document_keys = sorted(document_keys)
        super().__init__(
            f"search hit is missing field '{field}' (present: {', '.join(self.document_keys)})"
        )
