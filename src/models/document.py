"""Typed records projected from search responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from src.models.errors import MissingFieldError
from src.models.schema import CONTENT_FIELD, KEY_FIELD, TITLE_FIELD


def _require(document: Mapping[str, Any], field: str) -> str:
    # The service returns unset retrievable fields as null
    if document.get(field) is None:
        raise MissingFieldError(field, document.keys())
    return str(document[field])


class ResultRecord(BaseModel):
    """Article returned by a search query.

    Transient: built from a search hit, never written back to the index.
    """

    id: str = Field(..., description="Index key (Id)")
    title: str = Field(..., description="Article title")
    content: str = Field(..., description="Article body")

    model_config = {"frozen": True}

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> ResultRecord:
        """Project a hit by exact field name.

        Raises:
            MissingFieldError: If Id, Title or Content is absent from the hit.
        """
        return cls(
            id=_require(document, KEY_FIELD),
            title=_require(document, TITLE_FIELD),
            content=_require(document, CONTENT_FIELD),
        )


class SearchResultSet(BaseModel):
    """Relevance-ordered records plus the service's total match estimate."""

    records: list[ResultRecord] = Field(default_factory=list)
    total_count: int | None = Field(None, ge=0, description="Total matches reported by the service")


class Suggestion(BaseModel):
    """Autocomplete candidate produced by the suggester."""

    id: str
    text: str
