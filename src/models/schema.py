"""Index schema definition for article documents.

The document shape is small and fixed, so the schema is built by hand from
plain descriptors and converted to SDK models only at the service boundary.
"""

from __future__ import annotations

import re

from azure.search.documents.indexes.models import (
    ScoringProfile,
    SearchField,
    SearchFieldDataType,
    SearchIndex,
    SearchSuggester,
    TextWeights,
)
from pydantic import BaseModel, Field, field_validator, model_validator

INDEX_NAME = "index"
SCORING_PROFILE_NAME = "scoring-profile"
SUGGESTER_NAME = "suggester"

KEY_FIELD = "Id"
TITLE_FIELD = "Title"
CONTENT_FIELD = "Content"

# Title matches rank above body matches
TITLE_WEIGHT = 6.0
CONTENT_WEIGHT = 3.0

# Lowercase letters, digits and dashes; no leading/trailing dash; max 128 chars
_RESOURCE_NAME = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,126}[a-z0-9])?$")


def validate_resource_name(name: str) -> str:
    """Check a search-service resource name (index, indexer, data source).

    Raises:
        ValueError: If the name breaks the service naming rules.
    """
    if not _RESOURCE_NAME.match(name):
        raise ValueError(
            f"invalid resource name '{name}': use lowercase letters, digits and dashes"
        )
    return name


class IndexField(BaseModel):
    """One field of the index schema and its capabilities."""

    name: str = Field(..., min_length=1)
    key: bool = False
    searchable: bool = False
    filterable: bool = False
    retrievable: bool = True

    model_config = {"frozen": True}

    def to_search_field(self) -> SearchField:
        return SearchField(
            name=self.name,
            type=SearchFieldDataType.String,
            key=self.key,
            searchable=self.searchable,
            filterable=self.filterable,
            hidden=not self.retrievable,
        )


class ScoringProfileSpec(BaseModel):
    """Named per-field text weights used to bias relevance ranking."""

    name: str
    text_weights: dict[str, float]

    model_config = {"frozen": True}

    @field_validator("text_weights")
    @classmethod
    def _weights_positive(cls, value: dict[str, float]) -> dict[str, float]:
        for field_name, weight in value.items():
            if weight <= 0:
                raise ValueError(f"weight for '{field_name}' must be positive, got {weight}")
        return value

    def to_scoring_profile(self) -> ScoringProfile:
        return ScoringProfile(
            name=self.name,
            text_weights=TextWeights(weights=dict(self.text_weights)),
        )


class SuggesterSpec(BaseModel):
    """Autocomplete configuration over an ordered list of source fields."""

    name: str
    source_fields: list[str] = Field(..., min_length=1)

    model_config = {"frozen": True}

    def to_suggester(self) -> SearchSuggester:
        return SearchSuggester(name=self.name, source_fields=list(self.source_fields))


class IndexDefinition(BaseModel):
    """Complete declared state of the search index.

    Validated on construction: exactly one key field, and every field named
    by a scoring profile or suggester must exist in the schema.
    """

    name: str
    fields: list[IndexField]
    scoring_profiles: list[ScoringProfileSpec] = Field(default_factory=list)
    suggesters: list[SuggesterSpec] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _valid_name(cls, value: str) -> str:
        return validate_resource_name(value)

    @model_validator(mode="after")
    def _check_schema(self) -> IndexDefinition:
        keys = [f.name for f in self.fields if f.key]
        if len(keys) != 1:
            raise ValueError(f"index schema must have exactly one key field, found {keys}")

        names = {f.name for f in self.fields}
        for profile in self.scoring_profiles:
            unknown = set(profile.text_weights) - names
            if unknown:
                raise ValueError(
                    f"scoring profile '{profile.name}' weights unknown fields {sorted(unknown)}"
                )
        for suggester in self.suggesters:
            unknown = set(suggester.source_fields) - names
            if unknown:
                raise ValueError(
                    f"suggester '{suggester.name}' uses unknown fields {sorted(unknown)}"
                )
        return self

    def to_search_index(self) -> SearchIndex:
        """Convert to the SDK model sent to the search service."""
        return SearchIndex(
            name=self.name,
            fields=[f.to_search_field() for f in self.fields],
            scoring_profiles=[p.to_scoring_profile() for p in self.scoring_profiles],
            suggesters=[s.to_suggester() for s in self.suggesters],
        )


def build_article_fields() -> list[IndexField]:
    """Return the article document schema: Id (key), Title, Content."""
    return [
        IndexField(name=KEY_FIELD, key=True, retrievable=True),
        IndexField(name=TITLE_FIELD, searchable=True, filterable=True, retrievable=True),
        IndexField(name=CONTENT_FIELD, searchable=True, filterable=True, retrievable=True),
    ]


def build_scoring_profiles() -> list[ScoringProfileSpec]:
    return [
        ScoringProfileSpec(
            name=SCORING_PROFILE_NAME,
            text_weights={TITLE_FIELD: TITLE_WEIGHT, CONTENT_FIELD: CONTENT_WEIGHT},
        )
    ]


def build_suggesters() -> list[SuggesterSpec]:
    return [SuggesterSpec(name=SUGGESTER_NAME, source_fields=[TITLE_FIELD])]


def build_article_index(index_name: str = INDEX_NAME) -> IndexDefinition:
    """Assemble the declared article index with scoring profile and suggester."""
    return IndexDefinition(
        name=index_name,
        fields=build_article_fields(),
        scoring_profiles=build_scoring_profiles(),
        suggesters=build_suggesters(),
    )
