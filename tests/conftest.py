"""Shared fixtures: an in-memory stand-in for the Azure AI Search service."""

from __future__ import annotations

from collections import Counter
from typing import Any

import pytest
from azure.core.exceptions import ResourceExistsError, ResourceNotFoundError
from azure.search.documents.indexes.models import (
    SearchIndex,
    SearchIndexer,
    SearchIndexerDataSourceConnection,
)


class FakeSearchService:
    """Implements the subset of SearchIndexClient and SearchIndexerClient used here.

    ``source_documents`` maps a table or container name to the raw rows/blobs
    an indexer pulls from it. ``run_indexer`` applies the indexer's field
    mappings and keeps only schema fields, the way the service does.
    """

    def __init__(self, source_documents: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self.source_documents = source_documents or {}
        self.data_sources: dict[str, SearchIndexerDataSourceConnection] = {}
        self.indexes: dict[str, SearchIndex] = {}
        self.indexers: dict[str, SearchIndexer] = {}
        self.documents: dict[str, dict[str, dict[str, Any]]] = {}
        self.calls: list[tuple[str, str]] = []
        self.call_counts: Counter[str] = Counter()
        self._failures: dict[tuple[str, str | None], Exception] = {}

    def fail(self, method: str, exc: Exception, name: str | None = None) -> None:
        """Make ``method`` raise ``exc`` (for every name, or only ``name``)."""
        self._failures[(method, name)] = exc

    def clear_failures(self) -> None:
        self._failures.clear()

    def _record(self, method: str, name: str) -> None:
        self.calls.append((method, name))
        self.call_counts[method] += 1
        exc = self._failures.get((method, name)) or self._failures.get((method, None))
        if exc is not None:
            raise exc

    # Data sources

    def create_or_update_data_source_connection(
        self, data_source: SearchIndexerDataSourceConnection
    ) -> SearchIndexerDataSourceConnection:
        self._record("create_or_update_data_source_connection", data_source.name)
        self.data_sources[data_source.name] = data_source
        return data_source

    # Indexes

    def get_index(self, name: str) -> SearchIndex:
        self._record("get_index", name)
        if name not in self.indexes:
            raise ResourceNotFoundError(f"index '{name}' not found")
        return self.indexes[name]

    def delete_index(self, name: str) -> None:
        self._record("delete_index", name)
        self.indexes.pop(name, None)
        self.documents.pop(name, None)

    def create_index(self, index: SearchIndex) -> SearchIndex:
        self._record("create_index", index.name)
        if index.name in self.indexes:
            raise ResourceExistsError(f"index '{index.name}' already exists")
        self.indexes[index.name] = index
        self.documents[index.name] = {}
        return index

    # Indexers

    def get_indexer(self, name: str) -> SearchIndexer:
        self._record("get_indexer", name)
        if name not in self.indexers:
            raise ResourceNotFoundError(f"indexer '{name}' not found")
        return self.indexers[name]

    def delete_indexer(self, name: str) -> None:
        self._record("delete_indexer", name)
        self.indexers.pop(name, None)

    def create_indexer(self, indexer: SearchIndexer) -> SearchIndexer:
        self._record("create_indexer", indexer.name)
        if indexer.name in self.indexers:
            raise ResourceExistsError(f"indexer '{indexer.name}' already exists")
        if indexer.data_source_name not in self.data_sources:
            raise ResourceNotFoundError(f"data source '{indexer.data_source_name}' not found")
        if indexer.target_index_name not in self.indexes:
            raise ResourceNotFoundError(f"index '{indexer.target_index_name}' not found")
        self.indexers[indexer.name] = indexer
        return indexer

    def run_indexer(self, name: str) -> None:
        self._record("run_indexer", name)
        indexer = self.indexers[name]
        data_source = self.data_sources[indexer.data_source_name]
        index = self.indexes[indexer.target_index_name]

        schema_fields = {f.name for f in index.fields}
        key_field = next(f.name for f in index.fields if f.key)
        target = self.documents.setdefault(index.name, {})

        for raw in self.source_documents.get(data_source.container.name, []):
            document = dict(raw)
            for mapping in indexer.field_mappings or []:
                if mapping.source_field_name in document:
                    document[mapping.target_field_name] = document.pop(mapping.source_field_name)
            projected = {k: v for k, v in document.items() if k in schema_fields}
            target[str(projected[key_field])] = projected

    # Inspection

    def snapshot(self) -> dict[str, Any]:
        """Comparable view of the configured resources."""
        return {
            "data_sources": {
                name: (ds.type, ds.container.name) for name, ds in self.data_sources.items()
            },
            "indexes": {
                name: {
                    "fields": [
                        (f.name, f.key, f.searchable, f.filterable, f.hidden) for f in idx.fields
                    ],
                    "scoring_profiles": [
                        (p.name, dict(p.text_weights.weights)) for p in idx.scoring_profiles or []
                    ],
                    "suggesters": [(s.name, list(s.source_fields)) for s in idx.suggesters or []],
                }
                for name, idx in self.indexes.items()
            },
            "indexers": {
                name: (
                    ix.data_source_name,
                    ix.target_index_name,
                    ix.schedule.interval,
                    [(m.source_field_name, m.target_field_name) for m in ix.field_mappings or []],
                )
                for name, ix in self.indexers.items()
            },
        }


@pytest.fixture
def fake_service() -> FakeSearchService:
    return FakeSearchService(
        source_documents={
            "Article": [
                {"Id": "r1", "Title": "Relational title", "Content": "Row body"},
            ],
            "articles": [
                {"Id": "b1", "title": "Blob title", "content": "Blob body"},
            ],
        }
    )
