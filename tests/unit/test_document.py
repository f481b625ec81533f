"""Unit tests for result records and the error taxonomy."""

from __future__ import annotations

import pytest
from azure.core.exceptions import HttpResponseError

from src.models.document import ResultRecord, SearchResultSet
from src.models.errors import (
    DataSourceProvisionError,
    IndexerProvisionError,
    MissingFieldError,
    Origin,
    ProvisionError,
)


class TestResultRecord:
    """Tests for projecting search hits into ResultRecord."""

    def test_from_document(self) -> None:
        record = ResultRecord.from_document(
            {"Id": "1", "Title": "Cats", "Content": "Meow", "@search.score": 1.5}
        )
        assert record == ResultRecord(id="1", title="Cats", content="Meow")

    def test_non_string_values_are_stringified(self) -> None:
        record = ResultRecord.from_document({"Id": 17, "Title": "Cats", "Content": "Meow"})
        assert record.id == "17"

    @pytest.mark.parametrize("missing", ["Id", "Title", "Content"])
    def test_missing_field_raises(self, missing: str) -> None:
        document = {"Id": "1", "Title": "Cats", "Content": "Meow"}
        del document[missing]

        with pytest.raises(MissingFieldError) as excinfo:
            ResultRecord.from_document(document)

        assert excinfo.value.field == missing
        assert missing not in excinfo.value.document_keys

    def test_field_lookup_is_case_sensitive(self) -> None:
        with pytest.raises(MissingFieldError):
            ResultRecord.from_document({"Id": "1", "title": "Cats", "Content": "Meow"})

    @pytest.mark.parametrize("field", ["Id", "Title", "Content"])
    def test_null_field_raises(self, field: str) -> None:
        document = {"Id": "b1", "Title": "Blob title", "Content": "Blob body"}
        document[field] = None

        with pytest.raises(MissingFieldError) as excinfo:
            ResultRecord.from_document(document)

        assert excinfo.value.field == field

    def test_empty_content_is_kept(self) -> None:
        record = ResultRecord.from_document({"Id": "1", "Title": "Cats", "Content": ""})
        assert record.content == ""

    def test_result_set_defaults(self) -> None:
        result_set = SearchResultSet()
        assert result_set.records == []
        assert result_set.total_count is None


class TestProvisionErrors:
    """Tests for the provisioning error types."""

    def test_cause_is_wrapped(self) -> None:
        cause = HttpResponseError(message="forbidden")
        error = DataSourceProvisionError(Origin.RELATIONAL, cause)

        assert isinstance(error, ProvisionError)
        assert error.cause is cause
        assert error.origin is Origin.RELATIONAL
        assert str(error) == "failed to register relational data source: forbidden"

    def test_without_cause(self) -> None:
        error = IndexerProvisionError(Origin.BLOB)
        assert error.cause is None
        assert str(error) == "failed to create and run blob indexer"
