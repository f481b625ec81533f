"""Azure AI Search query service for provisioned article indexes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from azure.search.documents import SearchClient

from src.models.document import ResultRecord, SearchResultSet, Suggestion
from src.models.schema import KEY_FIELD, SCORING_PROFILE_NAME, SUGGESTER_NAME

logger = logging.getLogger(__name__)


def _suggestion_text(result: Mapping[str, Any]) -> str:
    # 11.x returns the generated model as_dict() ("text"); 12.x keeps "@search.text"
    if "@search.text" in result:
        return str(result["@search.text"])
    return str(result["text"])


class ArticleSearchService:
    """Full-text search over the article index.

    Queries use the full Lucene syntax (boolean and field-scoped operators)
    and are ranked with the provisioned scoring profile. Reads have no side
    effects, so one instance may serve concurrent callers.
    """

    def __init__(
        self,
        endpoint: str,
        index_name: str,
        credential: Any,
    ) -> None:
        self._client = SearchClient(
            endpoint=endpoint,
            index_name=index_name,
            credential=credential,
        )

    def search(self, query_text: str) -> list[ResultRecord]:
        """Search the index and return records in relevance order.

        Args:
            query_text: Query in full Lucene syntax.

        Returns:
            ResultRecord per hit, in the order the service ranked them.

        Raises:
            MissingFieldError: If a hit lacks Id, Title or Content.
        """
        return self.search_result_set(query_text).records

    def search_result_set(self, query_text: str) -> SearchResultSet:
        """Search and also return the service's total match estimate."""
        logger.info("Searching articles", extra={"query_length": len(query_text)})

        results = self._client.search(
            search_text=query_text,
            include_total_count=True,
            scoring_profile=SCORING_PROFILE_NAME,
            query_type="full",
        )

        # A hit without a schema field is not skipped: the index has drifted.
        records = [ResultRecord.from_document(result) for result in results]
        total_count = results.get_count()

        logger.info(
            "Search complete",
            extra={"result_count": len(records), "total_count": total_count},
        )
        return SearchResultSet(records=records, total_count=total_count)

    def suggest(self, partial_text: str, top: int = 5) -> list[Suggestion]:
        """Return type-ahead suggestions from the title suggester.

        Args:
            partial_text: Text typed so far (at least one character).
            top: Maximum number of suggestions.
        """
        if not partial_text:
            return []

        results = self._client.suggest(
            search_text=partial_text,
            suggester_name=SUGGESTER_NAME,
            top=top,
            select=[KEY_FIELD],
        )
        return [
            Suggestion(id=str(result[KEY_FIELD]), text=_suggestion_text(result))
            for result in results
        ]
