"""Construction of Azure AI Search clients from settings."""

from __future__ import annotations

from typing import Any

from azure.core.credentials import AzureKeyCredential
from azure.identity import DefaultAzureCredential
from azure.search.documents.indexes import SearchIndexClient, SearchIndexerClient

from src.config import Settings
from src.services.search import ArticleSearchService


def get_search_credential(settings: Settings) -> Any:
    """Use the admin/query API key when configured, otherwise Entra ID."""
    if settings.azure_search_api_key:
        return AzureKeyCredential(settings.azure_search_api_key)
    return DefaultAzureCredential()


def create_index_client(settings: Settings) -> SearchIndexClient:
    return SearchIndexClient(
        endpoint=settings.azure_search_endpoint,
        credential=get_search_credential(settings),
    )


def create_indexer_client(settings: Settings) -> SearchIndexerClient:
    return SearchIndexerClient(
        endpoint=settings.azure_search_endpoint,
        credential=get_search_credential(settings),
    )


def create_search_service(settings: Settings) -> ArticleSearchService:
    return ArticleSearchService(
        endpoint=settings.azure_search_endpoint,
        index_name=settings.azure_search_index_name,
        credential=get_search_credential(settings),
    )
