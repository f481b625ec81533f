"""Provisioning and query services for the article search index."""

from src.services.data_sources import DataSourceRegistrar
from src.services.index_manager import IndexManager
from src.services.indexer_manager import IndexerManager
from src.services.provisioning import ProvisioningOrchestrator
from src.services.search import ArticleSearchService

__all__ = [
    "ArticleSearchService",
    "DataSourceRegistrar",
    "IndexManager",
    "IndexerManager",
    "ProvisioningOrchestrator",
]
