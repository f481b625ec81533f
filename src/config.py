"""Environment-based configuration loader using pydantic BaseSettings."""

from __future__ import annotations

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Search service credentials and the connection strings of the two
    indexed origins (SQL table and blob container) are loaded from
    environment variables (or a .env file) and validated at startup.
    """

    # Azure AI Search
    azure_search_endpoint: str = ""
    azure_search_service_name: str = ""  # Alternative to the endpoint
    azure_search_api_key: str = ""  # Optional, DefaultAzureCredential is used when empty
    azure_search_index_name: str = "index"

    # Relational origin
    db_connection_string: str = ""
    db_table_name: str = "Article"

    # Blob origin
    blob_connection_string: str = ""
    blob_container_name: str = "articles"

    # Application
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @model_validator(mode="after")
    def _resolve_endpoint(self) -> Settings:
        if not self.azure_search_endpoint:
            if not self.azure_search_service_name:
                raise ValueError(
                    "either AZURE_SEARCH_ENDPOINT or AZURE_SEARCH_SERVICE_NAME must be set"
                )
            self.azure_search_endpoint = (
                f"https://{self.azure_search_service_name}.search.windows.net"
            )
        return self


def get_settings() -> Settings:
    """Create and return a validated Settings instance."""
    return Settings()
