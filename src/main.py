"""Command-line entry point: provision the search service or query it.

Usage:
    article-search provision
    article-search query "cats AND Title:meow"
    article-search suggest "ca"
"""

from __future__ import annotations

import argparse
import sys

from src.config import Settings, get_settings
from src.logging_config import setup_logging
from src.services.clients import (
    create_index_client,
    create_indexer_client,
    create_search_service,
)
from src.services.provisioning import ProvisioningOrchestrator


def provision(settings: Settings) -> int:
    """Run the orchestrator once and print a single status line."""
    print("Creating files search...")
    orchestrator = ProvisioningOrchestrator.from_settings(
        settings,
        index_client=create_index_client(settings),
        indexer_client=create_indexer_client(settings),
    )
    result = orchestrator.run()

    if result.succeeded:
        print("Service is ready to use")
        return 0

    print("Service isn't ready to use")
    return 1


def query(settings: Settings, text: str) -> int:
    """Search and print each hit as an upper-cased title followed by its content."""
    service = create_search_service(settings)
    for record in service.search(text):
        print(record.title.upper())
        print()
        print(record.content)
    return 0


def suggest(settings: Settings, text: str, top: int) -> int:
    service = create_search_service(settings)
    for suggestion in service.suggest(text, top=top):
        print(suggestion.text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="article-search",
        description="Provision and query the article search index",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("provision", help="Create data sources, index and indexers")

    query_parser = commands.add_parser("query", help="Run a full-text query")
    query_parser.add_argument("text", help="Query in full Lucene syntax")

    suggest_parser = commands.add_parser("suggest", help="Autocomplete article titles")
    suggest_parser.add_argument("text", help="Partial title")
    suggest_parser.add_argument("--top", type=int, default=5, help="Maximum suggestions")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    if args.command == "provision":
        return provision(settings)
    if args.command == "query":
        return query(settings, args.text)
    return suggest(settings, args.text, args.top)


if __name__ == "__main__":
    sys.exit(main())
