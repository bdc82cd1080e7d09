#!/usr/bin/env python3
"""
Command-line entry point: print example responses for the resource-tagged
routes of a FastAPI app.
"""

import argparse
import importlib
import json
import logging
import sys
from typing import Any, List, Optional

from apidoc.config.settings import ExtractionProfile, Settings
from apidoc.extracting.services.example_response_collector import ExampleResponseCollector
from apidoc.extracting.services.strategy_builder import build_resource_tags_strategy
from apidoc.infrastructure.persistence.database import create_session_factory
from apidoc.registry.services.factory_registry import FactoryRegistry
from apidoc.registry.services.type_registry import TypeRegistry


def load_object(reference: str) -> Any:
    """Import `package.module:attribute`."""
    module_name, _, attribute = reference.partition(":")
    if not module_name or not attribute:
        raise ValueError(f"Expected 'module:attribute', got {reference!r}")
    return getattr(importlib.import_module(module_name), attribute)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="apidoc-examples",
        description="Generate example responses from @resource docstring tags",
        epilog="Example:\n"
        "  apidoc-examples app.main:app --bootstrap app.docs:register_samples --verbose",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("app", help="FastAPI application as module:attribute")
    p.add_argument(
        "--bootstrap",
        required=True,
        help="callable as module:attribute, called with (types, factories) to register models and resources",
    )
    p.add_argument("--database-url", help="SQLAlchemy URL (default: DATABASE_URL setting)")
    p.add_argument("--verbose", action="store_true", default=None, help="show full exception details")
    p.add_argument(
        "--use-transactions",
        action="store_true",
        default=None,
        help="persist factory samples inside a transaction that is rolled back",
    )
    p.add_argument("--output", help="write JSON to this file instead of stdout")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    profile = ExtractionProfile(
        use_transactions=settings.APIDOC_USE_TRANSACTIONS if args.use_transactions is None else True,
        verbose=settings.APIDOC_VERBOSE if args.verbose is None else True,
    )
    logging.basicConfig(
        level=logging.INFO if profile.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    types = TypeRegistry()
    factories = FactoryRegistry()
    load_object(args.bootstrap)(types, factories)

    _, session_factory = create_session_factory(args.database_url or settings.DATABASE_URL)
    strategy = build_resource_tags_strategy(types, factories, session_factory, profile)
    examples = ExampleResponseCollector(strategy).collect(load_object(args.app))

    rendered = json.dumps(examples, indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(rendered + "\n")
    else:
        sys.stdout.write(rendered + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
