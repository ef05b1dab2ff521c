"""Command-line front end.

Loads a catalog, applies filters given as flags, prints the page.

Usage:
    catalogfilter catalog.json --service OrderService --search created
    catalogfilter catalog.json --domain Orders --format json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from catalogfilter import __version__
from catalogfilter.application.loader import load_catalog
from catalogfilter.application.page import CatalogPage
from catalogfilter.application.reporters import ConsoleReporter, JSONReporter
from catalogfilter.config import CatalogConfig
from catalogfilter.domain.exceptions import CatalogFilterError
from catalogfilter.domain.model.actions import (
    SetDiagramsVisible,
    SetSearchText,
    ToggleDomain,
    ToggleService,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogfilter.application.reporters import BaseReporter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="catalogfilter",
        description="Filter catalog events by service, domain and name",
    )
    parser.add_argument("catalog", type=Path, help="Catalog JSON file")
    parser.add_argument(
        "--service",
        action="append",
        default=[],
        metavar="NAME",
        help="Keep events produced or consumed by NAME (repeatable, OR)",
    )
    parser.add_argument(
        "--domain",
        action="append",
        default=[],
        metavar="NAME",
        help="Keep events in domain NAME (repeatable, OR)",
    )
    parser.add_argument("--search", default="", metavar="TEXT", help="Case-insensitive name substring")
    parser.add_argument("--diagrams", action="store_true", help="Show Mermaid diagrams")
    parser.add_argument("--format", choices=("console", "json"), default="console", help="Output format")
    parser.add_argument("--title", default=None, help="Catalog title")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI styles")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI.

    Returns:
        EXIT_OK on success (empty result included), EXIT_ERROR on load failure.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = CatalogConfig(title=args.title) if args.title else CatalogConfig()

    try:
        catalog = load_catalog(args.catalog)
    except CatalogFilterError as exc:
        logger.debug("catalog load failed", exc_info=True)
        print(f"catalogfilter: {exc}", file=sys.stderr)
        return EXIT_ERROR

    page = CatalogPage(catalog, config)
    for service in args.service:
        page.dispatch(ToggleService(service, checked=True))
    for domain in args.domain:
        page.dispatch(ToggleDomain(domain, checked=True))
    if args.search:
        page.dispatch(SetSearchText(args.search))
    if args.diagrams:
        page.dispatch(SetDiagramsVisible(visible=True))

    reporter: BaseReporter
    if args.format == "json":
        reporter = JSONReporter()
    else:
        reporter = ConsoleReporter(color=not args.no_color)

    sys.stdout.write(reporter.report(page))
    if args.format == "json":
        sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
