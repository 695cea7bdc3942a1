"""Command-line entry point: scan a repository and print letter frequencies.

Loads settings, lists matching files, analyzes them and writes the
report to stdout. Logs go to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Tuple

from analysis.letter_frequency import analyze
from clients.github_client import GitHubClient
from config import load_settings, log_level
from core.errors import ConfigurationError, TransportError
from core.interfaces import RepositoryContents
from core.models import RepositorySettings
from core.report import render_report
from sources.github_source import RepositoryScanner

logger = logging.getLogger(__name__)


async def scan_and_report(
    contents: RepositoryContents,
    target_extensions: Tuple[str, ...],
    *,
    path: str = "",
) -> str:
    """List from `path`, analyze and render. Analysis failures propagate."""
    scanner = RepositoryScanner(contents=contents, target_extensions=target_extensions)

    logger.info("Fetching repository files...")
    file_urls = await scanner.list_matching_files(path)

    logger.info("Found %d JavaScript/TypeScript files.", len(file_urls))
    table = await analyze(contents, file_urls)

    return render_report(table)


async def run(settings: RepositorySettings, *, client: Optional[RepositoryContents] = None) -> str:
    if client is not None:
        return await scan_and_report(client, settings.target_extensions)

    async with GitHubClient(settings) as gh:
        return await scan_and_report(gh, settings.target_extensions)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="letterfreq",
        description="Letter frequency of JavaScript/TypeScript files in a GitHub repository.",
    )
    parser.add_argument("--settings", default=None, help="Path to the JSON settings file.")
    parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)
    return parser.parse_args(argv)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    try:
        _configure_logging(log_level())
        settings = load_settings(args.settings)
    except ConfigurationError as e:
        # No-op when logging is already configured
        _configure_logging("INFO")
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        report = asyncio.run(run(settings))
    except TransportError as e:
        logger.error("Analysis failed: %s", e)
        return 1

    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
