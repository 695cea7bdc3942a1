"""MCP tool that reports letter frequencies for the configured repository.

Registers the 'letter_frequency' tool: list matching files under a path,
download them and return the rendered descending report.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from clients.github_client import GitHubClient
from core.paths import ensure_repo_relative
from runner import scan_and_report


def register(mcp: FastMCP, *, github_client: GitHubClient) -> None:
    @mcp.tool(name="letter_frequency")
    async def letter_frequency(path: str = "") -> str:
        """Count letters across matching files and return the report.

        Params:
          - path: directory inside the repository to start from (default: root).

        Returns:
          "Letter Frequency (Descending):" followed by one "letter: count"
          line per letter found.

        Raises:
          ValidationError for a path that escapes the repository;
          TransportError if any file download fails.
        """
        return await scan_and_report(
            github_client,
            github_client.settings.target_extensions,
            path=ensure_repo_relative(path),
        )
