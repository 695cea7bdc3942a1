"""MCP tool that lists matching files of the configured repository.

Registers the 'list_matching_files' tool which walks the repository
with a RepositoryScanner and returns raw-content URLs.
"""

from __future__ import annotations

from typing import List

from mcp.server.fastmcp import FastMCP

from clients.github_client import GitHubClient
from core.paths import ensure_repo_relative
from sources.github_source import RepositoryScanner


def register(mcp: FastMCP, *, github_client: GitHubClient) -> None:
    @mcp.tool(name="list_matching_files")
    async def list_matching_files(path: str = "") -> List[str]:
        """List raw-content URLs of files matching the target extensions.

        Walks the configured repository depth-first starting at `path`.

        Params:
          - path: directory inside the repository to start from (default: root).

        Returns:
          Download URLs in traversal order. Directories that fail to list
          are logged and contribute no files.

        Raises:
          ValidationError for a path that escapes the repository.
        """
        scanner = RepositoryScanner(
            contents=github_client,
            target_extensions=github_client.settings.target_extensions,
        )
        return await scanner.list_matching_files(ensure_repo_relative(path))
