"""Server bootstrap for the letter frequency MCP service.

Creates the FastMCP instance, loads repository settings, wires a single
GitHub client into the tools and starts the MCP server (stdio transport).
"""

from mcp.server.fastmcp import FastMCP

from clients.github_client import GitHubClient
from config import load_settings

from tools.list_files import register as register_list_files
from tools.letter_frequency import register as register_letter_frequency

mcp = FastMCP("letter-frequency-mcp")


def register_tools() -> None:
    github_client = GitHubClient(load_settings())

    register_list_files(mcp, github_client=github_client)
    register_letter_frequency(mcp, github_client=github_client)


register_tools()


def main() -> None:
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
