import pytest

from core.errors import ValidationError
from core.models import RepositoryEntry
from tools import list_files as list_files_tool


class FakeGitHubClient:
    def __init__(self, settings, tree):
        self.settings = settings
        self._tree = tree
        self.calls = []

    async def list_directory(self, path: str = ""):
        self.calls.append(path)
        return list(self._tree.get(path, []))

    async def read_text(self, url: str):
        raise AssertionError("listing must not download files")


@pytest.mark.asyncio
async def test_list_matching_files_tool_walks_from_path(dummy_mcp, settings):
    fake = FakeGitHubClient(settings, {
        "lib": [
            RepositoryEntry(name="util.js", path="lib/util.js", kind="file", raw_content_url="raw://lib/util.js"),
            RepositoryEntry(name="notes.md", path="lib/notes.md", kind="file", raw_content_url="raw://lib/notes.md"),
        ],
    })
    list_files_tool.register(dummy_mcp, github_client=fake)
    fn = dummy_mcp.tools["list_matching_files"]

    out = await fn(path="/lib/")

    assert out == ["raw://lib/util.js"]
    assert fake.calls == ["lib"]


@pytest.mark.asyncio
async def test_list_matching_files_tool_rejects_parent_segments(dummy_mcp, settings):
    fake = FakeGitHubClient(settings, {})
    list_files_tool.register(dummy_mcp, github_client=fake)
    fn = dummy_mcp.tools["list_matching_files"]

    with pytest.raises(ValidationError):
        await fn(path="../secrets")
    assert fake.calls == []
