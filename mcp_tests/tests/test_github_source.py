import logging

import pytest

from core.errors import DecodeError, TransportError
from core.models import RepositoryEntry
from sources.github_source import RepositoryScanner


def f(path: str, url: str = None) -> RepositoryEntry:
    name = path.rsplit("/", 1)[-1]
    return RepositoryEntry(name=name, path=path, kind="file", raw_content_url=url or f"raw://{path}")


def d(path: str) -> RepositoryEntry:
    return RepositoryEntry(name=path.rsplit("/", 1)[-1], path=path, kind="dir")


class FakeContents:
    """Directory path -> list of entries, or an exception to raise."""

    def __init__(self, tree):
        self._tree = tree
        self.calls = []

    async def list_directory(self, path: str = ""):
        self.calls.append(path)
        node = self._tree[path]
        if isinstance(node, Exception):
            raise node
        return list(node)

    async def read_text(self, url: str):
        raise AssertionError("listing must not download files")


@pytest.mark.asyncio
async def test_list_matching_files_depth_first_in_api_order():
    fake = FakeContents({
        "": [f("a.js"), d("src"), f("z.ts"), d("docs")],
        "src": [f("src/b.ts"), d("src/inner"), f("src/c.js")],
        "src/inner": [f("src/inner/d.js")],
        "docs": [f("docs/e.js")],
    })
    scanner = RepositoryScanner(contents=fake, target_extensions=(".js", ".ts"))

    out = await scanner.list_matching_files()

    assert out == [
        "raw://a.js",
        "raw://src/b.ts",
        "raw://src/inner/d.js",
        "raw://src/c.js",
        "raw://z.ts",
        "raw://docs/e.js",
    ]
    assert fake.calls == ["", "src", "src/inner", "docs"]


@pytest.mark.asyncio
async def test_list_matching_files_filters_by_extension_and_download_url():
    fake = FakeContents({
        "": [
            f("index.ts"),
            f("readme.md"),
            f("index.tsx"),
            f("UPPER.JS"),
            RepositoryEntry(name="big.js", path="big.js", kind="file", raw_content_url=None),
            RepositoryEntry(name="link.js", path="link.js", kind=None, raw_content_url="raw://link.js"),
        ],
    })
    scanner = RepositoryScanner(contents=fake, target_extensions=(".js", ".ts"))

    assert await scanner.list_matching_files() == ["raw://index.ts"]


@pytest.mark.asyncio
async def test_list_matching_files_failing_subdirectory_is_isolated(caplog):
    fake = FakeContents({
        "": [f("a.js"), d("broken"), d("bad-json"), f("b.js"), d("ok")],
        "broken": TransportError("500 Internal Server Error"),
        "bad-json": DecodeError("not an array"),
        "ok": [f("ok/c.ts")],
    })
    scanner = RepositoryScanner(contents=fake, target_extensions=(".js", ".ts"))

    with caplog.at_level(logging.ERROR):
        out = await scanner.list_matching_files()

    assert out == ["raw://a.js", "raw://b.js", "raw://ok/c.ts"]
    messages = [r.getMessage() for r in caplog.records]
    assert "Request error: 500 Internal Server Error" in messages
    assert "JSON error: not an array" in messages


@pytest.mark.asyncio
async def test_list_matching_files_root_failure_returns_empty():
    fake = FakeContents({"": TransportError("connection refused")})
    scanner = RepositoryScanner(contents=fake, target_extensions=(".js",))

    assert await scanner.list_matching_files() == []


@pytest.mark.asyncio
async def test_list_matching_files_starts_at_normalized_path():
    fake = FakeContents({"lib": [f("lib/util.js")]})
    scanner = RepositoryScanner(contents=fake, target_extensions=(".js",))

    assert await scanner.list_matching_files("./lib/") == ["raw://lib/util.js"]
    assert fake.calls == ["lib"]


@pytest.mark.asyncio
async def test_list_matching_files_recurses_with_api_paths_verbatim():
    fake = FakeContents({
        "": [d(" docs"), d("a\\b")],
        " docs": [f(" docs/x.js")],
        "a\\b": [f("a\\b/y.ts")],
    })
    scanner = RepositoryScanner(contents=fake, target_extensions=(".js", ".ts"))

    out = await scanner.list_matching_files()

    assert out == ["raw:// docs/x.js", "raw://a\\b/y.ts"]
    assert fake.calls == ["", " docs", "a\\b"]
