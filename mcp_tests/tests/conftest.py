import pytest

from core.models import RepositorySettings


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def settings():
    return RepositorySettings(
        api_base="https://api.example.com/repos",
        owner="octocat",
        repo="Hello-World",
        target_extensions=(".js", ".ts"),
        user_agent="letterfreq-tests",
    )
