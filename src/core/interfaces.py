"""Core protocol and interface definitions.

Defines the RepositoryContents protocol used by the scanner and the
analysis step, so both can run against the HTTP client or a fake.
"""

from __future__ import annotations

from typing import List, Protocol

from core.models import RepositoryEntry


class RepositoryContents(Protocol):
    """Contract for anything that can list directories and read files."""
    async def list_directory(self, path: str = "") -> List[RepositoryEntry]:
        ...

    async def read_text(self, url: str) -> str:
        ...
