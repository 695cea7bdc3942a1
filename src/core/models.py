"""Immutable dataclasses for settings and listing entries.

Includes the repository settings value shared by the listing and
analysis operations (RepositorySettings) and the decoded form of one
item of a contents listing (RepositoryEntry).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Tuple
from urllib.parse import quote

from core.errors import DecodeError


EntryKind = Literal["file", "dir"]

# Letter -> count. Keys are single lowercase ASCII letters.
LetterFrequencyTable = Dict[str, int]

_KNOWN_KINDS = ("file", "dir")


@dataclass(frozen=True)
class RepositorySettings:
    """Where to scan and what to collect.

    Field groups:
    - Location: api_base, owner, repo
    - Filtering: target_extensions
    - Identification: user_agent (sent on every request)
    """

    api_base: str
    owner: str
    repo: str
    target_extensions: Tuple[str, ...]
    user_agent: str

    def contents_url(self, path: str = "") -> str:
        # `path` is repo-relative as the API reports it; each segment is percent-encoded
        base = self.api_base.rstrip("/")
        encoded = quote(path, safe="/")
        return f"{base}/{self.owner}/{self.repo}/contents/{encoded}"


@dataclass(frozen=True)
class RepositoryEntry:
    """One item of a contents listing.

    `kind` is None for types other than "file" and "dir" (submodules,
    symlinks); those entries are ignored by the scanner.
    """

    name: str
    path: str
    kind: Optional[EntryKind]
    raw_content_url: Optional[str] = None

    @classmethod
    def from_api(cls, item: Any) -> "RepositoryEntry":
        if not isinstance(item, dict):
            raise DecodeError(f"Expected a listing object, got {type(item).__name__}")

        name = item.get("name")
        path = item.get("path")
        kind = item.get("type")
        if not isinstance(name, str) or not isinstance(path, str) or not isinstance(kind, str):
            raise DecodeError("Listing entry is missing 'name', 'path' or 'type'")

        url = item.get("download_url")
        return cls(
            name=name,
            path=path,
            kind=kind if kind in _KNOWN_KINDS else None,
            raw_content_url=url if isinstance(url, str) and url else None,
        )
