from __future__ import annotations

from typing import Iterable

from core.errors import ValidationError

"""
Path utilities used across the project.

Provides POSIX-style normalization for repository paths and the
extension check used when classifying listing entries.
"""


def normalize_posix_relpath(p: str) -> str:
    """Normalize a user path to a clean POSIX relative path.

    Converts backslashes to '/', trims whitespace, removes leading '/'
    and repeated './' markers. The repository root is returned as ''.
    """
    s = (p or "").strip()
    s = s.replace("\\", "/")        # Unify path separators across OSes.
    s = s.lstrip("/")               # Contents paths are always repo-relative.
    while s.startswith("./"):       # Drop repeated "./" prefixes.
        s = s[2:]
    if s == ".":
        return ""
    return s.rstrip("/")


def has_target_extension(name: str, extensions: Iterable[str]) -> bool:
    """Return True if `name` ends with any of `extensions` (case-sensitive)."""
    return any(name.endswith(ext) for ext in extensions)


def ensure_repo_relative(p: str) -> str:
    """Normalize `p` and reject '..' segments that would leave the repository."""
    s = normalize_posix_relpath(p)
    if ".." in s.split("/"):
        raise ValidationError("path must stay inside the repository")
    return s
