from __future__ import annotations

import logging
from typing import Iterable, List

from core.errors import DecodeError, TransportError
from core.interfaces import RepositoryContents
from core.paths import has_target_extension, normalize_posix_relpath


"""Repository scanner backed by the contents API.

- Walks the tree depth-first, one listing request per directory.
- A directory that fails to list or decode contributes no files; the
  rest of the walk carries on.
"""

logger = logging.getLogger(__name__)


class RepositoryScanner:
    def __init__(self, *, contents: RepositoryContents, target_extensions: Iterable[str]) -> None:
        self._contents = contents
        self._extensions = tuple(target_extensions)

    async def list_matching_files(self, path: str = "") -> List[str]:
        """Return raw-content URLs of matching files under `path`, depth-first."""
        return await self._walk(normalize_posix_relpath(path))

    async def _walk(self, path: str) -> List[str]:
        # `path` is used verbatim; nested paths come straight from the API
        file_urls: List[str] = []

        try:
            entries = await self._contents.list_directory(path)

            for entry in entries:
                if entry.kind == "file" and has_target_extension(entry.name, self._extensions):
                    # Files without a download URL (e.g. too large) are skipped
                    if entry.raw_content_url is not None:
                        file_urls.append(entry.raw_content_url)
                elif entry.kind == "dir":
                    file_urls.extend(await self._walk(entry.path))
        except TransportError as e:
            logger.error("Request error: %s", e)
        except DecodeError as e:
            logger.error("JSON error: %s", e)

        return file_urls
