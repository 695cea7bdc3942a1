"""Letter frequency analysis over downloaded repository files.

Files are downloaded one at a time, in the order given, and every ASCII
letter is folded case-insensitively into one shared table. Download
failures are not caught here: they abort the analysis.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from core.interfaces import RepositoryContents
from core.models import LetterFrequencyTable

logger = logging.getLogger(__name__)

_NON_LETTERS_RE = re.compile(r"[^a-zA-Z]")


def normalize_letters(text: str) -> str:
    """Strip everything except ASCII letters and lowercase the rest."""
    return _NON_LETTERS_RE.sub("", text or "").lower()


def fold_letters(table: LetterFrequencyTable, text: str) -> LetterFrequencyTable:
    for letter in normalize_letters(text):
        table[letter] = table.get(letter, 0) + 1
    return table


async def analyze(contents: RepositoryContents, file_urls: Iterable[str]) -> LetterFrequencyTable:
    table: LetterFrequencyTable = {}

    for url in file_urls:
        text = await contents.read_text(url)
        fold_letters(table, text)
        logger.debug("Counted %s (%d letters so far)", url, sum(table.values()))

    return table
