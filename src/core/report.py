from __future__ import annotations

from typing import Mapping

REPORT_HEADER = "Letter Frequency (Descending):"


def render_report(table: Mapping[str, int]) -> str:
    # Equal counts keep whatever order sorted() leaves them in
    lines = [REPORT_HEADER]
    for letter, count in sorted(table.items(), key=lambda kv: kv[1], reverse=True):
        lines.append(f"{letter}: {count}")
    return "\n".join(lines) + "\n"
