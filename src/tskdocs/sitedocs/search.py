"""Line-window text search over cached doc content."""

from __future__ import annotations

from dataclasses import dataclass

from tskdocs.config.constants import SEARCH_CONTEXT_LINES


@dataclass(frozen=True, slots=True)
class SearchWindow:
    """Lines surrounding one matching line.

    ``start`` and ``end`` are 1-based and inclusive.
    """

    start: int
    end: int
    lines: tuple[str, ...]

    def render(self) -> str:
        body = "\n".join(self.lines)
        return f"...line {self.start}-{self.end}:\n{body}\n..."


def search_lines(
    content: str,
    term: str,
    context: int = SEARCH_CONTEXT_LINES,
) -> list[SearchWindow]:
    """One window per line containing ``term`` (case-insensitive).

    Windows are clipped at the document edges and never merged, so nearby
    matches produce overlapping windows.
    """
    needle = term.lower()
    lines = content.split("\n")
    windows: list[SearchWindow] = []
    for index, line in enumerate(lines):
        if needle not in line.lower():
            continue
        start = max(0, index - context)
        end = min(len(lines), index + context + 1)
        windows.append(SearchWindow(start=start + 1, end=end, lines=tuple(lines[start:end])))
    return windows
