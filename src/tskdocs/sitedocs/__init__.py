"""Remote site documentation - cache and search."""

from tskdocs.sitedocs.cache import SiteDocCache, error_content, is_error_content
from tskdocs.sitedocs.search import SearchWindow, search_lines

__all__ = [
    "SearchWindow",
    "SiteDocCache",
    "error_content",
    "is_error_content",
    "search_lines",
]
