"""Reference lookups and markdown rendering."""

from tskdocs.lookup.ops import LookupOps

__all__ = ["LookupOps"]
