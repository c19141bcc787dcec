"""Error taxonomy for grid construction and search requests."""

from __future__ import annotations


class GridError(ValueError):
    """Base class for requests rejected before any search work."""


class InvalidGrid(GridError):
    """Malformed dimensions or obstacle coordinates."""


class InvalidEndpoints(GridError):
    """Start/end equal, out of bounds, or placed on an obstacle."""


class SearchAborted(RuntimeError):
    """Raised at the flat-integer boundary when a search hits its step cap."""

    def __init__(self, expanded: int) -> None:
        super().__init__(f"Search aborted after {expanded} expansions.")
        self.expanded = expanded
