"""Grid model and A* search engine."""

from gridstar.core.boundary import astar, decode_obstacles, encode_path
from gridstar.core.config import EngineConfig, load_engine_config
from gridstar.core.contracts import SearchRequest, SearchResponse, SearchStatus
from gridstar.core.errors import (
    GridError,
    InvalidEndpoints,
    InvalidGrid,
    SearchAborted,
)
from gridstar.core.grid import Coordinate, Grid, validate_endpoints
from gridstar.core.grid_loader import (
    GridDocument,
    document_from_request,
    load_ascii_map,
    load_request,
    parse_ascii_map,
)
from gridstar.core.pathfinding import (
    Aborted,
    PathFinder,
    PathFound,
    SearchOutcome,
    Unreachable,
    find_path,
)

__all__ = [
    "Aborted",
    "Coordinate",
    "EngineConfig",
    "Grid",
    "GridDocument",
    "GridError",
    "InvalidEndpoints",
    "InvalidGrid",
    "PathFinder",
    "PathFound",
    "SearchAborted",
    "SearchOutcome",
    "SearchRequest",
    "SearchResponse",
    "SearchStatus",
    "Unreachable",
    "astar",
    "decode_obstacles",
    "document_from_request",
    "encode_path",
    "find_path",
    "load_ascii_map",
    "load_engine_config",
    "load_request",
    "parse_ascii_map",
    "validate_endpoints",
]
