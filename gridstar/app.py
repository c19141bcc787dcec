"""Application entry for solving grid files."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from gridstar.core.config import EngineConfig, coerce_max_steps, load_engine_config
from gridstar.core.contracts import SearchRequest, SearchResponse
from gridstar.core.grid_loader import (
    GridDocument,
    document_from_request,
    load_ascii_map,
    load_request,
)
from gridstar.core.pathfinding import SearchOutcome, find_path
from gridstar.infra.logger import get_logger

log = get_logger(__name__)


def resolve_engine_config(
    config_path: Path | None = None,
    *,
    diagonal: bool | None = None,
    max_steps: int | None = None,
) -> EngineConfig:
    config = load_engine_config(config_path)
    if diagonal is not None:
        config = replace(config, diagonal=diagonal)
    if max_steps is not None:
        config = replace(
            config, max_steps=coerce_max_steps(max_steps, "--max-steps")
        )
    return config


def load_document(
    *,
    map_path: Path | None = None,
    request_path: Path | None = None,
    config: EngineConfig | None = None,
) -> GridDocument:
    config = config or EngineConfig()
    if map_path is not None:
        return load_ascii_map(map_path, diagonal=config.diagonal)
    if request_path is not None:
        request = load_request(request_path)
        if config.diagonal and not request.diagonal:
            request = request.model_copy(update={"diagonal": True})
        return document_from_request(request)
    raise ValueError("Either a map path or a request path is required.")


def solve_document(
    document: GridDocument, config: EngineConfig | None = None
) -> SearchOutcome:
    config = config or EngineConfig()
    log.info(
        "Solving %dx%d grid (%d obstacles) %s -> %s",
        document.grid.width,
        document.grid.height,
        len(document.grid.obstacles),
        document.start,
        document.end,
    )
    outcome = find_path(
        document.grid, document.start, document.end, max_steps=config.max_steps
    )
    log.info("Outcome: %s", type(outcome).__name__)
    return outcome


def solve_request(
    request: SearchRequest, config: EngineConfig | None = None
) -> SearchResponse:
    outcome = solve_document(document_from_request(request), config)
    return SearchResponse.from_outcome(outcome)
