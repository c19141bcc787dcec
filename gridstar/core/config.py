"""Engine configuration from an optional JSON file plus environment overrides."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path

ENV_DIAGONAL = "GRIDSTAR_DIAGONAL"
ENV_MAX_STEPS = "GRIDSTAR_MAX_STEPS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class EngineConfig:
    diagonal: bool = False
    max_steps: int | None = None

    def __post_init__(self) -> None:
        if self.max_steps is not None and self.max_steps <= 0:
            raise ValueError(
                f"max_steps must be a positive integer, got {self.max_steps!r}."
            )


def load_engine_config(path: Path | None = None) -> EngineConfig:
    config = EngineConfig()
    if path is not None:
        data = _load_json(path)
        config = EngineConfig(
            diagonal=_coerce_bool(data.get("diagonal", False), "diagonal"),
            max_steps=coerce_max_steps(data.get("max_steps"), "max_steps"),
        )

    diagonal = os.getenv(ENV_DIAGONAL)
    if diagonal is not None:
        config = replace(config, diagonal=_coerce_bool(diagonal, ENV_DIAGONAL))
    max_steps = os.getenv(ENV_MAX_STEPS)
    if max_steps is not None:
        config = replace(
            config, max_steps=coerce_max_steps(max_steps or None, ENV_MAX_STEPS)
        )
    return config


def _load_json(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing engine config file: {path}") from exc
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Engine config {path} must be a JSON object.")
    return data


def _coerce_bool(value: object, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}.")


def coerce_max_steps(value: object, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a positive integer, got {value!r}.")
    try:
        steps = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a positive integer, got {value!r}.") from exc
    if steps <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}.")
    return steps
