import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from gridstar.__main__ import main
from gridstar.core.config import ENV_DIAGONAL, ENV_MAX_STEPS


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(ENV_DIAGONAL, raising=False)
    monkeypatch.delenv(ENV_MAX_STEPS, raising=False)
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_cli_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "request.json"
    path.write_text(
        json.dumps({"width": 5, "height": 5, "start": [0, 0], "end": [4, 4]}),
        encoding="utf-8",
    )

    assert main(["--request", str(path), "--json"]) == 0
    response = json.loads(capsys.readouterr().out)

    assert response["status"] == "PATH_FOUND"
    assert len(response["path"]) == 18


def test_cli_renders_map(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "map.txt"
    path.write_text("S#E\n.#.\n...\n", encoding="utf-8")

    assert main(["--map", str(path)]) == 0
    output = capsys.readouterr().out

    assert "Path found: 6 steps" in output


def test_cli_unreachable(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "map.txt"
    path.write_text("S#E\n.#.\n.#.\n", encoding="utf-8")

    assert main(["--map", str(path), "--json"]) == 0
    response = json.loads(capsys.readouterr().out)
    assert response["status"] == "UNREACHABLE"
    assert response["path"] == []


def test_cli_invalid_request(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "request.json"
    path.write_text(
        json.dumps({"width": 3, "height": 3, "start": [0, 0], "end": [0, 0]}),
        encoding="utf-8",
    )

    assert main(["--request", str(path)]) == 2
    assert "Invalid request" in capsys.readouterr().out


def test_cli_requires_input() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_cli_max_steps_aborts(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "request.json"
    path.write_text(
        json.dumps({"width": 20, "height": 20, "start": [0, 0], "end": [19, 19]}),
        encoding="utf-8",
    )

    assert main(["--request", str(path), "--json", "--max-steps", "3"]) == 0
    response = json.loads(capsys.readouterr().out)
    assert response["status"] == "ABORTED"


def test_cli_rejects_non_positive_max_steps(tmp_path: Path) -> None:
    path = _write_request(
        tmp_path, {"width": 3, "height": 3, "start": [0, 0], "end": [2, 2]}
    )

    with pytest.raises(SystemExit) as excinfo:
        main(["--request", str(path), "--max-steps", "0"])
    assert excinfo.value.code == 2

    with pytest.raises(SystemExit):
        main(["--request", str(path), "--max-steps", "-4"])


def test_cli_odd_obstacles_is_invalid(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = _write_request(
        tmp_path,
        {
            "width": 3,
            "height": 3,
            "start": [0, 0],
            "end": [2, 2],
            "obstacles": [1, 1, 2],
        },
    )

    assert main(["--request", str(path)]) == 2
    assert "Invalid request" in capsys.readouterr().out


def test_cli_log_level_choices(tmp_path: Path) -> None:
    path = _write_request(
        tmp_path, {"width": 3, "height": 3, "start": [0, 0], "end": [2, 2]}
    )

    with pytest.raises(SystemExit) as excinfo:
        main(["--request", str(path), "--log-level", "VERBOSE"])
    assert excinfo.value.code == 2

    assert main(["--request", str(path), "--json", "--log-level", "error"]) == 0
    assert logging.getLogger().level == logging.ERROR


def test_cli_log_file_json(tmp_path: Path) -> None:
    path = _write_request(
        tmp_path, {"width": 5, "height": 5, "start": [0, 0], "end": [4, 4]}
    )
    logfile = tmp_path / "logs" / "gridstar.jsonl"

    assert (
        main(
            [
                "--request",
                str(path),
                "--json",
                "--log-level",
                "info",
                "--log-file",
                str(logfile),
                "--log-json",
            ]
        )
        == 0
    )

    lines = logfile.read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    assert records
    assert records[0]["level"] == "INFO"
    assert records[0]["logger"] == "gridstar.app"
    assert "Solving 5x5 grid" in records[0]["msg"]


def _write_request(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "request.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
