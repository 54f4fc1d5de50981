from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from devicenames.core.settings import Settings

HEADER = "Retail Branding,Marketing Name,Device,Model"


class StaticSource:
    """In-memory stand-in for the remote table; lines exclude the header."""

    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.calls = 0

    async def fetch_lines(self) -> List[str]:
        self.calls += 1
        return list(self.lines)


def csv_body(*rows: str, newline: str = "\r\n") -> bytes:
    return newline.join([HEADER, *rows, ""]).encode("utf-16")


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def write_popular(tmp_path: Path):
    def _write(data: Dict[str, Any], name: str = "POPULAR.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_settings(tmp_path: Path, write_popular):
    def _make(popular: Dict[str, Any] | None = None, **overrides: Any) -> Settings:
        popular_path = write_popular(popular if popular is not None else {})
        values = {"popular_file": str(popular_path), "output_dir": str(tmp_path / "json")}
        values.update(overrides)
        return Settings(**values)

    return _make
