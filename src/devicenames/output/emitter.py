from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List

from devicenames.core.exceptions import OutputWriteError
from devicenames.core.grouping.device_groups_builder import (
    build_manufacturers,
    codename_filename,
    group_by_codename,
    manufacturer_filename,
    select_popular,
)
from devicenames.models.device import Device, GenerationSummary
from devicenames.utils.logging import log_json


def dumps(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def write_json(path: Path, payload: Any) -> None:
    # Overwrites in place; a crash mid-run leaves whatever was already written.
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dumps(payload), encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Could not write {path}: {exc}") from exc


class JsonEmitter:
    """
    Writes the generated tree:

      <root>/devices.json
      <root>/popular-devices.json
      <root>/devices/<codename>.json
      <root>/manufacturers/<MANUFACTURER>.json
    """

    def __init__(self, directory: str | Path = "json") -> None:
        self.root_dir = Path(directory)
        self.devices_dir = self.root_dir / "devices"
        self.oem_dir = self.root_dir / "manufacturers"
        self.devices_json = self.root_dir / "devices.json"
        self.popular_json = self.root_dir / "popular-devices.json"

    def generate(self, devices: List[Device], popular_names: Iterable[str], *, dropped: int = 0) -> GenerationSummary:
        self.write_main(devices)
        popular = self.write_popular(devices, popular_names)
        codename_files = self.write_codenames(devices)
        manufacturer_files = self.write_manufacturers(devices)

        return GenerationSummary(
            output_dir=str(self.root_dir),
            devices=len(devices),
            popular=popular,
            codename_files=codename_files,
            manufacturer_files=manufacturer_files,
            dropped=dropped,
        )

    def write_main(self, devices: List[Device]) -> None:
        write_json(self.devices_json, [d.to_json() for d in devices])
        log_json("json_written", target="devices", path=str(self.devices_json), count=len(devices))

    def write_popular(self, devices: List[Device], popular_names: Iterable[str]) -> int:
        popular = select_popular(devices, popular_names)
        write_json(self.popular_json, [d.to_json() for d in popular])
        log_json("json_written", target="popular", path=str(self.popular_json), count=len(popular))
        return len(popular)

    def write_codenames(self, devices: List[Device]) -> int:
        groups = group_by_codename(devices)
        for key, group in groups.items():
            write_json(self.devices_dir / codename_filename(key), [d.to_json() for d in group])
        log_json("json_written", target="codenames", path=str(self.devices_dir), files=len(groups))
        return len(groups)

    def write_manufacturers(self, devices: List[Device]) -> int:
        oems = build_manufacturers(devices)
        for oem in oems:
            write_json(self.oem_dir / manufacturer_filename(oem.manufacturer), oem.to_json())
        log_json("json_written", target="manufacturers", path=str(self.oem_dir), files=len(oems))
        return len(oems)
