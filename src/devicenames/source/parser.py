from __future__ import annotations

from typing import Iterable, List, Mapping, Optional

from devicenames.catalog.name_fixes import PREFERRED_NAMES, preferred_name
from devicenames.models.device import Device, ParseResult
from devicenames.utils.logging import log_json

FIELD_COUNT = 4


def split_fields(line: str) -> List[str]:
    # Plain comma split (the table is not quoted); trailing empty fields are dropped.
    fields = line.split(",")
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_line(line: str, fixes: Mapping[str, str] = PREFERRED_NAMES) -> Optional[Device]:
    fields = split_fields(line)
    if len(fields) != FIELD_COUNT:
        return None
    manufacturer, name, codename, model = fields
    return Device(
        manufacturer=manufacturer,
        market_name=preferred_name(name, fixes),
        codename=codename,
        model=model,
    )


def parse_devices(lines: Iterable[str], fixes: Mapping[str, str] = PREFERRED_NAMES) -> ParseResult:
    devices: List[Device] = []
    dropped = 0
    for line in lines:
        device = parse_line(line, fixes)
        if device is None:
            dropped += 1
            continue
        devices.append(device)

    log_json("devices_parsed", devices=len(devices), dropped=dropped)
    return ParseResult(devices=devices, dropped=dropped)
