from __future__ import annotations

from typing import Dict, Iterable, List

from devicenames.models.device import Device, OEM


# ---------------------------
# Key / filename helpers
# ---------------------------

def _is_blank(value: str) -> bool:
    return not (value or "").strip()


def codename_key(codename: str) -> str:
    return codename.lower()


def codename_filename(codename: str) -> str:
    return f"{codename_key(codename)}.json"


def manufacturer_filename(manufacturer: str) -> str:
    """
    "Sony Mobile-Com." -> "SONY_MOBILECOM.json"
    Upper-cased, spaces become underscores, periods and hyphens are removed.
    """
    name = manufacturer.upper().replace(" ", "_").replace(".", "").replace("-", "")
    return f"{name}.json"


# ---------------------------
# Builders
# ---------------------------

def group_by_codename(devices: Iterable[Device]) -> Dict[str, List[Device]]:
    """
    Group devices under their lower-cased codename, keeping encounter order.
    Devices with a blank codename are left out.
    """
    groups: Dict[str, List[Device]] = {}
    for device in devices:
        if _is_blank(device.codename):
            continue
        groups.setdefault(codename_key(device.codename), []).append(device)
    return groups


def group_by_manufacturer(devices: Iterable[Device]) -> Dict[str, List[Device]]:
    """
    Group devices under the manufacturer string exactly as published (case-sensitive),
    keys ascending. The manufacturer is cleared on stored devices since the group carries it.
    """
    groups: Dict[str, List[Device]] = {}
    for device in devices:
        if _is_blank(device.manufacturer):
            continue
        groups.setdefault(device.manufacturer, []).append(device.without_manufacturer())
    return {key: groups[key] for key in sorted(groups)}


def build_manufacturers(devices: Iterable[Device]) -> List[OEM]:
    return [
        OEM(manufacturer=manufacturer, devices=group)
        for manufacturer, group in group_by_manufacturer(devices).items()
    ]


def select_popular(devices: List[Device], names: Iterable[str]) -> List[Device]:
    """
    For each popular name in order, every device whose marketing name matches
    case-insensitively. A device matched by several names is listed once per match.
    """
    popular: List[Device] = []
    for name in names:
        wanted = name.lower()
        popular.extend(d for d in devices if d.market_name.lower() == wanted)
    return popular
