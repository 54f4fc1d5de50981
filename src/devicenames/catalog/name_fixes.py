from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Marketing names Play publishes run together; keys must match exactly.
PREFERRED_NAMES: Mapping[str, str] = MappingProxyType({
    "OnePlus3": "OnePlus 3",
    "OnePlus3T": "OnePlus 3T",
    "OnePlus5": "OnePlus 5",
    "OnePlus5T": "OnePlus 5T",
    "OnePlus6": "OnePlus 6",
    "OnePlus6T": "OnePlus 6T",
})


def preferred_name(name: str, fixes: Mapping[str, str] = PREFERRED_NAMES) -> str:
    return fixes.get(name, name)
