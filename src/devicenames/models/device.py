from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from pydantic import BaseModel, ConfigDict


class Device(BaseModel):
    """One retail device variant from the Play supported devices table."""

    model_config = ConfigDict(frozen=True)

    # Retail branding
    manufacturer: str
    # Consumer friendly name of the device
    market_name: str
    # Value of the system property "ro.product.device"
    codename: str
    # Value of the system property "ro.product.model"
    model: str

    def without_manufacturer(self) -> "Device":
        return self.model_copy(update={"manufacturer": ""})

    def to_json(self) -> dict[str, str]:
        return self.model_dump()


class OEM(BaseModel):
    """A manufacturer and every device it has that supports Google Play."""

    model_config = ConfigDict(frozen=True)

    manufacturer: str
    devices: List[Device]

    def to_json(self) -> dict[str, Any]:
        return self.model_dump()


@dataclass(frozen=True)
class ParseResult:
    devices: List[Device]
    dropped: int


@dataclass(frozen=True)
class GenerationSummary:
    output_dir: str
    devices: int
    popular: int
    codename_files: int
    manufacturer_files: int
    dropped: int
