from __future__ import annotations


class DeviceNamesError(RuntimeError):
    """Base error for the device names generator."""


class SourceError(DeviceNamesError):
    pass


class SourceNetworkError(SourceError):
    """DNS, connection or timeout failure while fetching the device table."""


class SourceStatusError(SourceError):
    """Non-2xx response from the device table endpoint."""

    def __init__(self, status: int, body: str = "") -> None:
        super().__init__(f"Unexpected status {status}: {body[:300]}")
        self.status = status
        self.body = body


class SourceDecodeError(SourceError):
    """Body could not be decoded with the configured encoding."""


class PopularNamesError(DeviceNamesError):
    """POPULAR.json is missing or malformed."""


class OutputWriteError(DeviceNamesError):
    pass
