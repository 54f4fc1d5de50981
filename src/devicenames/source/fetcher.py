from __future__ import annotations

import asyncio
import io
import time
from pathlib import Path
from typing import List, Protocol

import aiohttp

from devicenames.core.exceptions import (
    SourceDecodeError,
    SourceNetworkError,
    SourceStatusError,
)
from devicenames.core.settings import Settings
from devicenames.utils.logging import log_json


class DeviceSource(Protocol):
    async def fetch_lines(self) -> List[str]:
        ...


def decode_source(body: bytes, encoding: str = "utf-16") -> str:
    try:
        return body.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise SourceDecodeError(f"Could not decode device table as {encoding}: {exc}") from exc


def split_source_lines(text: str) -> List[str]:
    """
    Split on \\r\\n, \\r or \\n and drop the header row:
      Retail Branding,Marketing Name,Device,Model
    """
    with io.StringIO(text, newline=None) as fin:
        lines = [line.rstrip("\n") for line in fin]
    return lines[1:]


class SourceFetcher:
    """Run-scoped HTTP reader for the supported devices table. One GET, no retries."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "SourceFetcher":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def start(self) -> None:
        if self._session and not self._session.closed:
            return
        timeout = aiohttp.ClientTimeout(
            total=self.settings.total_timeout_ms / 1000.0,
            connect=self.settings.connect_timeout_ms / 1000.0,
            sock_read=self.settings.read_timeout_ms / 1000.0,
        )
        self._session = aiohttp.ClientSession(timeout=timeout, raise_for_status=False, trust_env=True)

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def fetch_lines(self, url: str | None = None) -> List[str]:
        assert self._session is not None, "SourceFetcher not started"

        url = url or self.settings.source_url
        log_json("source_fetch_start", url=url)
        started = time.perf_counter()
        try:
            async with self._session.get(url) as resp:
                status = resp.status
                body = await resp.read()
        except aiohttp.ClientError as exc:
            raise SourceNetworkError(f"GET {url} failed: {exc}") from exc
        except asyncio.TimeoutError as exc:
            raise SourceNetworkError(f"GET {url} timed out") from exc

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        if not 200 <= status < 300:
            raise SourceStatusError(status, body.decode("utf-8", errors="replace"))

        lines = split_source_lines(decode_source(body, self.settings.source_encoding))
        log_json("source_fetch_done", url=url, status=status, bytes=len(body), rows=len(lines), elapsed_ms=elapsed_ms)
        return lines


class FileSource:
    """Reads a local dump of the table (same encoding and header as the remote file)."""

    def __init__(self, path: str | Path, encoding: str = "utf-16") -> None:
        self.path = Path(path)
        self.encoding = encoding

    async def fetch_lines(self) -> List[str]:
        lines = split_source_lines(decode_source(self.path.read_bytes(), self.encoding))
        log_json("source_fetch_done", path=str(self.path), rows=len(lines))
        return lines
