from __future__ import annotations

import argparse
import asyncio
from typing import List, Optional

from devicenames.catalog.popular import load_popular_names
from devicenames.core.exceptions import DeviceNamesError
from devicenames.core.settings import Settings
from devicenames.models.device import GenerationSummary
from devicenames.output.emitter import JsonEmitter
from devicenames.source.fetcher import DeviceSource, SourceFetcher
from devicenames.source.parser import parse_devices
from devicenames.utils.logging import log_json, parse_level, setup_logging


async def _fetch(settings: Settings, source: Optional[DeviceSource]) -> List[str]:
    if source is not None:
        return await source.fetch_lines()
    async with SourceFetcher(settings) as fetcher:
        return await fetcher.fetch_lines()


async def generate(
    output_dir: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
    source: Optional[DeviceSource] = None,
) -> GenerationSummary:
    """
    Single pass:
      1) fetch the supported devices table
      2) parse rows into devices (malformed rows are dropped and counted)
      3) load POPULAR.json
      4) write devices.json, popular-devices.json, devices/*, manufacturers/*
    """
    settings = settings or Settings()
    output_dir = output_dir or settings.output_dir

    lines = await _fetch(settings, source)
    parsed = parse_devices(lines)
    popular_names = load_popular_names(settings.popular_file)

    summary = JsonEmitter(output_dir).generate(parsed.devices, popular_names, dropped=parsed.dropped)
    log_json(
        "generation_complete",
        output_dir=summary.output_dir,
        devices=summary.devices,
        popular=summary.popular,
        codename_files=summary.codename_files,
        manufacturer_files=summary.manufacturer_files,
        dropped=summary.dropped,
    )
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devicenames",
        description="Generate JSON device name files from the Google Play supported devices table.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Directory to write the JSON tree into (default: json)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    setup_logging(parse_level(settings.log_level))

    try:
        asyncio.run(generate(args.output_dir, settings=settings))
    except DeviceNamesError as exc:
        log_json("generation_failed", error_type=type(exc).__name__, error=str(exc)[:500])
        raise
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
