from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv, find_dotenv

# Load the nearest .env regardless of CWD
load_dotenv(find_dotenv(usecwd=True), override=False)


SUPPORTED_DEVICES_URL = "https://storage.googleapis.com/play_public/supported_devices.csv"


class Settings(BaseSettings):
    # Source
    source_url: str = SUPPORTED_DEVICES_URL
    source_encoding: str = "utf-16"  # Play publishes the table as UTF-16

    # Local inputs / outputs
    popular_file: str = "POPULAR.json"
    output_dir: str = "json"

    # Timeouts
    connect_timeout_ms: int = 10_000
    read_timeout_ms: int = 120_000
    total_timeout_ms: int = 300_000

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=None,             # dotenv already loaded above
        env_prefix="DEVICENAMES_",  # "DEVICENAMES_OUTPUT_DIR" maps to output_dir
        case_sensitive=False,
    )
