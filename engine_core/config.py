"""
engine_core/config.py
---------------------
Runtime settings for the host layers (API, CLI, event log).
Every field can be overridden with a SIMILARITY_* environment variable,
e.g. SIMILARITY_CATALOG_PATH=/data/catalog.json.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog.validate_catalog import CATALOG_PATH

LOG_DIR = Path(__file__).resolve().parents[1] / "logs"


class EngineConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SIMILARITY_")

    catalog_path: Path = CATALOG_PATH
    default_top_k: int = Field(5, ge=0)
    max_top_k: int = Field(100, ge=1)          # upper bound accepted by the API
    log_dir: Path = LOG_DIR
    log_events: bool = True


@lru_cache(maxsize=1)
def get_config() -> EngineConfig:
    return EngineConfig()
