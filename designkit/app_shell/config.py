"""
Runtime settings, read from the environment.

DESIGNKIT_STATE_DIR     directory holding the state mirror (default ~/.designkit)
DESIGNKIT_HTTP_URL      base URL the bridge reads from
DESIGNKIT_CATALOG_DIR   alternative catalog data directory
DESIGNKIT_CORS_ORIGINS  comma-separated origins allowed to call the API
DESIGNKIT_HEARTBEAT_SECONDS  idle interval between SSE heartbeat comments
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

from designkit.adapters.state_file import STATE_FILENAME

DEFAULT_STATE_DIR = "~/.designkit"
DEFAULT_HTTP_URL = "http://localhost:3000/api/designkit"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings:
    def __init__(self, environ: dict[str, str] | None = None) -> None:
        env = os.environ if environ is None else environ
        self.state_dir = Path(env.get("DESIGNKIT_STATE_DIR", DEFAULT_STATE_DIR)).expanduser()
        self.state_file = self.state_dir / STATE_FILENAME
        self.http_url = env.get("DESIGNKIT_HTTP_URL", DEFAULT_HTTP_URL).rstrip("/")
        catalog_dir = env.get("DESIGNKIT_CATALOG_DIR")
        self.catalog_dir = Path(catalog_dir).expanduser() if catalog_dir else None
        origins = env.get("DESIGNKIT_CORS_ORIGINS")
        self.cors_origins = (
            [o.strip() for o in origins.split(",") if o.strip()]
            if origins
            else list(DEFAULT_CORS_ORIGINS)
        )
        self.heartbeat_interval = float(env.get("DESIGNKIT_HEARTBEAT_SECONDS", "30"))

    def __repr__(self) -> str:
        return (
            f"Settings(state_file={str(self.state_file)!r}, http_url={self.http_url!r}, "
            f"catalog_dir={self.catalog_dir!r})"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(verbose: bool = False, *, stream=None) -> None:
    """Entry-point logging setup. Library modules only create loggers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=stream,
    )
