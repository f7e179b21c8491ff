from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _read_config_file(path: Path) -> dict[str, Any]:
    """
    Read the optional JSON config file.

    Returns an empty dict when the file is missing. Unreadable or non-object
    JSON is logged and ignored so environment defaults still apply.
    """
    if not path.exists():
        return {}
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("CONFIG: failed to read %s: %r", path, e)
        return {}
    if not isinstance(raw, dict):
        logger.warning("CONFIG: %s does not contain a JSON object; ignoring", path)
        return {}
    return raw


def _normalize_base_route(route: str) -> str:
    route = route.strip().rstrip("/")
    if route and not route.startswith("/"):
        route = "/" + route
    return route


@dataclass(frozen=True)
class Settings:
    # Parsing (strptime format shared by class and booking dates)
    date_format: str

    # HTTP
    base_route: str
    host: str
    port: int

    # Concurrency: "global" or "per_class"
    lock_granularity: str

    # Logging
    log_level: str
    debug_log_requests: bool


def get_settings() -> Settings:
    """
    Build settings from the environment, falling back to the JSON config file
    (keys DateFormat, BaseRoute, Port), then to built-in defaults.
    """
    file_cfg = _read_config_file(Path(os.getenv("CONFIG_FILE", DEFAULT_CONFIG_FILE)))

    date_format = os.getenv("DATE_FORMAT") or file_cfg.get("DateFormat") or "%Y-%m-%d"
    base_route = _normalize_base_route(os.getenv("BASE_ROUTE", str(file_cfg.get("BaseRoute", ""))))

    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT") or file_cfg.get("Port") or 8080)

    lock_granularity = os.getenv("LOCK_GRANULARITY", "global").strip().lower()

    log_level = os.getenv("LOG_LEVEL", "INFO")
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    return Settings(
        date_format=date_format,
        base_route=base_route,
        host=host,
        port=port,
        lock_granularity=lock_granularity,
        log_level=log_level,
        debug_log_requests=debug_log_requests,
    )
