from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional


log = logging.getLogger(__name__)

ENV_PREFIX = "STOREFRONT_"
SETTINGS_ENV = "STOREFRONT_SETTINGS"


def default_settings() -> Dict:
    return {
        "csv_filename": "products.csv",
        "download_dir": ".",
        "browser_headless": True,
        "browser_binary": "",
        "page_load_timeout": 10,
        "log_level": "WARNING",
    }


def _coerce(raw: str, like):
    if isinstance(like, bool):
        return raw.strip().lower() in ("1", "true", "yes")
    if isinstance(like, int):
        return int(raw)
    return raw


def _env_overrides(base: Dict) -> Dict:
    out = {}
    for key, current in base.items():
        raw = os.getenv(ENV_PREFIX + key.upper())
        if raw is None or raw == "":
            continue
        try:
            out[key] = _coerce(raw, current)
        except ValueError:
            log.warning(f"Ignoring {ENV_PREFIX + key.upper()}={raw!r}: expected {type(current).__name__}")
    return out


def load_settings(path: Optional[Path] = None) -> Dict:
    """Defaults, overlaid by the JSON settings file, overlaid by STOREFRONT_* env vars."""
    base = default_settings()
    if path is None and os.getenv(SETTINGS_ENV):
        path = Path(os.environ[SETTINGS_ENV])
    if path is not None:
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                log.warning(f"Settings file {path} is not valid JSON, using defaults: {e}")
                data = {}
            base.update(data or {})
        else:
            log.debug(f"Settings file {path} not found, using defaults")
    base.update(_env_overrides(base))
    return base
