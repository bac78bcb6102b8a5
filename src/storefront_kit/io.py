from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Optional

from .errors import CatalogError


log = logging.getLogger(__name__)

DEFAULT_CSV_FILENAME = "products.csv"


def parse_catalog(text: str, source: str = "input") -> dict:
    """Parse catalog JSON text.

    Accepts either ``{"products": [...]}`` or a bare list of products, which is
    wrapped so callers always see the mapping form.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid catalog JSON in {source}: {e}") from e
    if isinstance(data, list):
        data = {"products": data}
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog must be an object or a list, got {type(data).__name__}")
    return data


def read_catalog(input_path: Path) -> dict:
    data = parse_catalog(input_path.read_text(encoding="utf-8-sig"), source=str(input_path))
    products = data.get("products")
    log.debug(f"read_catalog: path={input_path} products={len(products) if isinstance(products, list) else 0}")
    return data


def write_csv_text(output_path: Path, text: str) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as f:
        f.write(text)
    return output_path


def download_csv(csv_content: str, filename: str = DEFAULT_CSV_FILENAME, directory: Optional[Path] = None) -> Path:
    """Save CSV text as a file the user can pick up, under a default name."""
    if directory is None:
        from .settings import load_settings
        directory = Path(load_settings().get("download_dir") or ".")
    dest = write_csv_text(Path(directory) / (filename or DEFAULT_CSV_FILENAME), csv_content)
    log.info(f"Saved CSV download to {dest}")
    return dest
