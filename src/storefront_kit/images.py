from __future__ import annotations
from typing import Tuple

from .normalize import to_text


def pick_image(product: dict, variant: dict) -> Tuple[str, str, str]:
    """Return (src, position, alt) for a variant row.

    The variant's featured image wins and is always position 1. Otherwise the
    product's first image is used, defaulting its position to 1. With neither,
    all three cells are empty.
    """
    featured = variant.get("featured_image")
    if isinstance(featured, dict) and featured:
        return to_text(featured.get("src")), "1", to_text(featured.get("alt") or "")
    images = product.get("images")
    if isinstance(images, list) and images:
        first = images[0] if isinstance(images[0], dict) else {}
        return (
            to_text(first.get("src")),
            to_text(first.get("position") or 1),
            to_text(first.get("alt") or ""),
        )
    return "", "", ""


def variant_image_src(variant: dict) -> str:
    featured = variant.get("featured_image")
    if not isinstance(featured, dict):
        return ""
    return to_text(featured.get("src") or "")
