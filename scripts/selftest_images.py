#!/usr/bin/env python3
"""Self-test for image column selection and CSV escaping.

No network required. Validates deterministic behavior of non-API logic.
"""
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / 'src'))

from storefront_kit.images import pick_image, variant_image_src  # type: ignore
from storefront_kit.normalize import escape_csv  # type: ignore


def main() -> int:
    product = {'images': [{'src': 'a.jpg', 'alt': 'A'}, {'src': 'b.jpg', 'position': 2}]}
    # first product image, position defaults to 1
    assert pick_image(product, {}) == ('a.jpg', '1', 'A')
    # featured image wins
    variant = {'featured_image': {'src': 'v.jpg'}}
    assert pick_image(product, variant) == ('v.jpg', '1', '')
    assert variant_image_src(variant) == 'v.jpg'
    # nothing to pick
    assert pick_image({}, {}) == ('', '', '')
    # escaping
    assert escape_csv('a,b') == '"a,b"'
    assert escape_csv('say "hi"') == '"say ""hi"""'
    assert escape_csv('plain') == 'plain'
    print('Self-test ok: pick_image and escape_csv pass basic checks')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
