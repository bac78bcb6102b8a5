#!/usr/bin/env python3
"""Basic smoke test for the catalog export.

Converts the sample catalog and checks the header and row count.
No network or browser involved.
"""
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / 'src'))

from storefront_kit.transform import transform, write_output, SHOPIFY_HEADERS  # type: ignore


def main() -> int:
    sample = ROOT / 'data' / 'sample' / 'products.json'
    if not sample.exists():
        print(f"Sample input not found: {sample}")
        return 0

    rows = transform(sample)
    if len(rows) != 3:
        print(f"Smoke test failed: expected 3 rows, got {len(rows)}")
        return 1
    out_path = ROOT / 'data' / 'output' / 'smoke_test_output.csv'
    write_output(out_path, rows)
    header = out_path.read_text(encoding='utf-8').split('\n', 1)[0]
    if header != ','.join(SHOPIFY_HEADERS):
        print("Smoke test failed: header mismatch")
        return 1
    print(f"Smoke test ok: wrote {len(rows)} rows to {out_path}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
