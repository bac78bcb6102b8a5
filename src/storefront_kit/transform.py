from __future__ import annotations
import logging
from pathlib import Path

from .normalize import to_text, text_or, bool_flag, join_tags, format_row
from .images import pick_image, variant_image_src
from .io import read_catalog, write_csv_text


log = logging.getLogger(__name__)


SHOPIFY_HEADERS = [
    "Handle",
    "Title",
    "Body (HTML)",
    "Vendor",
    "Type",
    "Tags",
    "Published",
    "Option1 Name",
    "Option1 Value",
    "Option2 Name",
    "Option2 Value",
    "Option3 Name",
    "Option3 Value",
    "Variant SKU",
    "Variant Grams",
    "Variant Inventory Tracker",
    "Variant Inventory Qty",
    "Variant Inventory Policy",
    "Variant Fulfillment Service",
    "Variant Price",
    "Variant Compare At Price",
    "Variant Requires Shipping",
    "Variant Taxable",
    "Variant Barcode",
    "Image Src",
    "Image Position",
    "Image Alt Text",
    "Gift Card",
    "SEO Title",
    "SEO Description",
    "Google Shopping / Google Product Category",
    "Google Shopping / Gender",
    "Google Shopping / Age Group",
    "Google Shopping / MPN",
    "Google Shopping / AdWords Grouping",
    "Google Shopping / AdWords Labels",
    "Google Shopping / Condition",
    "Google Shopping / Custom Product",
    "Google Shopping / Custom Label 0",
    "Google Shopping / Custom Label 1",
    "Google Shopping / Custom Label 2",
    "Google Shopping / Custom Label 3",
    "Google Shopping / Custom Label 4",
    "Variant Image",
    "Variant Weight Unit",
    "Variant Tax Code",
]

INVENTORY_TRACKER = "shopify"
INVENTORY_POLICY = "deny"
FULFILLMENT_SERVICE = "manual"
AVAILABLE_QTY = "999"
WEIGHT_UNIT = "g"


def _option_name(options, idx: int) -> str:
    if isinstance(options, list) and idx < len(options) and isinstance(options[idx], dict):
        return text_or(options[idx].get("name"))
    return ""


def variant_row(product: dict, variant: dict) -> dict:
    options = product.get("options") or []
    sku = text_or(variant.get("sku"))
    image_src, image_position, image_alt = pick_image(product, variant)

    out = {h: "" for h in SHOPIFY_HEADERS}
    out["Handle"] = text_or(product.get("handle"))
    out["Title"] = text_or(product.get("title"))
    out["Body (HTML)"] = text_or(product.get("body_html"))
    out["Vendor"] = text_or(product.get("vendor"))
    out["Type"] = text_or(product.get("product_type"))
    out["Tags"] = join_tags(product.get("tags"))
    out["Published"] = bool_flag(product.get("published_at"))
    for n in (1, 2, 3):
        out[f"Option{n} Name"] = _option_name(options, n - 1)
        out[f"Option{n} Value"] = text_or(variant.get(f"option{n}"))
    out["Variant SKU"] = sku
    # grams of 0 and missing grams both render as '0'
    out["Variant Grams"] = to_text(variant.get("grams")) or "0"
    out["Variant Inventory Tracker"] = INVENTORY_TRACKER
    out["Variant Inventory Qty"] = AVAILABLE_QTY if variant.get("available") else "0"
    out["Variant Inventory Policy"] = INVENTORY_POLICY
    out["Variant Fulfillment Service"] = FULFILLMENT_SERVICE
    out["Variant Price"] = text_or(variant.get("price"), "0.00")
    out["Variant Compare At Price"] = text_or(variant.get("compare_at_price"))
    out["Variant Requires Shipping"] = bool_flag(variant.get("requires_shipping"))
    out["Variant Taxable"] = bool_flag(variant.get("taxable"))
    out["Variant Barcode"] = sku
    out["Image Src"] = image_src
    out["Image Position"] = image_position
    out["Image Alt Text"] = image_alt
    out["Gift Card"] = "false"
    out["Variant Image"] = variant_image_src(variant)
    out["Variant Weight Unit"] = WEIGHT_UNIT
    return out


def product_rows(product: dict) -> list:
    if not isinstance(product, dict):
        log.debug(f"Skipping non-object product {product!r}")
        return []
    if not product.get("id"):
        log.debug(f"Skipping product without id handle={product.get('handle')!r}")
        return []
    variants = product.get("variants")
    if not isinstance(variants, list):
        return []
    return [variant_row(product, v) for v in variants if isinstance(v, dict)]


def _products(catalog) -> list:
    if isinstance(catalog, dict):
        catalog = catalog.get("products")
    return catalog if isinstance(catalog, list) else []


def transform_catalog(catalog) -> list:
    rows = []
    products = _products(catalog)
    for product in products:
        rows.extend(product_rows(product))
    log.info(f"Transformed {len(products)} product(s) into {len(rows)} row(s)")
    return rows


def render_csv(rows: list) -> str:
    lines = [format_row(SHOPIFY_HEADERS)]
    for r in rows:
        lines.append(format_row(r.get(h, "") for h in SHOPIFY_HEADERS))
    return "\n".join(lines)


def convert_json_to_csv(catalog) -> str:
    return render_csv(transform_catalog(catalog))


def transform(input_path: Path) -> list:
    return transform_catalog(read_catalog(input_path))


def write_output(output_path: Path, rows: list) -> Path:
    return write_csv_text(output_path, render_csv(rows))
