"""
Storefront utilities.

This package provides two independent building blocks:
- Flattening a storefront products.json export into the product import CSV
- Cloning a rendered element with its computed styles inlined

Public API:
- transform.SHOPIFY_HEADERS, transform.convert_json_to_csv, transform.transform_catalog
- normalize.escape_csv
- io.read_catalog, io.download_csv
- cloner.clone_with_computed_styles, cloner.Cloned, cloner.NotFound
- browser.SeleniumStyleEngine, browser.browser_session
- settings.load_settings
"""

from . import errors, settings, normalize, images, io, transform, styles, engine, cloner, browser  # re-export modules

__all__ = [
    "errors",
    "settings",
    "normalize",
    "images",
    "io",
    "transform",
    "styles",
    "engine",
    "cloner",
    "browser",
]
