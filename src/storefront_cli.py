#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from storefront_kit.browser import browser_session
from storefront_kit.cloner import Cloned, clone_with_computed_styles, to_html
from storefront_kit.io import download_csv, read_catalog, write_csv_text
from storefront_kit.settings import load_settings
from storefront_kit.transform import render_csv, transform_catalog


def load_env(env_file: Optional[str]) -> None:
    # Project root and CWD first, then an explicit --env-file on top
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    load_dotenv(Path.cwd() / ".env")
    if env_file:
        load_dotenv(env_file, override=True)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Storefront catalog export and style-preserving element cloning.")
    p.add_argument("--env-file", default="", help="Extra .env file to load")
    p.add_argument("--settings", default="", help="Path to a JSON settings file")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug")
    sub = p.add_subparsers(dest="command", required=True)

    exp = sub.add_parser("export", help="Convert a products.json export into the product import CSV")
    exp.add_argument("--input", required=True, help="Path to the catalog JSON")
    exp.add_argument("--output", default="", help="Output CSV path (default: settings download_dir/csv_filename)")
    exp.add_argument("--stdout", action="store_true", help="Print the CSV instead of writing a file")

    cl = sub.add_parser("clone", help="Clone an element with its computed styles inlined")
    src = cl.add_mutually_exclusive_group(required=True)
    src.add_argument("--url", help="Page URL to load")
    src.add_argument("--html-file", help="Local HTML file to load")
    cl.add_argument("--selector", required=True, help='CSS selector, e.g. "#hero-section" or ".product-card"')
    cl.add_argument("--output", default="", help="Write the clone markup here instead of stdout")
    cl.add_argument("--show-browser", action="store_true", help="Run Chrome with a visible window")

    srv = sub.add_parser("serve", help="Run the HTTP API and upload UI")
    srv.add_argument("--host", default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    return p.parse_args(argv)


def run_export(args: argparse.Namespace, settings: dict) -> int:
    catalog = read_catalog(Path(args.input))
    rows = transform_catalog(catalog)
    text = render_csv(rows)
    if args.stdout:
        sys.stdout.write(text + "\n")
        return 0
    if args.output:
        dest = write_csv_text(Path(args.output), text)
    else:
        dest = download_csv(text, filename=settings["csv_filename"], directory=Path(settings["download_dir"]))
    print(f"Wrote {len(rows)} product import rows to {dest}")
    return 0


def run_clone(args: argparse.Namespace, settings: dict) -> int:
    if args.show_browser:
        settings = dict(settings, browser_headless=False)
    with browser_session(settings) as engine:
        if args.url:
            engine.open_url(args.url)
        else:
            engine.load_html(Path(args.html_file).read_text(encoding="utf-8"))
        result = clone_with_computed_styles(engine, args.selector)

    if not isinstance(result, Cloned):
        print(f"Element not found: {args.selector}", file=sys.stderr)
        return 2
    html = to_html(result)
    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(html, encoding="utf-8")
        print(f"Wrote clone of {args.selector} ({len(result.pseudo_rules)} pseudo rule(s)) to {out}")
    else:
        sys.stdout.write(html + "\n")
    return 0


def run(args: argparse.Namespace) -> int:
    load_env(args.env_file or None)
    settings = load_settings(Path(args.settings) if args.settings else None)

    level = getattr(logging, str(settings.get("log_level") or "WARNING").upper(), logging.WARNING)
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    if args.command == "export":
        return run_export(args, settings)
    if args.command == "serve":
        import uvicorn
        uvicorn.run("server.app:app", host=args.host, port=args.port)
        return 0
    return run_clone(args, settings)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
