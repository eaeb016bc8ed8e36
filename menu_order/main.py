"""Entry point for the menu-order Textual app."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from menu_order.catalog import load_catalog_file, normalize_catalog
from menu_order.config import DEBUG_LOG_PATH
from menu_order.constant import SAMPLE_CATALOG
from menu_order.errors import CatalogError
from menu_order.menu_app import MenuOrderApp


def configure_logging(log_path: str = DEBUG_LOG_PATH) -> None:
    """Send log records to a file so they never draw over the terminal UI."""
    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="menu-order", description="Browse a menu and send an order.")
    parser.add_argument("catalog", nargs="?", help="catalog JSON file (defaults to the bundled sample menu)")
    parser.add_argument("--endpoint", help="order endpoint URL (overrides MENU_ORDER_ENDPOINT)")
    parser.add_argument("--log-file", default=DEBUG_LOG_PATH, help="debug log path")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the Textual application."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)

    try:
        catalog = load_catalog_file(args.catalog) if args.catalog else normalize_catalog(SAMPLE_CATALOG)
    except CatalogError as exc:
        print(f"menu-order: {exc}", file=sys.stderr)
        return 1

    MenuOrderApp(catalog=catalog, endpoint=args.endpoint).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
