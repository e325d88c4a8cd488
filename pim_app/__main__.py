from __future__ import annotations

import argparse
import locale
import logging
from pathlib import Path

from .defaults import load_initial_parts
from .export import export_parts_xlsx
from .persistence import open_repository
from .settings_store import (
    AppSettings,
    default_log_dir,
    load_settings,
    save_settings,
)
from .state import format_price, total_value
from .ui import run_ui
from . import __version__


logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="PIM - Parts Inventory Management")
    parser.add_argument("--version", action="version", version=f"PIM {__version__}")
    parser.add_argument("--storage-path", default=None, help="SQLite file holding the saved inventory")
    parser.add_argument("--export", default=None, help="Write the inventory to this XLSX file")
    parser.add_argument("--reset", action="store_true", help="Remove the saved inventory before starting")
    parser.add_argument("--no-ui", action="store_true", help="Only run CLI actions and exit")
    return parser.parse_args(argv)


def configure_logging() -> None:
    log_dir = default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(log_dir / "pim.log", encoding="utf-8"),
        ],
    )


def configure_collation() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.warning("System collation locale unavailable, sorting names by code point")


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    configure_collation()
    args = parse_args(argv)
    settings = load_settings()
    storage_path = Path(args.storage_path).resolve() if args.storage_path else Path(settings.storage_path)
    if args.storage_path:
        save_settings(
            AppSettings(
                storage_path=str(storage_path),
                theme_mode=settings.theme_mode,
                language=settings.language,
                page_size=settings.page_size,
                export_path=settings.export_path,
            )
        )
        settings.storage_path = str(storage_path)
    repository = open_repository(storage_path)
    if args.reset:
        repository.store.remove_item(repository.key)
        logger.info("Removed saved inventory from %s", storage_path)
    if args.export or args.no_ui:
        parts = load_initial_parts(repository)
        if args.export:
            target = export_parts_xlsx(parts, Path(args.export))
            print(f"Exported {len(parts)} parts to {target}")
        if args.no_ui:
            print(f"Parts: {len(parts)}, total value: {format_price(total_value(parts))}")
            return 0
    return run_ui(repository, settings)


if __name__ == "__main__":
    raise SystemExit(main())
