from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from .models import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS


@dataclass
class AppSettings:
    storage_path: str
    theme_mode: str = "light"
    language: str = "en"
    page_size: int = DEFAULT_PAGE_SIZE
    export_path: str = ""


def app_data_dir() -> Path:
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / "PIM"
    return Path.home() / ".pim"


def default_settings_path() -> Path:
    return app_data_dir() / "settings.json"


def default_storage_path() -> Path:
    return app_data_dir() / "inventory.db"


def default_log_dir() -> Path:
    return app_data_dir() / "logs"


def default_export_path() -> Path:
    return Path.home() / "Documents" / "PIM-Export"


def normalize_page_size(value: object) -> int:
    try:
        size = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return DEFAULT_PAGE_SIZE
    return size if size in PAGE_SIZE_OPTIONS else DEFAULT_PAGE_SIZE


def default_settings() -> AppSettings:
    return AppSettings(
        storage_path=str(default_storage_path()),
        export_path=str(default_export_path()),
    )


def load_settings(settings_path: Path | None = None) -> AppSettings:
    path = settings_path or default_settings_path()
    if not path.exists():
        return default_settings()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        raw_storage_path = str(payload.get("storage_path", "") or "").strip()
        storage_path = raw_storage_path or str(default_storage_path())
        theme_mode = str(payload.get("theme_mode", "light")).lower()
        if theme_mode not in {"light", "dark"}:
            theme_mode = "light"
        language = str(payload.get("language", "en")).lower()
        if language not in {"en", "nl"}:
            language = "en"
        page_size = normalize_page_size(payload.get("page_size", DEFAULT_PAGE_SIZE))
        raw_export_path = str(payload.get("export_path", "") or "").strip()
        export_path = raw_export_path or str(default_export_path())
        return AppSettings(
            storage_path=storage_path,
            theme_mode=theme_mode,
            language=language,
            page_size=page_size,
            export_path=export_path,
        )
    except Exception:
        return default_settings()


def save_settings(settings: AppSettings, settings_path: Path | None = None) -> None:
    path = settings_path or default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    theme_mode = settings.theme_mode if settings.theme_mode in {"light", "dark"} else "light"
    language = settings.language if settings.language in {"en", "nl"} else "en"
    payload = {
        "storage_path": str(settings.storage_path or ""),
        "theme_mode": theme_mode,
        "language": language,
        "page_size": normalize_page_size(settings.page_size),
        "export_path": str(settings.export_path or ""),
    }
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
