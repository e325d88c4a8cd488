from pathlib import Path

from pim_app.settings_store import AppSettings, load_settings, save_settings


def test_settings_store_roundtrip(tmp_path: Path):
    settings_path = tmp_path / "settings.json"
    loaded = load_settings(settings_path=settings_path)
    assert loaded.theme_mode == "light"
    assert loaded.language == "en"
    assert loaded.page_size == 5
    assert loaded.storage_path

    save_settings(
        AppSettings(
            storage_path=str(tmp_path / "inventory.db"),
            theme_mode="dark",
            language="nl",
            page_size=20,
        ),
        settings_path=settings_path,
    )
    reloaded = load_settings(settings_path=settings_path)
    assert reloaded.storage_path == str(tmp_path / "inventory.db")
    assert reloaded.theme_mode == "dark"
    assert reloaded.language == "nl"
    assert reloaded.page_size == 20
    assert reloaded.export_path


def test_invalid_values_fall_back(tmp_path: Path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        '{"theme_mode": "purple", "language": "fr", "page_size": 7, "storage_path": ""}',
        encoding="utf-8",
    )
    loaded = load_settings(settings_path=settings_path)
    assert loaded.theme_mode == "light"
    assert loaded.language == "en"
    assert loaded.page_size == 5
    assert loaded.storage_path.endswith("inventory.db")


def test_unreadable_file_falls_back(tmp_path: Path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{broken", encoding="utf-8")
    assert load_settings(settings_path=settings_path).page_size == 5
