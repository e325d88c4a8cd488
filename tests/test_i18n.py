from pim_app.i18n import TRANSLATIONS, normalize_language, tr


def test_normalize_language():
    assert normalize_language("NL ") == "nl"
    assert normalize_language("de") == "en"
    assert normalize_language("") == "en"


def test_tr_formats_and_falls_back():
    assert tr("en", "list_title", count=3) == "Parts Inventory (3 items)"
    assert tr("nl", "unknown_key") == "unknown_key"
    assert tr("en", "list_title") == "Parts Inventory ({count} items)"


def test_languages_share_keys():
    assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["nl"])
