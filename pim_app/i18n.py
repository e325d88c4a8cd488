from __future__ import annotations


LANGUAGES = ("en", "nl")

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "lang_name_en": "English",
        "lang_name_nl": "Dutch",
        "window_title": "Parts Inventory Management v{version}",
        "header_subtitle": "Manage your parts inventory with ease",
        "btn_settings": "Settings",
        "btn_export": "Export XLSX",
        "btn_save": "Save Inventory",
        "btn_saving": "Saving...",
        "form_title": "Add New Part",
        "form_name": "Part Name",
        "form_name_placeholder": "Enter part name",
        "form_quantity": "Quantity",
        "form_quantity_placeholder": "Enter quantity",
        "form_price": "Price ($)",
        "form_price_placeholder": "Enter price",
        "btn_add_part": "Add Part",
        "error_name_required": "Part name is required",
        "error_quantity_required": "Quantity is required",
        "error_quantity_non_negative": "Quantity must be a non-negative number",
        "error_quantity_integer": "Quantity must be a whole number",
        "error_price_required": "Price is required",
        "error_price_non_negative": "Price must be a non-negative number",
        "list_title": "Parts Inventory ({count} items)",
        "list_title_empty": "Parts Inventory",
        "list_empty": "No parts in inventory.\nAdd your first part using the form on the left.",
        "sort_by": "Sort by:",
        "sort_default": "Default",
        "sort_name-asc": "Name (A-Z)",
        "sort_name-desc": "Name (Z-A)",
        "sort_price-asc": "Price (Low-High)",
        "sort_price-desc": "Price (High-Low)",
        "sort_quantity-asc": "Quantity (Low-High)",
        "sort_quantity-desc": "Quantity (High-Low)",
        "btn_select": "Select",
        "btn_cancel": "Cancel",
        "items_per_page": "Items per page:",
        "btn_delete_selected": "Delete Selected ({count})",
        "col_select": "Select",
        "col_name": "Name",
        "col_quantity": "Quantity",
        "col_price": "Price",
        "col_total": "Total Value",
        "pagination_info": "Showing {start}-{end} of {count} items",
        "total_value": "Total Inventory Value: {value}",
        "confirm_delete_title": "Confirm Bulk Deletion",
        "confirm_delete_msg_one": "Are you sure you want to delete the selected part?",
        "confirm_delete_msg_many": "Are you sure you want to delete the selected parts?",
        "btn_confirm_delete_one": "Delete 1 Item",
        "btn_confirm_delete_many": "Delete {count} Items",
        "toast_added": "Added \"{name}\" to inventory",
        "toast_deleted": "Deleted {count} part(s) from inventory",
        "toast_saved": "Save successful!",
        "save_failed_title": "Save failed",
        "save_failed_msg": "Failed to save parts data.\n\n{error}",
        "load_title": "Loading",
        "load_msg": "Loading parts inventory...",
        "load_failed_title": "Load failed",
        "load_failed_msg": "Failed to load parts data.\n\n{error}",
        "export_title": "Export inventory",
        "export_empty": "There are no parts to export.",
        "export_done_msg": "Inventory exported to:\n{path}",
        "export_failed_msg": "Export failed.\n\n{error}",
        "settings_title": "Settings",
        "settings_storage": "Inventory storage file",
        "settings_export_path": "Export folder",
        "settings_browse": "Browse...",
        "settings_dark_mode": "Dark mode",
        "settings_language": "Language",
        "settings_page_size": "Default items per page",
        "settings_save": "Save",
        "settings_cancel": "Cancel",
        "settings_invalid_title": "Invalid settings",
        "settings_invalid_empty": "The storage file may not be empty.",
        "settings_storage_failed": "The storage file could not be opened.\n\n{error}",
        "settings_storage_moved": "The current inventory will be saved to:\n{path}",
    },
    "nl": {
        "lang_name_en": "Engels",
        "lang_name_nl": "Nederlands",
        "window_title": "Onderdelen Voorraadbeheer v{version}",
        "header_subtitle": "Beheer je onderdelenvoorraad eenvoudig",
        "btn_settings": "Instellingen",
        "btn_export": "XLSX exporteren",
        "btn_save": "Voorraad opslaan",
        "btn_saving": "Opslaan...",
        "form_title": "Nieuw onderdeel toevoegen",
        "form_name": "Onderdeelnaam",
        "form_name_placeholder": "Voer onderdeelnaam in",
        "form_quantity": "Aantal",
        "form_quantity_placeholder": "Voer aantal in",
        "form_price": "Prijs ($)",
        "form_price_placeholder": "Voer prijs in",
        "btn_add_part": "Onderdeel toevoegen",
        "error_name_required": "Onderdeelnaam is verplicht",
        "error_quantity_required": "Aantal is verplicht",
        "error_quantity_non_negative": "Aantal moet een niet-negatief getal zijn",
        "error_quantity_integer": "Aantal moet een geheel getal zijn",
        "error_price_required": "Prijs is verplicht",
        "error_price_non_negative": "Prijs moet een niet-negatief getal zijn",
        "list_title": "Onderdelenvoorraad ({count} items)",
        "list_title_empty": "Onderdelenvoorraad",
        "list_empty": "Geen onderdelen in voorraad.\nVoeg je eerste onderdeel toe met het formulier links.",
        "sort_by": "Sorteren op:",
        "sort_default": "Standaard",
        "sort_name-asc": "Naam (A-Z)",
        "sort_name-desc": "Naam (Z-A)",
        "sort_price-asc": "Prijs (laag-hoog)",
        "sort_price-desc": "Prijs (hoog-laag)",
        "sort_quantity-asc": "Aantal (laag-hoog)",
        "sort_quantity-desc": "Aantal (hoog-laag)",
        "btn_select": "Selecteren",
        "btn_cancel": "Annuleren",
        "items_per_page": "Items per pagina:",
        "btn_delete_selected": "Selectie verwijderen ({count})",
        "col_select": "Selectie",
        "col_name": "Naam",
        "col_quantity": "Aantal",
        "col_price": "Prijs",
        "col_total": "Totale waarde",
        "pagination_info": "{start}-{end} van {count} items",
        "total_value": "Totale voorraadwaarde: {value}",
        "confirm_delete_title": "Verwijderen bevestigen",
        "confirm_delete_msg_one": "Weet je zeker dat je het geselecteerde onderdeel wilt verwijderen?",
        "confirm_delete_msg_many": "Weet je zeker dat je de geselecteerde onderdelen wilt verwijderen?",
        "btn_confirm_delete_one": "1 item verwijderen",
        "btn_confirm_delete_many": "{count} items verwijderen",
        "toast_added": "\"{name}\" toegevoegd aan voorraad",
        "toast_deleted": "{count} onderdeel/onderdelen verwijderd uit voorraad",
        "toast_saved": "Opslaan gelukt!",
        "save_failed_title": "Opslaan mislukt",
        "save_failed_msg": "Onderdelen konden niet worden opgeslagen.\n\n{error}",
        "load_title": "Laden",
        "load_msg": "Onderdelenvoorraad laden...",
        "load_failed_title": "Laden mislukt",
        "load_failed_msg": "Onderdelen konden niet worden geladen.\n\n{error}",
        "export_title": "Voorraad exporteren",
        "export_empty": "Er zijn geen onderdelen om te exporteren.",
        "export_done_msg": "Voorraad geexporteerd naar:\n{path}",
        "export_failed_msg": "Exporteren mislukt.\n\n{error}",
        "settings_title": "Instellingen",
        "settings_storage": "Opslagbestand voorraad",
        "settings_export_path": "Exportmap",
        "settings_browse": "Bladeren...",
        "settings_dark_mode": "Donkere modus",
        "settings_language": "Taal",
        "settings_page_size": "Standaard items per pagina",
        "settings_save": "Opslaan",
        "settings_cancel": "Annuleren",
        "settings_invalid_title": "Ongeldige instellingen",
        "settings_invalid_empty": "Het opslagbestand mag niet leeg zijn.",
        "settings_storage_failed": "Het opslagbestand kon niet worden geopend.\n\n{error}",
        "settings_storage_moved": "De huidige voorraad wordt opgeslagen in:\n{path}",
    },
}


def normalize_language(language: str) -> str:
    lang = str(language or "en").lower().strip()
    return lang if lang in LANGUAGES else "en"


def tr(language: str, key: str, **kwargs) -> str:
    lang = normalize_language(language)
    value = TRANSLATIONS.get(lang, {}).get(key) or TRANSLATIONS["en"].get(key) or key
    try:
        return value.format(**kwargs)
    except Exception:
        return value
