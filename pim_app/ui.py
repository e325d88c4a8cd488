from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path
import sqlite3
import sys
import threading
from typing import Callable

from PySide6.QtCore import QTimer, Qt
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QCheckBox,
    QComboBox,
    QDialog,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QSizePolicy,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from . import __version__
from .defaults import load_initial_parts
from .export import export_parts_xlsx
from .i18n import normalize_language, tr
from .manager import PartsCollectionManager
from .models import PAGE_SIZE_OPTIONS, SORT_OPTIONS, Part
from .persistence import PartsRepository, open_repository
from .settings_store import AppSettings, save_settings
from .state import InventoryState, format_price
from .validation import error_messages, validate_part_fields


logger = logging.getLogger(__name__)

TOAST_MS = 3000
ACCENT = "#3498DB"


def run_in_background(
    parent: QWidget | None,
    work: Callable[[], object],
    on_done: Callable[[object, str | None], None],
) -> threading.Thread:
    """Run ``work`` on a worker thread and hand its outcome back on the UI thread."""
    result: dict[str, object] = {"value": None, "error": None, "done": False}

    def _worker() -> None:
        try:
            result["value"] = work()
        except Exception as exc:
            logger.exception("Background task failed")
            result["error"] = str(exc)
        finally:
            result["done"] = True

    worker = threading.Thread(target=_worker, daemon=True)
    worker.start()

    poll_timer = QTimer(parent)

    def _poll() -> None:
        if not bool(result.get("done")):
            return
        poll_timer.stop()
        poll_timer.deleteLater()
        error = result.get("error")
        on_done(result.get("value"), str(error) if error else None)

    poll_timer.setInterval(50)
    poll_timer.timeout.connect(_poll)
    poll_timer.start()
    return worker


class PartForm(QWidget):
    def __init__(
        self,
        manager: PartsCollectionManager,
        language: str = "en",
        on_added: Callable[[Part], None] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.manager = manager
        self.language = normalize_language(language)
        self.on_added = on_added
        layout = QVBoxLayout(self)
        self.title_label = QLabel()
        self.title_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(self.title_label)

        form = QFormLayout()
        self.name_input = QLineEdit()
        self.quantity_input = QLineEdit()
        self.price_input = QLineEdit()
        self.error_labels: dict[str, QLabel] = {}
        self.field_labels: dict[str, QLabel] = {}
        for field_name, widget in (
            ("name", self.name_input),
            ("quantity", self.quantity_input),
            ("price", self.price_input),
        ):
            column = QVBoxLayout()
            column.addWidget(widget)
            error_label = QLabel("")
            error_label.setStyleSheet("color: #E74C3C;")
            error_label.setVisible(False)
            column.addWidget(error_label)
            self.error_labels[field_name] = error_label
            label = QLabel()
            self.field_labels[field_name] = label
            form.addRow(label, column)
            widget.returnPressed.connect(self.submit)
        layout.addLayout(form)

        self.add_button = QPushButton()
        self.add_button.clicked.connect(self.submit)
        layout.addWidget(self.add_button)
        layout.addStretch(1)
        self.apply_translations()

    def apply_translations(self) -> None:
        self.title_label.setText(tr(self.language, "form_title"))
        self.field_labels["name"].setText(tr(self.language, "form_name"))
        self.field_labels["quantity"].setText(tr(self.language, "form_quantity"))
        self.field_labels["price"].setText(tr(self.language, "form_price"))
        self.name_input.setPlaceholderText(tr(self.language, "form_name_placeholder"))
        self.quantity_input.setPlaceholderText(tr(self.language, "form_quantity_placeholder"))
        self.price_input.setPlaceholderText(tr(self.language, "form_price_placeholder"))
        self.add_button.setText(tr(self.language, "btn_add_part"))

    def show_errors(self, errors: dict[str, str]) -> None:
        messages = error_messages(errors, self.language)
        for field_name, label in self.error_labels.items():
            message = messages.get(field_name, "")
            label.setText(message)
            label.setVisible(bool(message))

    def submit(self) -> None:
        result = validate_part_fields(
            self.name_input.text(),
            self.quantity_input.text(),
            self.price_input.text(),
        )
        self.show_errors(result.errors)
        if result.payload is None:
            return
        part = self.manager.add_part(result.payload)
        self.name_input.clear()
        self.quantity_input.clear()
        self.price_input.clear()
        self.name_input.setFocus()
        if self.on_added is not None:
            self.on_added(part)


class PartList(QWidget):
    def __init__(
        self,
        manager: PartsCollectionManager,
        language: str = "en",
        on_deleted: Callable[[int], None] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.manager = manager
        self.language = normalize_language(language)
        self.on_deleted = on_deleted
        self._suspend_item_changed = False
        layout = QVBoxLayout(self)

        self.title_label = QLabel()
        self.title_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(self.title_label)

        options = QHBoxLayout()
        self.sort_label = QLabel()
        self.sort_combo = QComboBox()
        for option in SORT_OPTIONS:
            self.sort_combo.addItem("", option)
        self.select_button = QPushButton()
        self.page_size_label = QLabel()
        self.page_size_combo = QComboBox()
        for size in PAGE_SIZE_OPTIONS:
            self.page_size_combo.addItem(str(size), size)
        options.addWidget(self.sort_label)
        options.addWidget(self.sort_combo)
        options.addStretch(1)
        options.addWidget(self.select_button)
        options.addStretch(1)
        options.addWidget(self.page_size_label)
        options.addWidget(self.page_size_combo)
        layout.addLayout(options)

        self.delete_button = QPushButton()
        self.delete_button.setStyleSheet("background: #E74C3C; color: white;")
        self.delete_button.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        layout.addWidget(self.delete_button)

        self.empty_label = QLabel()
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.empty_label)

        self.table = QTableWidget(0, 5)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.table.verticalHeader().setVisible(False)
        layout.addWidget(self.table, 1)

        pagination = QHBoxLayout()
        self.pagination_info = QLabel()
        self.prev_button = QPushButton("<")
        self.next_button = QPushButton(">")
        self.page_buttons_layout = QHBoxLayout()
        pagination.addWidget(self.pagination_info)
        pagination.addStretch(1)
        pagination.addWidget(self.prev_button)
        pagination.addLayout(self.page_buttons_layout)
        pagination.addWidget(self.next_button)
        self.pagination_container = QWidget()
        self.pagination_container.setLayout(pagination)
        layout.addWidget(self.pagination_container)

        self.total_label = QLabel()
        self.total_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.total_label.setStyleSheet("font-weight: bold; padding: 10px;")
        layout.addWidget(self.total_label)

        self.sort_combo.currentIndexChanged.connect(self.on_sort_changed)
        self.page_size_combo.currentIndexChanged.connect(self.on_page_size_changed)
        self.select_button.clicked.connect(self.manager.toggle_select_mode)
        self.delete_button.clicked.connect(self.bulk_delete)
        self.prev_button.clicked.connect(self.manager.previous_page)
        self.next_button.clicked.connect(self.manager.next_page)
        self.table.itemChanged.connect(self.on_item_changed)
        self.manager.subscribe(self.render)

        self.apply_translations()

    def apply_translations(self) -> None:
        self.sort_label.setText(tr(self.language, "sort_by"))
        for idx, option in enumerate(SORT_OPTIONS):
            key = f"sort_{option}" if option else "sort_default"
            self.sort_combo.setItemText(idx, tr(self.language, key))
        self.page_size_label.setText(tr(self.language, "items_per_page"))
        self.empty_label.setText(tr(self.language, "list_empty"))
        self.render(self.manager.state)

    def on_sort_changed(self, _index: int) -> None:
        self.manager.set_sort_option(str(self.sort_combo.currentData() or ""))

    def on_page_size_changed(self, _index: int) -> None:
        size = self.page_size_combo.currentData()
        if size:
            self.manager.set_page_size(int(size))

    def on_item_changed(self, item: QTableWidgetItem) -> None:
        if self._suspend_item_changed or item.column() != 0:
            return
        part_id = item.data(Qt.ItemDataRole.UserRole)
        if part_id:
            # the table is rebuilt on every state change; leave the signal first
            QTimer.singleShot(0, lambda pid=str(part_id): self.manager.toggle_selection(pid))

    def bulk_delete(self) -> None:
        if not self.manager.request_bulk_delete():
            return
        count = len(self.manager.state.selected)
        box = QMessageBox(self)
        box.setIcon(QMessageBox.Icon.Warning)
        box.setWindowTitle(tr(self.language, "confirm_delete_title"))
        if count == 1:
            box.setText(tr(self.language, "confirm_delete_msg_one"))
            confirm_text = tr(self.language, "btn_confirm_delete_one")
        else:
            box.setText(tr(self.language, "confirm_delete_msg_many"))
            confirm_text = tr(self.language, "btn_confirm_delete_many", count=count)
        confirm_button = box.addButton(confirm_text, QMessageBox.ButtonRole.DestructiveRole)
        cancel_button = box.addButton(tr(self.language, "btn_cancel"), QMessageBox.ButtonRole.RejectRole)
        box.setDefaultButton(cancel_button)
        box.exec()
        if box.clickedButton() is confirm_button:
            removed = self.manager.confirm_bulk_delete()
            if self.on_deleted is not None:
                self.on_deleted(removed)
        else:
            self.manager.cancel_bulk_delete()

    def _sync_combos(self, state: InventoryState) -> None:
        sort_index = self.sort_combo.findData(state.sort.to_option())
        if sort_index >= 0 and sort_index != self.sort_combo.currentIndex():
            self.sort_combo.blockSignals(True)
            self.sort_combo.setCurrentIndex(sort_index)
            self.sort_combo.blockSignals(False)
        size_index = self.page_size_combo.findData(state.page_size)
        if size_index < 0:
            self.page_size_combo.addItem(str(state.page_size), state.page_size)
            size_index = self.page_size_combo.count() - 1
        if size_index != self.page_size_combo.currentIndex():
            self.page_size_combo.blockSignals(True)
            self.page_size_combo.setCurrentIndex(size_index)
            self.page_size_combo.blockSignals(False)

    def _rebuild_page_buttons(self, state: InventoryState) -> None:
        while self.page_buttons_layout.count():
            item = self.page_buttons_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        for page in state.page_numbers:
            button = QPushButton(str(page))
            button.setFixedWidth(36)
            if page == state.current_page:
                button.setStyleSheet(f"background: {ACCENT}; color: white; border: none;")
            button.clicked.connect(lambda _checked=False, p=page: self.manager.go_to_page(p))
            self.page_buttons_layout.addWidget(button)

    def render(self, state: InventoryState) -> None:
        count = len(state.parts)
        has_parts = count > 0
        if has_parts:
            self.title_label.setText(tr(self.language, "list_title", count=count))
        else:
            self.title_label.setText(tr(self.language, "list_title_empty"))
        self.empty_label.setVisible(not has_parts)
        self.table.setVisible(has_parts)
        self.total_label.setVisible(has_parts)
        self._sync_combos(state)

        self.select_button.setText(tr(self.language, "btn_cancel" if state.select_mode else "btn_select"))
        self.delete_button.setVisible(state.select_mode and bool(state.selected))
        self.delete_button.setText(tr(self.language, "btn_delete_selected", count=len(state.selected)))

        headers = [
            tr(self.language, "col_select"),
            tr(self.language, "col_name"),
            tr(self.language, "col_quantity"),
            tr(self.language, "col_price"),
            tr(self.language, "col_total"),
        ]
        rows = state.visible_parts
        self._suspend_item_changed = True
        try:
            self.table.setHorizontalHeaderLabels(headers)
            self.table.setColumnHidden(0, not state.select_mode)
            self.table.setRowCount(len(rows))
            for row_idx, part in enumerate(rows):
                check_item = QTableWidgetItem()
                check_item.setData(Qt.ItemDataRole.UserRole, part.id)
                check_item.setFlags(Qt.ItemFlag.ItemIsUserCheckable | Qt.ItemFlag.ItemIsEnabled)
                selected = part.id in state.selected
                check_item.setCheckState(Qt.CheckState.Checked if selected else Qt.CheckState.Unchecked)
                self.table.setItem(row_idx, 0, check_item)
                values = [
                    part.name,
                    str(part.quantity),
                    format_price(part.price),
                    format_price(part.total_value),
                ]
                for col_idx, value in enumerate(values, start=1):
                    item = QTableWidgetItem(value)
                    if col_idx > 1:
                        item.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
                    if selected:
                        item.setBackground(QColor("#D6EAF8"))
                    self.table.setItem(row_idx, col_idx, item)
        finally:
            self._suspend_item_changed = False

        pages = state.total_pages
        self.pagination_container.setVisible(pages > 1)
        start, end = state.page_range
        self.pagination_info.setText(tr(self.language, "pagination_info", start=start, end=end, count=count))
        self.prev_button.setEnabled(state.current_page > 1)
        self.next_button.setEnabled(state.current_page < pages)
        self._rebuild_page_buttons(state)
        self.total_label.setText(tr(self.language, "total_value", value=format_price(state.total_value)))


class SettingsDialog(QDialog):
    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.language = normalize_language(settings.language)
        self.setWindowTitle(tr(self.language, "settings_title"))
        self.resize(640, 260)
        layout = QVBoxLayout(self)

        layout.addWidget(QLabel(tr(self.language, "settings_storage")))
        storage_row = QHBoxLayout()
        self.storage_input = QLineEdit(settings.storage_path)
        storage_browse = QPushButton(tr(self.language, "settings_browse"))
        storage_browse.clicked.connect(self.browse_storage_path)
        storage_row.addWidget(self.storage_input)
        storage_row.addWidget(storage_browse)
        layout.addLayout(storage_row)

        layout.addWidget(QLabel(tr(self.language, "settings_export_path")))
        export_row = QHBoxLayout()
        self.export_input = QLineEdit(settings.export_path)
        export_browse = QPushButton(tr(self.language, "settings_browse"))
        export_browse.clicked.connect(self.browse_export_path)
        export_row.addWidget(self.export_input)
        export_row.addWidget(export_browse)
        layout.addLayout(export_row)

        self.theme_toggle = QCheckBox(tr(self.language, "settings_dark_mode"))
        self.theme_toggle.setChecked(settings.theme_mode == "dark")
        layout.addWidget(self.theme_toggle)

        language_row = QHBoxLayout()
        language_row.addWidget(QLabel(tr(self.language, "settings_language")))
        self.language_combo = QComboBox()
        self.language_combo.addItem(tr(self.language, "lang_name_en"), "en")
        self.language_combo.addItem(tr(self.language, "lang_name_nl"), "nl")
        self.language_combo.setCurrentIndex(1 if self.language == "nl" else 0)
        language_row.addWidget(self.language_combo)
        language_row.addStretch(1)
        layout.addLayout(language_row)

        page_size_row = QHBoxLayout()
        page_size_row.addWidget(QLabel(tr(self.language, "settings_page_size")))
        self.page_size_combo = QComboBox()
        for size in PAGE_SIZE_OPTIONS:
            self.page_size_combo.addItem(str(size), size)
        self.page_size_combo.setCurrentIndex(max(0, self.page_size_combo.findData(settings.page_size)))
        page_size_row.addWidget(self.page_size_combo)
        page_size_row.addStretch(1)
        layout.addLayout(page_size_row)

        actions = QHBoxLayout()
        save_button = QPushButton(tr(self.language, "settings_save"))
        cancel_button = QPushButton(tr(self.language, "settings_cancel"))
        save_button.clicked.connect(self.accept)
        cancel_button.clicked.connect(self.reject)
        actions.addStretch(1)
        actions.addWidget(save_button)
        actions.addWidget(cancel_button)
        layout.addLayout(actions)

    def browse_storage_path(self) -> None:
        selected, _ = QFileDialog.getSaveFileName(
            self,
            tr(self.language, "settings_storage"),
            self.storage_input.text(),
            "SQLite (*.db)",
        )
        if selected:
            self.storage_input.setText(selected)

    def browse_export_path(self) -> None:
        selected = QFileDialog.getExistingDirectory(
            self,
            tr(self.language, "settings_export_path"),
            self.export_input.text(),
        )
        if selected:
            self.export_input.setText(selected)

    def selected_settings(self) -> AppSettings:
        return AppSettings(
            storage_path=self.storage_input.text().strip(),
            theme_mode="dark" if self.theme_toggle.isChecked() else "light",
            language=normalize_language(str(self.language_combo.currentData())),
            page_size=int(self.page_size_combo.currentData() or PAGE_SIZE_OPTIONS[0]),
            export_path=self.export_input.text().strip(),
        )


class MainWindow(QMainWindow):
    def __init__(
        self,
        manager: PartsCollectionManager,
        repository: PartsRepository,
        settings: AppSettings,
    ) -> None:
        super().__init__()
        self.manager = manager
        self.repository = repository
        self.settings = settings
        self.language = normalize_language(settings.language)
        self._saving = False
        self.resize(1150, 700)

        root = QWidget()
        self.setCentralWidget(root)
        root_layout = QVBoxLayout(root)

        header = QHBoxLayout()
        titles = QVBoxLayout()
        self.title_label = QLabel()
        self.title_label.setStyleSheet("font-size: 24px; font-weight: bold;")
        self.subtitle_label = QLabel()
        titles.addWidget(self.title_label)
        titles.addWidget(self.subtitle_label)
        header.addLayout(titles)
        header.addStretch(1)
        self.export_button = QPushButton()
        self.settings_button = QPushButton()
        header.addWidget(self.export_button)
        header.addWidget(self.settings_button)
        root_layout.addLayout(header)

        content = QHBoxLayout()
        self.part_form = PartForm(manager, self.language, on_added=self.on_part_added)
        self.part_list = PartList(manager, self.language, on_deleted=self.on_parts_deleted)
        content.addWidget(self.part_form, 2)
        content.addWidget(self.part_list, 3)
        root_layout.addLayout(content, 1)

        save_row = QHBoxLayout()
        self.save_button = QPushButton()
        self.save_button.setStyleSheet("font-size: 18px; padding: 12px 30px; background: #27AE60; color: white;")
        save_row.addStretch(1)
        save_row.addWidget(self.save_button)
        save_row.addStretch(1)
        root_layout.addLayout(save_row)

        self.save_button.clicked.connect(self.save_inventory)
        self.export_button.clicked.connect(self.export_inventory)
        self.settings_button.clicked.connect(self.open_settings)

        self.apply_translations()

    def apply_translations(self) -> None:
        self.setWindowTitle(tr(self.language, "window_title", version=__version__))
        self.title_label.setText(tr(self.language, "window_title", version=__version__).rsplit(" v", 1)[0])
        self.subtitle_label.setText(tr(self.language, "header_subtitle"))
        self.export_button.setText(tr(self.language, "btn_export"))
        self.settings_button.setText(tr(self.language, "btn_settings"))
        self.save_button.setText(tr(self.language, "btn_saving" if self._saving else "btn_save"))
        self.part_form.language = self.language
        self.part_form.apply_translations()
        self.part_list.language = self.language
        self.part_list.apply_translations()

    def toast(self, message: str) -> None:
        self.statusBar().showMessage(message, TOAST_MS)

    def on_part_added(self, part: Part) -> None:
        self.toast(tr(self.language, "toast_added", name=part.name))

    def on_parts_deleted(self, count: int) -> None:
        if count:
            self.toast(tr(self.language, "toast_deleted", count=count))

    def save_inventory(self) -> None:
        if self._saving:
            return
        snapshot = self.manager.snapshot()
        self._saving = True
        self.save_button.setEnabled(False)
        self.save_button.setText(tr(self.language, "btn_saving"))

        def _done(_value: object, error: str | None) -> None:
            self._saving = False
            self.save_button.setEnabled(True)
            self.save_button.setText(tr(self.language, "btn_save"))
            if error:
                QMessageBox.warning(
                    self,
                    tr(self.language, "save_failed_title"),
                    tr(self.language, "save_failed_msg", error=error),
                )
                return
            self.toast(tr(self.language, "toast_saved"))

        run_in_background(self, lambda: self.repository.save(list(snapshot)), _done)

    def export_inventory(self) -> None:
        parts = self.manager.snapshot()
        if not parts:
            QMessageBox.information(self, tr(self.language, "export_title"), tr(self.language, "export_empty"))
            return
        export_root = Path(self.settings.export_path) if self.settings.export_path else None
        if export_root is None or not export_root.is_dir():
            selected = QFileDialog.getExistingDirectory(self, tr(self.language, "export_title"))
            if not selected:
                return
            export_root = Path(selected)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        target = export_root / f"PIM_Inventory_{timestamp}.xlsx"
        try:
            export_parts_xlsx(parts, target, sort=self.manager.state.sort)
        except OSError as exc:
            logger.exception("Export to %s failed", target)
            QMessageBox.warning(
                self,
                tr(self.language, "export_title"),
                tr(self.language, "export_failed_msg", error=str(exc)),
            )
            return
        QMessageBox.information(
            self,
            tr(self.language, "export_title"),
            tr(self.language, "export_done_msg", path=target),
        )

    def open_settings(self) -> None:
        dlg = SettingsDialog(self.settings, parent=self)
        if dlg.exec() != QDialog.DialogCode.Accepted:
            return
        new_settings = dlg.selected_settings()
        if not new_settings.storage_path:
            QMessageBox.warning(
                self,
                tr(self.language, "settings_invalid_title"),
                tr(self.language, "settings_invalid_empty"),
            )
            return
        storage_changed = Path(new_settings.storage_path).resolve() != Path(self.settings.storage_path).resolve()
        if storage_changed:
            try:
                repository = open_repository(new_settings.storage_path)
            except (sqlite3.Error, OSError) as exc:
                logger.exception("Could not open storage %s", new_settings.storage_path)
                QMessageBox.warning(
                    self,
                    tr(self.language, "settings_invalid_title"),
                    tr(self.language, "settings_storage_failed", error=str(exc)),
                )
                return
            self.repository = repository
            logger.info("Inventory storage moved to %s", new_settings.storage_path)
        save_settings(new_settings)
        page_size_changed = new_settings.page_size != self.settings.page_size
        self.settings = new_settings
        self.language = normalize_language(new_settings.language)
        apply_app_theme(new_settings.theme_mode)
        if page_size_changed:
            self.manager.set_page_size(new_settings.page_size)
        self.apply_translations()
        if storage_changed:
            QMessageBox.information(
                self,
                tr(self.language, "settings_title"),
                tr(self.language, "settings_storage_moved", path=new_settings.storage_path),
            )


_PALETTES: dict[str, dict[QPalette.ColorRole, str]] = {
    "dark": {
        QPalette.ColorRole.Window: "#1E1E1E",
        QPalette.ColorRole.WindowText: "#EDEDED",
        QPalette.ColorRole.Base: "#252525",
        QPalette.ColorRole.AlternateBase: "#1E1E1E",
        QPalette.ColorRole.Text: "#F2F2F2",
        QPalette.ColorRole.Button: "#2B2B2B",
        QPalette.ColorRole.ButtonText: "#F2F2F2",
        QPalette.ColorRole.Highlight: ACCENT,
        QPalette.ColorRole.HighlightedText: "#FFFFFF",
    },
    "light": {
        QPalette.ColorRole.Window: "#F8F9FA",
        QPalette.ColorRole.WindowText: "#111111",
        QPalette.ColorRole.Base: "#FFFFFF",
        QPalette.ColorRole.AlternateBase: "#F7F7F7",
        QPalette.ColorRole.Text: "#111111",
        QPalette.ColorRole.Button: "#F3F4F6",
        QPalette.ColorRole.ButtonText: "#111111",
        QPalette.ColorRole.Highlight: ACCENT,
        QPalette.ColorRole.HighlightedText: "#FFFFFF",
    },
}


def apply_app_theme(theme_mode: str) -> None:
    app = QApplication.instance()
    if app is None:
        return
    app.setStyle("Fusion")
    mode = theme_mode if theme_mode in _PALETTES else "light"
    palette = QPalette()
    for role, color in _PALETTES[mode].items():
        palette.setColor(role, QColor(color))
    app.setPalette(palette)


def run_ui(repository: PartsRepository, settings: AppSettings) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    apply_app_theme(settings.theme_mode)
    language = normalize_language(settings.language)

    loading_dialog = QDialog()
    loading_dialog.setWindowTitle(tr(language, "load_title"))
    loading_dialog.setModal(True)
    loading_dialog.setWindowFlag(Qt.WindowType.WindowCloseButtonHint, False)
    loading_dialog.setFixedSize(380, 100)
    loading_layout = QVBoxLayout(loading_dialog)
    loading_layout.addWidget(QLabel(tr(language, "load_msg")))
    loading_bar = QProgressBar()
    loading_bar.setRange(0, 0)
    loading_layout.addWidget(loading_bar)

    loaded: dict[str, object] = {"parts": [], "error": None}

    def _loaded(value: object, error: str | None) -> None:
        loaded["parts"] = value or []
        loaded["error"] = error
        loading_dialog.accept()

    worker = run_in_background(loading_dialog, lambda: load_initial_parts(repository, delay_seconds=0.5), _loaded)
    loading_dialog.exec()
    worker.join(timeout=10.0)

    if loaded["error"]:
        QMessageBox.warning(
            None,
            tr(language, "load_failed_title"),
            tr(language, "load_failed_msg", error=str(loaded["error"])),
        )
    parts = loaded["parts"] if isinstance(loaded["parts"], list) else []
    manager = PartsCollectionManager(parts, page_size=settings.page_size)
    win = MainWindow(manager, repository, settings)
    win.show()
    return app.exec()
