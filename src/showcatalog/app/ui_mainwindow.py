"""Fenêtre principale : sélecteurs série/épisode, recherche, cartes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Union

from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from showcatalog import __version__
from showcatalog.app.browser_controller import CatalogBrowserController
from showcatalog.app.feedback import show_error
from showcatalog.app.presentation import (
    EPISODE_SELECTOR,
    Placeholder,
    SelectorName,
    SelectorOption,
)
from showcatalog.app.qt_helpers import fill_combo, select_combo_value
from showcatalog.app.widgets import CardListWidget
from showcatalog.core.models import Episode, Show
from showcatalog.core.selection import CardKind

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Adapteur de présentation Qt : implémente `Presenter` et relaie les saisies au contrôleur."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(f"ShowCatalog {__version__}")
        self.setMinimumSize(640, 480)
        screen = QApplication.primaryScreen().availableGeometry() if QApplication.primaryScreen() else None
        if screen:
            self.resize(min(1000, screen.width()), min(700, screen.height()))
        else:
            self.resize(1000, 700)
        self._controller: CatalogBrowserController | None = None

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        controls = QHBoxLayout()
        self.show_combo = QComboBox()
        self.show_combo.setMinimumWidth(220)
        controls.addWidget(self.show_combo)
        self.episode_combo = QComboBox()
        self.episode_combo.setMinimumWidth(260)
        controls.addWidget(self.episode_combo)
        self.keyword_edit = QLineEdit()
        self.keyword_edit.setPlaceholderText("Search episodes…")
        self.keyword_edit.setClearButtonEnabled(True)
        controls.addWidget(self.keyword_edit, 1)
        layout.addLayout(controls)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

        self.cards = CardListWidget()
        layout.addWidget(self.cards, 1)

        self.show_combo.currentIndexChanged.connect(self._on_show_changed)
        self.episode_combo.currentIndexChanged.connect(self._on_episode_changed)
        self.keyword_edit.textChanged.connect(self._on_keyword_changed)

    def attach_controller(self, controller: CatalogBrowserController) -> None:
        self._controller = controller

    # --- Événements UI -> contrôleur --------------------------------------

    def _on_show_changed(self, _index: int) -> None:
        if self._controller is not None:
            self._controller.select_show(self.show_combo.currentData())

    def _on_episode_changed(self, _index: int) -> None:
        if self._controller is not None:
            self._controller.select_episode(self.episode_combo.currentData())

    def _on_keyword_changed(self, text: str) -> None:
        if self._controller is not None:
            self._controller.set_keyword(text)

    # --- Presenter ---------------------------------------------------------

    def _combo(self, selector: SelectorName) -> QComboBox:
        return self.episode_combo if selector == EPISODE_SELECTOR else self.show_combo

    def render_list(self, items: Sequence[Union[Show, Episode]], kind: CardKind) -> None:
        self.cards.set_items(items, kind)

    def populate_selector(
        self,
        selector: SelectorName,
        options: Sequence[SelectorOption],
        placeholders: Sequence[Placeholder],
    ) -> None:
        fill_combo(self._combo(selector), options=options, placeholders=placeholders)

    def select_value(self, selector: SelectorName, value: str) -> None:
        select_combo_value(self._combo(selector), value)

    def set_keyword_text(self, text: str) -> None:
        self.keyword_edit.blockSignals(True)
        self.keyword_edit.setText(text)
        self.keyword_edit.blockSignals(False)

    def set_status(self, text: str) -> None:
        self.status_label.setText(text)

    def show_message(self, text: str) -> None:
        self.status_label.setText("")
        self.cards.show_message(text)

    def show_error(self, message: str) -> None:
        show_error(self, message=message)

    def set_controls_enabled(self, enabled: bool) -> None:
        for widget in (self.show_combo, self.episode_combo, self.keyword_edit):
            widget.setEnabled(enabled)
