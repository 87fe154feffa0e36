"""Widget liste de cartes (séries ou épisodes)."""

from __future__ import annotations

import html
import logging
from collections import deque
from collections.abc import Sequence
from typing import Callable, Union

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from showcatalog.app.browser_controller import FetchRunner
from showcatalog.core.models import Episode, Show
from showcatalog.core.ordering import format_episode_label
from showcatalog.core.selection import CardKind

logger = logging.getLogger(__name__)

ImageFetcher = Callable[[str], bytes]

IMAGE_WIDTH = 210
MAX_IMAGE_JOBS = 4


def image_alt_text(item: Union[Show, Episode]) -> str:
    if item.image:
        return f"Image from {item.name}"
    return "No image available"


def card_title(item: Union[Show, Episode], kind: CardKind) -> str:
    if kind == "show":
        return item.name
    return format_episode_label(item)  # type: ignore[arg-type]


class CardListWidget(QScrollArea):
    """
    Zone défilante qui affiche une carte par élément, ou un message plein cadre.

    Les images sont téléchargées en arrière-plan une fois `set_image_source`
    appelé ; le texte alternatif reste affiché tant que l'image n'est pas décodée.
    Chaque rendu incrémente une génération : les téléchargements d'un rendu
    précédent sont abandonnés (file) ou ignorés (déjà lancés).
    """

    def __init__(self, parent: QWidget | None = None, *, max_image_jobs: int = MAX_IMAGE_JOBS) -> None:
        super().__init__(parent)
        self.setWidgetResizable(True)
        self._titles: list[str] = []
        self._message = ""
        self._content = QWidget()
        self._layout = QVBoxLayout(self._content)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.setWidget(self._content)

        self._fetch_image: ImageFetcher | None = None
        self._run_fetch: FetchRunner | None = None
        self._max_image_jobs = max(1, max_image_jobs)
        self._generation = 0
        self._image_queue: deque[tuple[str, QLabel]] = deque()
        self._images_in_flight = 0
        self._loaded_images = 0

    def set_image_source(self, fetch_image: ImageFetcher, run_fetch: FetchRunner) -> None:
        self._fetch_image = fetch_image
        self._run_fetch = run_fetch

    def _clear(self) -> None:
        self._generation += 1
        self._image_queue.clear()
        self._loaded_images = 0
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._titles = []
        self._message = ""

    def show_message(self, text: str) -> None:
        self._clear()
        self._message = text
        label = QLabel(text)
        label.setWordWrap(True)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._layout.addWidget(label)

    def set_items(self, items: Sequence[Union[Show, Episode]], kind: CardKind) -> None:
        self._clear()
        for item in items:
            title = card_title(item, kind)
            self._titles.append(title)
            self._layout.addWidget(self._build_card(item, title))
        self._pump_images()

    def _build_card(self, item: Union[Show, Episode], title: str) -> QFrame:
        card = QFrame()
        card.setFrameShape(QFrame.Shape.StyledPanel)
        layout = QVBoxLayout(card)

        title_label = QLabel()
        title_label.setTextFormat(Qt.TextFormat.RichText)
        title_label.setOpenExternalLinks(True)
        escaped = html.escape(title)
        title_label.setText(f'<a href="{html.escape(item.url)}">{escaped}</a>' if item.url else escaped)
        layout.addWidget(title_label)

        alt = image_alt_text(item)
        image_label = QLabel(alt)
        image_label.setAccessibleName(alt)
        if item.image:
            image_label.setToolTip(alt)
            if self._fetch_image is not None:
                self._image_queue.append((item.image, image_label))
        layout.addWidget(image_label)

        summary_label = QLabel()
        summary_label.setTextFormat(Qt.TextFormat.RichText)
        summary_label.setWordWrap(True)
        summary_label.setText(item.summary or "")
        layout.addWidget(summary_label)
        return card

    # --- Images -------------------------------------------------------------

    def _pump_images(self) -> None:
        fetch_image, run_fetch = self._fetch_image, self._run_fetch
        if fetch_image is None or run_fetch is None:
            return
        while self._image_queue and self._images_in_flight < self._max_image_jobs:
            url, label = self._image_queue.popleft()
            generation = self._generation
            self._images_in_flight += 1
            run_fetch(
                lambda url=url: fetch_image(url),
                lambda data, label=label, generation=generation: self._on_image_loaded(generation, label, data),
                lambda exc, url=url: self._on_image_failed(url, exc),
            )

    def _on_image_loaded(self, generation: int, label: QLabel, data: bytes) -> None:
        self._images_in_flight -= 1
        if generation == self._generation:
            pixmap = QPixmap()
            if pixmap.loadFromData(data):
                label.setText("")
                label.setPixmap(
                    pixmap.scaledToWidth(IMAGE_WIDTH, Qt.TransformationMode.SmoothTransformation)
                )
                self._loaded_images += 1
            else:
                logger.debug("Undecodable card image (%d bytes)", len(data))
        self._pump_images()

    def _on_image_failed(self, url: str, exc: Exception) -> None:
        # L'image est décorative : le texte alternatif reste affiché.
        self._images_in_flight -= 1
        logger.debug("Card image %s not loaded: %s", url, exc)
        self._pump_images()

    # --- Inspection -----------------------------------------------------------

    def card_count(self) -> int:
        return len(self._titles)

    def card_titles(self) -> list[str]:
        return list(self._titles)

    def message(self) -> str:
        return self._message

    def loaded_image_count(self) -> int:
        return self._loaded_images

    def pending_image_count(self) -> int:
        return len(self._image_queue)
