"""Tests de la fenêtre principale (adapteur de présentation Qt)."""

from __future__ import annotations

import os

import pytest
from PySide6.QtCore import QBuffer, QIODevice
from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QApplication

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from showcatalog.app.browser_controller import CatalogBrowserController, run_sync  # noqa: E402
from showcatalog.app.presentation import LOAD_FAILED_MESSAGE  # noqa: E402
from showcatalog.app.ui_mainwindow import MainWindow  # noqa: E402
from showcatalog.app.widgets import CardListWidget, image_alt_text  # noqa: E402
from showcatalog.core.errors import ApiError  # noqa: E402
from showcatalog.core.selection import ALL_EPISODES  # noqa: E402

from conftest import DeferredRunner, FakeCatalogClient, make_episode, make_show  # noqa: E402


@pytest.fixture
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def _window(client: FakeCatalogClient) -> tuple[MainWindow, CatalogBrowserController]:
    win = MainWindow()
    controller = CatalogBrowserController(client=client, presenter=win)
    win.attach_controller(controller)
    controller.start()
    return win, controller


def _client(ten_episodes) -> FakeCatalogClient:
    return FakeCatalogClient(
        [make_show(2, "Walking Dead"), make_show(1, "Archer", image="https://img/1.jpg")],
        {"2": ten_episodes},
    )


def test_startup_populates_show_combo_and_cards(qapp: QApplication, ten_episodes) -> None:  # noqa: ARG001
    win, _controller = _window(_client(ten_episodes))

    assert win.show_combo.count() == 3
    assert win.show_combo.itemText(0) == "Select a show"
    assert win.show_combo.currentIndex() == 0
    assert win.show_combo.itemData(1) == "1"
    assert win.cards.card_titles() == ["Archer", "Walking Dead"]
    assert win.show_combo.isEnabled()


def test_startup_failure_shows_message_only(qapp: QApplication) -> None:  # noqa: ARG001
    client = FakeCatalogClient()
    client.show_errors.append(ApiError(500))

    win, controller = _window(client)

    assert controller.startup_failed
    assert win.cards.message() == LOAD_FAILED_MESSAGE
    assert win.cards.card_count() == 0
    assert win.show_combo.count() == 0
    assert not win.keyword_edit.isEnabled()


def test_user_flow_show_keyword_episode(qapp: QApplication, ten_episodes) -> None:  # noqa: ARG001
    win, controller = _window(_client(ten_episodes))

    win.show_combo.setCurrentIndex(win.show_combo.findData("2"))
    assert win.cards.card_count() == 10
    assert win.cards.card_titles()[0] == "Days Gone Bye - S01E01"
    assert win.status_label.text() == "Showing all episodes"
    assert win.episode_combo.itemText(0) == "Select an episode"
    assert win.episode_combo.itemText(1) == "All Episodes"
    assert win.episode_combo.count() == 12

    win.keyword_edit.setText("zombie")
    assert win.cards.card_count() == 2
    assert win.status_label.text() == "Displaying 2 of 10 episodes"

    win.episode_combo.setCurrentIndex(win.episode_combo.findData("7"))
    assert win.cards.card_titles() == ["What Lies Ahead - S02E01"]
    assert win.status_label.text() == ""

    win.keyword_edit.setText("")
    assert win.cards.card_count() == 10
    assert win.episode_combo.currentData() == ALL_EPISODES
    assert win.status_label.text() == "Showing all episodes"
    assert controller.state.keyword == ""


def test_switching_show_clears_keyword_field(qapp: QApplication, ten_episodes) -> None:  # noqa: ARG001
    client = _client(ten_episodes)
    client.episodes["1"] = [make_episode(100, 1, 1, "Mole Hunt")]
    win, _controller = _window(client)

    win.show_combo.setCurrentIndex(win.show_combo.findData("2"))
    win.keyword_edit.setText("zombie")
    win.show_combo.setCurrentIndex(win.show_combo.findData("1"))

    assert win.keyword_edit.text() == ""
    assert win.cards.card_titles() == ["Mole Hunt - S01E01"]
    assert win.status_label.text() == "Showing all episodes"


def test_episode_fetch_failure_shows_dialog_and_restores_selection(
    qapp: QApplication,  # noqa: ARG001
    monkeypatch: pytest.MonkeyPatch,
    ten_episodes,
) -> None:
    calls: list[tuple[str, str]] = []
    monkeypatch.setattr(
        "showcatalog.app.feedback.QMessageBox.critical",
        lambda _parent, title, message: calls.append((title, message)),
    )
    client = _client(ten_episodes)
    win, controller = _window(client)

    win.show_combo.setCurrentIndex(win.show_combo.findData("1"))

    assert len(calls) == 1
    assert "404" in calls[0][1]
    assert win.show_combo.currentIndex() == 0
    assert controller.state.selected_show_id is None
    assert win.cards.card_titles() == ["Archer", "Walking Dead"]


def test_image_alt_text() -> None:
    assert image_alt_text(make_show(1, "Archer", image="https://img/1.jpg")) == "Image from Archer"
    assert image_alt_text(make_show(2, "Bare")) == "No image available"


def _png_bytes() -> bytes:
    image = QImage(8, 6, QImage.Format.Format_RGB32)
    image.fill(QColor("steelblue"))
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    image.save(buffer, "PNG")
    buffer.close()
    return bytes(buffer.data().data())


def test_card_images_replace_alt_text_once_loaded(qapp: QApplication) -> None:  # noqa: ARG001
    client = FakeCatalogClient()
    client.images["https://img/1.jpg"] = _png_bytes()
    cards = CardListWidget()
    cards.set_image_source(client.fetch_image, run_sync)

    cards.set_items([make_show(1, "Archer", image="https://img/1.jpg"), make_show(2, "Bare")], "show")

    assert client.fetch_image_calls == ["https://img/1.jpg"]
    assert cards.loaded_image_count() == 1


def test_card_image_failures_keep_alt_text(qapp: QApplication) -> None:  # noqa: ARG001
    client = FakeCatalogClient()
    client.images["https://img/broken.jpg"] = b"not an image"
    cards = CardListWidget()
    cards.set_image_source(client.fetch_image, run_sync)

    cards.set_items(
        [
            make_show(1, "Broken", image="https://img/broken.jpg"),
            make_show(2, "Missing", image="https://img/missing.jpg"),
        ],
        "show",
    )

    assert cards.loaded_image_count() == 0
    assert cards.card_titles() == ["Broken", "Missing"]
    assert sorted(client.fetch_image_calls) == ["https://img/broken.jpg", "https://img/missing.jpg"]


def test_card_images_are_throttled_and_dropped_on_rerender(qapp: QApplication) -> None:  # noqa: ARG001
    client = FakeCatalogClient()
    shows = [make_show(i, f"Show {i}", image=f"https://img/{i}.jpg") for i in range(1, 7)]
    for show in shows:
        client.images[show.image] = _png_bytes()
    runner = DeferredRunner()
    cards = CardListWidget()
    cards.set_image_source(client.fetch_image, runner)

    cards.set_items(shows, "show")
    assert len(runner.pending) == 4
    assert cards.pending_image_count() == 2

    cards.show_message("TVMaze data is coming…")
    while runner.pending:
        runner.complete(0)

    assert cards.loaded_image_count() == 0
    assert cards.pending_image_count() == 0
    assert len(client.fetch_image_calls) == 4


def test_cards_without_image_source_do_not_fetch(qapp: QApplication) -> None:  # noqa: ARG001
    cards = CardListWidget()
    cards.set_items([make_show(1, "Archer", image="https://img/1.jpg")], "show")

    assert cards.pending_image_count() == 0
    assert cards.loaded_image_count() == 0
