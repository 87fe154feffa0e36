"""Fixtures pytest communes."""
from __future__ import annotations

from typing import Any

import pytest

from showcatalog.core.errors import ApiError
from showcatalog.core.models import Episode, Show


def make_show(show_id: int, name: str, **kwargs: Any) -> Show:
    return Show(id=show_id, name=name, url=f"https://www.tvmaze.com/shows/{show_id}", **kwargs)


def make_episode(
    episode_id: int,
    season: int,
    number: int,
    name: str = "",
    summary: str = "",
    **kwargs: Any,
) -> Episode:
    return Episode(
        id=episode_id,
        season=season,
        number=number,
        name=name or f"Episode {season}x{number}",
        summary=summary,
        **kwargs,
    )


class FakeCatalogClient:
    """Client catalogue en mémoire ; compte les appels et peut échouer à la demande."""

    id = "fake"

    def __init__(
        self,
        shows: list[Show] | None = None,
        episodes: dict[str, list[Episode]] | None = None,
    ) -> None:
        self.shows = list(shows or [])
        self.episodes = dict(episodes or {})
        self.show_errors: list[Exception] = []
        self.episode_errors: dict[str, Exception] = {}
        self.list_shows_calls = 0
        self.list_episodes_calls: list[str] = []
        self.images: dict[str, bytes] = {}
        self.fetch_image_calls: list[str] = []

    def list_shows(self) -> list[Show]:
        self.list_shows_calls += 1
        if self.show_errors:
            raise self.show_errors.pop(0)
        return list(self.shows)

    def list_episodes(self, show_id) -> list[Episode]:
        key = str(show_id)
        self.list_episodes_calls.append(key)
        error = self.episode_errors.pop(key, None)
        if error is not None:
            raise error
        if key not in self.episodes:
            raise ApiError(404)
        return list(self.episodes[key])

    def fetch_image(self, url: str) -> bytes:
        self.fetch_image_calls.append(url)
        if url not in self.images:
            raise ApiError(404, url=url)
        return self.images[url]


class DeferredRunner:
    """Runner qui met les fetchs en attente pour simuler des réponses tardives."""

    def __init__(self) -> None:
        self.pending: list[tuple] = []

    def __call__(self, fetch, on_success, on_error) -> None:
        self.pending.append((fetch, on_success, on_error))

    def complete(self, index: int) -> None:
        fetch, on_success, on_error = self.pending.pop(index)
        try:
            result = fetch()
        except Exception as exc:
            on_error(exc)
            return
        on_success(result)


class RecordingPresenter:
    """Presenter qui mémorise le dernier état rendu et l'historique des appels."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.items: list[Any] = []
        self.kind: str | None = None
        self.status: str | None = None
        self.message: str | None = None
        self.errors: list[str] = []
        self.selectors: dict[str, tuple[list[Any], list[Any]]] = {}
        self.selected: dict[str, str] = {}
        self.keyword_text: str | None = None
        self.controls_enabled: bool | None = None

    def render_list(self, items, kind) -> None:
        self.calls.append(("render_list", kind))
        self.items = list(items)
        self.kind = kind
        self.message = None

    def populate_selector(self, selector, options, placeholders) -> None:
        self.calls.append(("populate_selector", selector))
        self.selectors[selector] = (list(options), list(placeholders))
        chosen = next((p.value for p in placeholders if p.selected), None)
        if chosen is not None:
            self.selected[selector] = chosen

    def select_value(self, selector, value) -> None:
        self.calls.append(("select_value", (selector, value)))
        self.selected[selector] = value

    def set_keyword_text(self, text) -> None:
        self.calls.append(("set_keyword_text", text))
        self.keyword_text = text

    def set_status(self, text) -> None:
        self.calls.append(("set_status", text))
        self.status = text

    def show_message(self, text) -> None:
        self.calls.append(("show_message", text))
        self.message = text
        self.items = []

    def show_error(self, message) -> None:
        self.calls.append(("show_error", message))
        self.errors.append(message)

    def set_controls_enabled(self, enabled) -> None:
        self.calls.append(("set_controls_enabled", enabled))
        self.controls_enabled = enabled


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def ten_episodes() -> list[Episode]:
    return [
        make_episode(1, 1, 1, "Days Gone Bye", "Rick wakes up in a hospital."),
        make_episode(2, 1, 2, "Guts", "Rick is trapped in Atlanta."),
        make_episode(3, 1, 3, "Tell It to the Frogs", "Rick returns to camp."),
        make_episode(4, 1, 4, "Vatos", "A search for Merle."),
        make_episode(5, 1, 5, "Wildfire", "The group leaves camp."),
        make_episode(6, 1, 6, "TS-19", "Inside the CDC."),
        make_episode(7, 2, 1, "What Lies Ahead", "A herd on the highway."),
        make_episode(8, 2, 2, "Bloodletting", "Carl is shot."),
        make_episode(9, 2, 3, "Zombie Barn", "Hershel hides a secret."),
        make_episode(10, 2, 4, "Night of the ZOMBIE", ""),
    ]
