"""Contrôleur de navigation : transitions de sélection série / épisode / mot-clé."""

from __future__ import annotations

import logging
from typing import Any, Callable

from showcatalog.app.feedback import format_error
from showcatalog.app.presentation import (
    EPISODE_PLACEHOLDERS,
    EPISODE_SELECTOR,
    LOAD_FAILED_MESSAGE,
    LOADING_MESSAGE,
    SHOW_PLACEHOLDERS,
    SHOW_SELECTOR,
    Presenter,
    SelectorOption,
)
from showcatalog.core.adapters.base import CatalogClient
from showcatalog.core.episode_cache import EpisodeCache
from showcatalog.core.errors import SelectionConsistencyError
from showcatalog.core.models import Episode, Show, ShowId
from showcatalog.core.ordering import format_episode_label, sort_episodes, sort_shows
from showcatalog.core.selection import (
    ALL_EPISODES,
    PLACEHOLDER_VALUE,
    CatalogView,
    SelectionState,
    derive_view,
)

logger = logging.getLogger(__name__)

FetchRunner = Callable[[Callable[[], Any], Callable[[Any], None], Callable[[Exception], None]], None]


def run_sync(
    fetch: Callable[[], Any],
    on_success: Callable[[Any], None],
    on_error: Callable[[Exception], None],
) -> None:
    """Exécute un fetch dans le thread appelant (mode par défaut, tests, CLI)."""
    try:
        result = fetch()
    except Exception as exc:
        on_error(exc)
        return
    on_success(result)


class CatalogBrowserController:
    """
    Propriétaire unique de l'état de sélection et du cache d'épisodes.

    L'état n'est modifié que par `start`, `select_show`, `select_episode` et
    `set_keyword` ; chaque transition se termine par un rendu de la vue dérivée.
    """

    def __init__(
        self,
        *,
        client: CatalogClient,
        presenter: Presenter,
        cache: EpisodeCache | None = None,
        run_fetch: FetchRunner = run_sync,
    ) -> None:
        self._client = client
        self._presenter = presenter
        self._cache = cache if cache is not None else EpisodeCache()
        self._run_fetch = run_fetch
        self._state = SelectionState()
        self._shows: list[Show] = []
        self._loaded_show_id: ShowId | None = None
        # Numéro de la dernière sélection de série ; None une fois ses épisodes appliqués.
        self._request_seq = 0
        self._pending_request: int | None = None
        self._startup_failed = False

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def shows(self) -> list[Show]:
        return list(self._shows)

    @property
    def cache(self) -> EpisodeCache:
        return self._cache

    @property
    def startup_failed(self) -> bool:
        return self._startup_failed

    def view(self) -> CatalogView:
        return derive_view(self._state, self._shows)

    # --- Chargement initial ---------------------------------------------

    def start(self) -> None:
        """Charge le catalogue des séries (affiche un message pendant le chargement)."""
        self._presenter.set_controls_enabled(False)
        self._presenter.show_message(LOADING_MESSAGE)
        self._run_fetch(self._fetch_sorted_shows, self._on_shows_loaded, self._on_shows_failed)

    def _fetch_sorted_shows(self) -> list[Show]:
        return sort_shows(self._client.list_shows())

    def _on_shows_loaded(self, shows: list[Show]) -> None:
        self._shows = list(shows)
        logger.info("Catalog loaded: %d shows", len(self._shows))
        self._presenter.populate_selector(
            SHOW_SELECTOR,
            [SelectorOption(show.name, str(show.id)) for show in self._shows],
            SHOW_PLACEHOLDERS,
        )
        self._render()
        self._presenter.set_controls_enabled(True)

    def _on_shows_failed(self, exc: Exception) -> None:
        # Échec terminal : pas d'UI partielle.
        self._startup_failed = True
        logger.error("Error fetching shows: %s", exc, exc_info=exc)
        self._presenter.show_message(LOAD_FAILED_MESSAGE)

    # --- Transitions ------------------------------------------------------

    def select_show(self, value: ShowId | None) -> None:
        """Sélection d'une série : épisodes depuis le cache (fetch si absent)."""
        if value is None or value == PLACEHOLDER_VALUE:
            return
        show_id = value
        self._state.selected_show_id = show_id
        self._request_seq += 1
        request = self._request_seq
        self._pending_request = request

        cached = self._cache.get(show_id)
        if cached is not None:
            self._on_episodes_loaded(request, show_id, cached)
            return
        self._run_fetch(
            lambda: self._cache.get_episodes(show_id, self._fetch_sorted_episodes),
            lambda episodes: self._on_episodes_loaded(request, show_id, episodes),
            lambda exc: self._on_episodes_failed(request, show_id, exc),
        )

    def _fetch_sorted_episodes(self, show_id: ShowId) -> list[Episode]:
        return sort_episodes(self._client.list_episodes(show_id))

    def _is_current_show(self, show_id: ShowId) -> bool:
        current = self._state.selected_show_id
        return current is not None and str(current) == str(show_id)

    def _awaits_episodes(self, show_id: ShowId) -> bool:
        """Vrai si la sélection courante porte sur `show_id` et attend encore ses épisodes."""
        return self._pending_request is not None and self._is_current_show(show_id)

    def _on_episodes_loaded(self, request: int, show_id: ShowId, episodes: list[Episode]) -> None:
        # Une réponse plus ancienne pour la même série satisfait la sélection courante ;
        # les réponses suivantes sont ignorées (le mot-clé saisi entre-temps est conservé).
        if not self._awaits_episodes(show_id):
            logger.debug("Ignoring stale episodes response for show %s (request %d)", show_id, request)
            return
        self._pending_request = None
        self._state.reset_for_show(show_id, episodes)
        self._loaded_show_id = show_id
        self._presenter.set_keyword_text("")
        self._presenter.populate_selector(
            EPISODE_SELECTOR,
            [SelectorOption(format_episode_label(ep), str(ep.id)) for ep in episodes],
            EPISODE_PLACEHOLDERS,
        )
        self._render()

    def _on_episodes_failed(self, request: int, show_id: ShowId, exc: Exception) -> None:
        logger.error("Error fetching episodes for show %s: %s", show_id, exc, exc_info=exc)
        if request != self._pending_request:
            return
        self._pending_request = None
        # Sélection abandonnée : retour à la dernière série chargée, contenu inchangé.
        previous = self._loaded_show_id
        self._state.selected_show_id = previous
        self._presenter.select_value(
            SHOW_SELECTOR, str(previous) if previous is not None else PLACEHOLDER_VALUE
        )
        self._presenter.show_error(format_error(exc, context="Failed to load episodes"))

    def select_episode(self, value: str | None) -> None:
        """Choix dans le sélecteur d'épisodes : « All Episodes » ou un épisode précis."""
        if value is None or value == PLACEHOLDER_VALUE:
            return
        if value == ALL_EPISODES:
            self._state.show_all()
        else:
            try:
                self._state.pick_episode(value)
            except SelectionConsistencyError:
                logger.exception("Episode selector out of sync with the episode list")
                raise
        self._render()

    def set_keyword(self, text: str | None) -> None:
        """Saisie du mot-clé ; vider le champ ramène toujours à « All Episodes »."""
        keyword = text or ""
        self._state.apply_keyword(keyword)
        if not keyword:
            self._presenter.select_value(EPISODE_SELECTOR, ALL_EPISODES)
        self._render()

    def _render(self) -> None:
        view = self.view()
        self._presenter.render_list(list(view.items), view.kind)
        self._presenter.set_status(view.status)
