"""État de sélection (série, épisode, mot-clé) et dérivation de la vue affichée."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Sequence, Union

from showcatalog.core.errors import SelectionConsistencyError
from showcatalog.core.models import Episode, EpisodeId, Show, ShowId
from showcatalog.core.utils.text import contains_ignore_case

# Valeurs réservées des sélecteurs.
PLACEHOLDER_VALUE = ""
ALL_EPISODES = "ALL"

STATUS_ALL_EPISODES = "Showing all episodes"

CardKind = Literal["show", "episode"]


class EpisodeFilter(str, Enum):
    """Entrée qui pilote actuellement l'ensemble affiché."""

    CATALOG = "catalog"
    """Aucune interaction épisode : on affiche le catalogue des séries."""
    ALL = "all"
    ONE = "one"
    KEYWORD = "keyword"


def format_match_status(matched: int, total: int) -> str:
    return f"Displaying {matched} of {total} episodes"


def filter_episodes_by_keyword(episodes: Sequence[Episode], keyword: str) -> list[Episode]:
    """Sous-séquence des épisodes dont le nom OU le résumé contient le mot-clé."""
    return [
        ep
        for ep in episodes
        if contains_ignore_case(ep.name, keyword) or contains_ignore_case(ep.summary, keyword)
    ]


def find_episode(episodes: Sequence[Episode], episode_id: EpisodeId) -> Episode:
    """Retrouve un épisode par id (comparaison en chaîne, comme les valeurs de sélecteur)."""
    wanted = str(episode_id)
    for ep in episodes:
        if str(ep.id) == wanted:
            return ep
    raise SelectionConsistencyError(
        f"Episode id {wanted!r} is not part of the selected show's episode list"
    )


@dataclass(frozen=True)
class CatalogView:
    """Vue dérivée : ce qui doit être rendu et la légende de statut."""

    kind: CardKind
    items: tuple[Union[Show, Episode], ...]
    status: str


@dataclass
class SelectionState:
    """
    Les quatre entrées de la sélection + le mode de filtre courant.

    `selected_episode_id` et `keyword` peuvent coexister ; seul `mode` décide
    lequel des deux pilote l'ensemble affiché (jamais d'intersection).
    """

    selected_show_id: ShowId | None = None
    episodes: list[Episode] = field(default_factory=list)
    selected_episode_id: EpisodeId | None = None
    keyword: str = ""
    mode: EpisodeFilter = EpisodeFilter.CATALOG

    def reset_for_show(self, show_id: ShowId, episodes: Sequence[Episode]) -> None:
        """Nouvelle série chargée : tous les épisodes, mot-clé vidé."""
        self.selected_show_id = show_id
        self.episodes = list(episodes)
        self.selected_episode_id = ALL_EPISODES
        self.keyword = ""
        self.mode = EpisodeFilter.ALL

    def show_all(self) -> None:
        self.selected_episode_id = ALL_EPISODES
        self.mode = EpisodeFilter.ALL

    def pick_episode(self, episode_id: EpisodeId) -> Episode:
        episode = find_episode(self.episodes, episode_id)
        self.selected_episode_id = episode.id
        self.mode = EpisodeFilter.ONE
        return episode

    def apply_keyword(self, keyword: str) -> None:
        self.keyword = keyword
        if keyword:
            self.mode = EpisodeFilter.KEYWORD
        else:
            self.show_all()


def derive_view(state: SelectionState, shows: Sequence[Show] = ()) -> CatalogView:
    """Calcule l'ensemble affiché et la légende à partir de l'état (fonction pure)."""
    if state.mode is EpisodeFilter.CATALOG:
        return CatalogView(kind="show", items=tuple(shows), status="")
    if state.mode is EpisodeFilter.ONE:
        # Lève SelectionConsistencyError si l'épisode choisi n'appartient plus à la liste.
        episode = find_episode(state.episodes, state.selected_episode_id)
        return CatalogView(kind="episode", items=(episode,), status="")
    if state.mode is EpisodeFilter.KEYWORD:
        matched = filter_episodes_by_keyword(state.episodes, state.keyword)
        return CatalogView(
            kind="episode",
            items=tuple(matched),
            status=format_match_status(len(matched), len(state.episodes)),
        )
    return CatalogView(kind="episode", items=tuple(state.episodes), status=STATUS_ALL_EPISODES)
