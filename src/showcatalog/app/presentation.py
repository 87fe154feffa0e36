"""Contrat de présentation consommé par le contrôleur (indépendant de Qt)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, Sequence, Union

from showcatalog.core.models import Episode, Show
from showcatalog.core.selection import ALL_EPISODES, PLACEHOLDER_VALUE, CardKind

SelectorName = Literal["show", "episode"]
SHOW_SELECTOR: SelectorName = "show"
EPISODE_SELECTOR: SelectorName = "episode"

LOADING_MESSAGE = "TVMaze data is coming…"
LOAD_FAILED_MESSAGE = "Failed to load TVMaze data. Please try again later."


@dataclass(frozen=True)
class SelectorOption:
    label: str
    value: str


@dataclass(frozen=True)
class Placeholder:
    """Entrée réservée placée avant les options (ex. « Select a show »)."""

    text: str
    value: str
    disabled: bool = False
    selected: bool = False


SHOW_PLACEHOLDERS: tuple[Placeholder, ...] = (
    Placeholder("Select a show", PLACEHOLDER_VALUE, disabled=True, selected=True),
)
EPISODE_PLACEHOLDERS: tuple[Placeholder, ...] = (
    Placeholder("Select an episode", PLACEHOLDER_VALUE, disabled=True, selected=True),
    Placeholder("All Episodes", ALL_EPISODES),
)


class Presenter(Protocol):
    """Capacités de rendu injectées dans le contrôleur.

    `select_value` et `set_keyword_text` ne doivent pas réémettre d'événement
    de changement vers le contrôleur.
    """

    def render_list(self, items: Sequence[Union[Show, Episode]], kind: CardKind) -> None: ...

    def populate_selector(
        self,
        selector: SelectorName,
        options: Sequence[SelectorOption],
        placeholders: Sequence[Placeholder],
    ) -> None: ...

    def select_value(self, selector: SelectorName, value: str) -> None: ...

    def set_keyword_text(self, text: str) -> None: ...

    def set_status(self, text: str) -> None: ...

    def show_message(self, text: str) -> None:
        """Remplace le contenu par un message (chargement, échec au démarrage)."""
        ...

    def show_error(self, message: str) -> None: ...

    def set_controls_enabled(self, enabled: bool) -> None: ...
