"""Modèle de données : dataclasses typées pour séries et épisodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

ShowId = Union[int, str]
EpisodeId = Union[int, str]


@dataclass(frozen=True)
class Show:
    """Entrée du catalogue (une série)."""

    id: ShowId
    name: str
    url: str = ""
    image: str | None = None
    """URL de l'image moyenne, ou None si la source n'en fournit pas."""
    summary: str | None = None
    """Résumé en HTML (balises <p>, <b>...) tel que renvoyé par la source."""


@dataclass(frozen=True)
class Episode:
    """Épisode d'une série. La série propriétaire est portée par la clé du cache."""

    id: EpisodeId
    season: int
    number: int
    name: str
    summary: str = ""
    image: str | None = None
    url: str = ""
