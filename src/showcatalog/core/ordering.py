"""Ordres canoniques (séries, épisodes) et libellés d'épisode."""

from __future__ import annotations

from collections.abc import Iterable

from showcatalog.core.models import Episode, Show
from showcatalog.core.utils.text import collation_key


def sort_shows(shows: Iterable[Show]) -> list[Show]:
    """Trie les séries par nom (collation de base, tri stable)."""
    return sorted(shows, key=lambda show: collation_key(show.name))


def sort_episodes(episodes: Iterable[Episode]) -> list[Episode]:
    """Trie les épisodes par (saison, numéro)."""
    return sorted(episodes, key=lambda ep: (ep.season, ep.number))


def zero_pad(value: int, width: int = 2) -> str:
    """Complète à gauche par des zéros ; la largeur est un minimum (100 reste 100)."""
    return str(value).rjust(width, "0")


def season_episode_code(episode: Episode) -> str:
    """Code saison/épisode (ex: S01E01)."""
    return f"S{zero_pad(episode.season)}E{zero_pad(episode.number)}"


def format_episode_label(episode: Episode) -> str:
    """Libellé affiché : ``"<nom> - S01E01"``."""
    return f"{episode.name} - {season_episode_code(episode)}"
