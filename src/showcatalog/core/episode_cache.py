"""Cache des épisodes par série : rempli à la demande, jamais invalidé."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from showcatalog.core.models import Episode, ShowId

logger = logging.getLogger(__name__)

EpisodeFetcher = Callable[[ShowId], list[Episode]]


class EpisodeCache:
    """
    Mémoïsation `show_id -> épisodes triés` pour la durée du processus.

    Le fetcher est appelé hors verrou : deux demandes simultanées pour une même
    série absente peuvent chacune déclencher un fetch, mais la première valeur
    stockée gagne et c'est elle qui est renvoyée à tous les appelants.
    Un fetch en échec ne remplit jamais le cache.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[Episode]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(show_id: ShowId) -> str:
        # Les sélecteurs UI transportent des chaînes, l'API des entiers.
        return str(show_id)

    def get(self, show_id: ShowId) -> list[Episode] | None:
        """Retourne les épisodes en cache ou None, sans déclencher de fetch."""
        with self._lock:
            episodes = self._entries.get(self._key(show_id))
        return list(episodes) if episodes is not None else None

    def get_episodes(self, show_id: ShowId, fetcher: EpisodeFetcher) -> list[Episode]:
        """Retourne les épisodes de la série, en appelant `fetcher` uniquement en cas d'absence."""
        cached = self.get(show_id)
        if cached is not None:
            logger.debug("Episode cache hit for show %s", show_id)
            return cached
        logger.debug("Episode cache miss for show %s", show_id)
        episodes = list(fetcher(show_id))
        with self._lock:
            stored = self._entries.setdefault(self._key(show_id), episodes)
        return list(stored)

    def __contains__(self, show_id: object) -> bool:
        with self._lock:
            return str(show_id) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
