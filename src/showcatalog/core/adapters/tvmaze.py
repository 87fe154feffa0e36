"""Adapteur TVMaze API : liste des séries et des épisodes d'une série."""

from __future__ import annotations

import logging
from typing import Any

from showcatalog.core.adapters.base import AdapterRegistry
from showcatalog.core.config import CatalogConfig
from showcatalog.core.models import Episode, Show, ShowId
from showcatalog.core.utils.http import get_bytes, get_json

logger = logging.getLogger(__name__)


def _medium_image(data: dict[str, Any]) -> str | None:
    image = data.get("image")
    if isinstance(image, dict):
        return image.get("medium") or None
    return None


def parse_show(data: dict[str, Any]) -> Show:
    return Show(
        id=data["id"],
        name=data.get("name") or "",
        url=data.get("url") or "",
        image=_medium_image(data),
        summary=data.get("summary"),
    )


def parse_episode(data: dict[str, Any]) -> Episode:
    # Les épisodes spéciaux peuvent arriver sans saison/numéro.
    return Episode(
        id=data["id"],
        season=int(data.get("season") or 0),
        number=int(data.get("number") or 0),
        name=data.get("name") or "",
        summary=data.get("summary") or "",
        image=_medium_image(data),
        url=data.get("url") or "",
    )


class TvmazeClient:
    """Client pour l'API publique TVMaze (sans authentification)."""

    id = "tvmaze"

    def __init__(self, config: CatalogConfig | None = None) -> None:
        self.config = config or CatalogConfig()

    def _get(self, path: str) -> Any:
        return get_json(
            f"{self.config.api_base_url}{path}",
            timeout_s=self.config.timeout_s,
            user_agent=self.config.user_agent,
            min_interval_s=self.config.min_interval_s,
        )

    def list_shows(self) -> list[Show]:
        data = self._get("/shows")
        shows = [parse_show(item) for item in data or []]
        logger.info(f"TVMaze: {len(shows)} séries récupérées")
        return shows

    def list_episodes(self, show_id: ShowId) -> list[Episode]:
        data = self._get(f"/shows/{show_id}/episodes")
        episodes = [parse_episode(item) for item in data or []]
        logger.info(f"TVMaze: {len(episodes)} épisodes récupérés pour la série {show_id}")
        return episodes

    def fetch_image(self, url: str) -> bytes:
        """Télécharge une image de carte (CDN statique : pas d'intervalle de politesse)."""
        return get_bytes(url, timeout_s=self.config.timeout_s, user_agent=self.config.user_agent)


# Enregistrement automatique de l'adapteur
AdapterRegistry.register(TvmazeClient.id, TvmazeClient)
