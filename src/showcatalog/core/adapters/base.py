"""Interface des clients catalogue + registre."""

from __future__ import annotations

from typing import Callable, Protocol

from showcatalog.core.config import CatalogConfig
from showcatalog.core.models import Episode, Show, ShowId


class CatalogClient(Protocol):
    """Protocol pour une source de catalogue (lecture seule, sans cache)."""

    id: str

    def list_shows(self) -> list[Show]:
        """Retourne toutes les séries du catalogue.

        Raises:
            NetworkError, ApiError: échec de la lecture distante.
        """
        ...

    def list_episodes(self, show_id: ShowId) -> list[Episode]:
        """Retourne les épisodes d'une série (ordre de la source)."""
        ...

    def fetch_image(self, url: str) -> bytes:
        """Retourne le contenu brut d'une image référencée par une série ou un épisode."""
        ...


ClientFactory = Callable[[CatalogConfig], CatalogClient]


class AdapterRegistry:
    """Registre des clients catalogue disponibles (fabriques par id)."""

    _factories: dict[str, ClientFactory] = {}

    @classmethod
    def register(cls, source_id: str, factory: ClientFactory) -> None:
        cls._factories[source_id] = factory

    @classmethod
    def create(cls, source_id: str, config: CatalogConfig) -> CatalogClient:
        """Instancie le client correspondant ou lève une exception claire."""
        factory = cls._factories.get(source_id)
        if not factory:
            available = ", ".join(cls._factories.keys()) if cls._factories else "(aucun)"
            raise ValueError(
                f"Adapteur '{source_id}' introuvable. Adapteurs disponibles : {available}"
            )
        return factory(config)

    @classmethod
    def list_ids(cls) -> list[str]:
        return list(cls._factories.keys())
