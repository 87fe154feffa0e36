"""Clients catalogue disponibles (l'import enregistre les adapters)."""

from showcatalog.core.adapters.base import AdapterRegistry, CatalogClient
from showcatalog.core.adapters.tvmaze import TvmazeClient

__all__ = ["AdapterRegistry", "CatalogClient", "TvmazeClient"]
