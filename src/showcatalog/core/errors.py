"""Taxonomie des erreurs du catalogue."""

from __future__ import annotations


class CatalogError(Exception):
    """Erreur de base du catalogue."""

    pass


class FetchError(CatalogError):
    """Échec d'une lecture distante (liste des séries ou des épisodes)."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class NetworkError(FetchError):
    """Échec transport (DNS, connexion, timeout) : aucune réponse reçue."""

    pass


class ApiError(FetchError):
    """La source a répondu avec un statut non-succès."""

    def __init__(self, status: int, *, url: str | None = None, message: str | None = None) -> None:
        super().__init__(message or f"HTTP error! status:{status}", url=url)
        self.status = status


class SelectionConsistencyError(CatalogError, LookupError):
    """Valeur de sélection inconnue : l'appelant n'a pas respecté le contrat du sélecteur."""

    pass
