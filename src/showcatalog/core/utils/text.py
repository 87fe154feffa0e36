"""Utilitaires texte."""

import unicodedata


def collation_key(text: str) -> str:
    """Clé de comparaison « lettre de base » : insensible à la casse et aux accents.

    Équivalent d'une collation à sensibilité « base » (ex. ``"Élite"`` et
    ``"elite"`` sont égaux).
    """
    decomposed = unicodedata.normalize("NFKD", text or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def contains_ignore_case(haystack: str | None, needle: str) -> bool:
    """True si `needle` apparaît dans `haystack` sans tenir compte de la casse."""
    return (needle or "").casefold() in (haystack or "").casefold()
