"""Helpers UI pour messages d'erreur."""

from __future__ import annotations

from typing import Any

from PySide6.QtWidgets import QMessageBox, QWidget

from showcatalog.core.errors import ApiError, NetworkError


def format_error(exc: Any, *, context: str | None = None, max_len: int = 500) -> str:
    """Convertit une exception en message UI court et stable."""
    if isinstance(exc, ApiError):
        base = f"The catalog service answered with HTTP status {exc.status}."
    elif isinstance(exc, NetworkError):
        base = "The catalog service could not be reached."
    else:
        try:
            base = str(exc) if exc is not None else "Unknown error"
        except Exception:
            base = "Unknown error"
    if context:
        base = f"{context}: {base}"
    if len(base) > max_len:
        return base[: max_len - 3] + "..."
    return base


def show_error(
    parent: QWidget | None,
    *,
    title: str = "Error",
    message: str,
) -> None:
    """Affiche une erreur critique avec un style cohérent."""
    QMessageBox.critical(parent, title, message)
