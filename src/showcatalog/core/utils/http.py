"""Utilitaires HTTP : GET JSON ou brut avec timeout, rate limit optionnel, erreurs catégorisées."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Optional

import httpx

from showcatalog.core.errors import ApiError, NetworkError

logger = logging.getLogger(__name__)

# Dernière requête (monotonic) pour rate limit global entre appels get_json
_last_request_time: Optional[float] = None
_last_request_lock = threading.Lock()


def _reserve_request_slot(min_interval_s: Optional[float]) -> None:
    """Réserve un créneau d'appel en respectant un intervalle minimal global."""
    global _last_request_time
    if min_interval_s is None or min_interval_s <= 0:
        return
    while True:
        with _last_request_lock:
            now = time.monotonic()
            if _last_request_time is None:
                _last_request_time = now
                return
            wait_s = (_last_request_time + min_interval_s) - now
            if wait_s <= 0:
                _last_request_time = now
                return
        time.sleep(wait_s)


def _get(
    url: str,
    *,
    accept: str,
    timeout_s: float,
    user_agent: Optional[str],
    min_interval_s: Optional[float],
) -> httpx.Response:
    headers = {"Accept": accept}
    if user_agent:
        headers["User-Agent"] = user_agent

    _reserve_request_slot(min_interval_s)
    try:
        with httpx.Client(timeout=timeout_s, follow_redirects=True) as client:
            resp = client.get(url, headers=headers)
            resp.raise_for_status()
            return resp
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code if exc.response is not None else 0
        logger.warning("GET %s failed with status %s", url, status_code)
        raise ApiError(status_code, url=url) from exc
    except httpx.TransportError as exc:
        logger.warning("GET %s failed: %s", url, exc)
        raise NetworkError(f"Network error while fetching {url}: {exc}", url=url) from exc


def get_json(
    url: str,
    *,
    timeout_s: float = 30.0,
    user_agent: Optional[str] = None,
    min_interval_s: Optional[float] = None,
) -> Any:
    """
    Récupère et décode le JSON d'une URL (une seule tentative, pas de retry).

    Args:
        url: URL à récupérer.
        timeout_s: Timeout en secondes.
        user_agent: User-Agent (optionnel).
        min_interval_s: Délai minimal en secondes entre le début de deux appels
            successifs (politesse envers l'API).

    Returns:
        Le corps de la réponse décodé.

    Raises:
        ApiError: La source a répondu avec un statut non-succès.
        NetworkError: Aucune réponse (DNS, connexion, timeout).
    """
    resp = _get(
        url,
        accept="application/json",
        timeout_s=timeout_s,
        user_agent=user_agent,
        min_interval_s=min_interval_s,
    )
    return resp.json()


def get_bytes(
    url: str,
    *,
    timeout_s: float = 30.0,
    user_agent: Optional[str] = None,
) -> bytes:
    """Récupère le corps brut d'une URL (images des cartes) ; mêmes erreurs que `get_json`."""
    resp = _get(url, accept="*/*", timeout_s=timeout_s, user_agent=user_agent, min_interval_s=None)
    return resp.content
