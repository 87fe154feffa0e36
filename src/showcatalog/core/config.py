"""Configuration de l'application (fichier TOML optionnel)."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SHOWCATALOG_CONFIG"
DEFAULT_CONFIG_FILENAME = "showcatalog.toml"


@dataclass(frozen=True)
class CatalogConfig:
    """Configuration du client catalogue et du logging."""

    api_base_url: str = "https://api.tvmaze.com"
    """Racine de l'API catalogue."""
    user_agent: str = "ShowCatalog/0.1"
    """User-Agent pour les requêtes HTTP."""
    timeout_s: float = 30.0
    """Timeout d'une requête (secondes)."""
    min_interval_s: float = 0.5
    """Délai minimal entre deux requêtes (TVMaze : 20 req/10s)."""
    log_level: str = "INFO"
    log_file: Path | None = None
    """Fichier de log (optionnel, en plus de stderr)."""


def read_toml(path: Path) -> dict[str, Any]:
    """Lit un fichier TOML."""
    with open(path, "rb") as file_obj:
        return tomllib.load(file_obj)


def _coerce(key: str, value: Any, default: Any) -> Any:
    if key == "log_file":
        return Path(value).expanduser() if value else None
    if isinstance(default, float):
        try:
            number = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Valeur invalide pour '{key}': {value!r}") from exc
        if number < 0:
            raise ValueError(f"Valeur négative interdite pour '{key}': {value!r}")
        return number
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Valeur invalide pour '{key}': {value!r}")
    return value.strip()


def config_from_dict(data: dict[str, Any]) -> CatalogConfig:
    """Construit la config depuis un dict (clés inconnues ignorées)."""
    defaults = CatalogConfig()
    known = {f.name for f in fields(CatalogConfig)}
    values: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.debug("Clé de configuration ignorée: %s", key)
            continue
        values[key] = _coerce(key, value, getattr(defaults, key))
    if "api_base_url" in values:
        values["api_base_url"] = values["api_base_url"].rstrip("/")
    return CatalogConfig(**values)


def resolve_config_path(path: Path | str | None = None) -> Path:
    """Chemin explicite, sinon variable d'environnement, sinon ./showcatalog.toml."""
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def load_config(path: Path | str | None = None) -> CatalogConfig:
    """Charge la configuration ; valeurs par défaut si le fichier n'existe pas."""
    config_path = resolve_config_path(path)
    if not config_path.exists():
        logger.debug("Pas de fichier de configuration (%s) : valeurs par défaut", config_path)
        return CatalogConfig()
    return config_from_dict(read_toml(config_path))
