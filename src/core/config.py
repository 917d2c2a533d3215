"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y la CLI lean config de forma consistente.
- `doctor set-gateway` persiste valores en el .env del usuario; solo se
  escriben claves `ARWEAVE_TXINFO_*` que correspondan a campos de `AppSettings`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "arweave-txinfo"
ENV_PREFIX = "ARWEAVE_TXINFO_"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (APPDATA, Application Support o XDG)."""

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_settings() -> dict[str, str]:
    """Valores guardados en el .env del usuario, indexados por nombre de campo.

    Las líneas sin prefijo `ARWEAVE_TXINFO_` se ignoran.
    """

    env_path = get_user_env_file()
    if not env_path.exists():
        return {}

    saved: dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip().upper()
        if not sep or not key.startswith(ENV_PREFIX):
            continue
        saved[key.removeprefix(ENV_PREFIX).lower()] = value.strip().strip('"').strip("'")
    return saved


def save_user_settings(**values: str) -> Path:
    """Guarda campos de `AppSettings` en el .env del usuario, conservando los previos.

    `save_user_settings(gateway_url="https://arweave.net")` escribe
    `ARWEAVE_TXINFO_GATEWAY_URL=https://arweave.net`.
    """

    unknown = sorted(set(values) - set(AppSettings.model_fields))
    if unknown:
        raise ValueError(f"unknown settings: {', '.join(unknown)}")

    merged = {**read_user_settings(), **values}
    lines = [f"# {APP_NAME} user config (.env)"]
    lines.extend(f"{ENV_PREFIX}{name.upper()}={value}" for name, value in sorted(merged.items()))

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    gateway_url: str = Field(
        default="https://arweave.net",
        min_length=8,
        description="Base URL del gateway Arweave.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="arweave-txinfo/0.1",
        min_length=1,
        description="User-Agent para peticiones al gateway.",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Nivel de logging de la CLI.",
    )
