"""Configuration and environment helpers for the project.

Loads the repository settings (API base, owner, repo, target extensions
and user agent) once at startup from a JSON settings file, with
environment variables taking precedence. Missing or malformed settings
raise ConfigurationError before any network activity.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import dotenv
import httpx

from core.errors import ConfigurationError
from core.models import RepositorySettings


DEFAULT_SETTINGS_PATH = "appsettings.json"
SETTINGS_SECTION = "GitHub"

# Settings file key -> environment override
_ENV_OVERRIDES = {
    "ApiBase": "GITHUB_API_BASE",
    "Owner": "GITHUB_OWNER",
    "Repo": "GITHUB_REPO",
    "TargetExtensions": "GITHUB_TARGET_EXTENSIONS",
    "UserAgent": "GITHUB_USER_AGENT",
}


def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_list(name: str) -> Optional[List[str]]:
    raw = _env_str(name)
    if raw is None:
        return None
    return [part.strip() for part in raw.split(",") if part.strip()]


def log_level() -> str:
    level = (_env_str("LOG_LEVEL", "INFO") or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown LOG_LEVEL: {level}")
    return level


def settings_path(explicit: Optional[str] = None) -> Path:
    raw = explicit or _env_str("LETTERFREQ_SETTINGS", DEFAULT_SETTINGS_PATH)
    return Path(raw)


def _read_section(path: Path, *, required: bool) -> Dict[str, Any]:
    if not path.is_file():
        if required:
            raise ConfigurationError(f"Settings file not found: {path}")
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Unable to read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a JSON object")

    section = data.get(SETTINGS_SECTION)
    if section is None:
        if required:
            raise ConfigurationError(f"Missing '{SETTINGS_SECTION}' section in {path}")
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{SETTINGS_SECTION}' section in {path} must be an object")
    return section


def _require_str(values: Dict[str, Any], key: str) -> str:
    value = values.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"Setting '{SETTINGS_SECTION}:{key}' must be a non-empty string")
    return value.strip()


def _require_api_base(values: Dict[str, Any]) -> str:
    value = _require_str(values, "ApiBase")
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Setting '{SETTINGS_SECTION}:ApiBase' is not a valid URL: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(
            f"Setting '{SETTINGS_SECTION}:ApiBase' must be an absolute http(s) URL, got {value!r}"
        )
    return value


def _require_extensions(values: Dict[str, Any]) -> Tuple[str, ...]:
    value = values.get("TargetExtensions")
    if not isinstance(value, list) or not value:
        raise ConfigurationError(
            f"Setting '{SETTINGS_SECTION}:TargetExtensions' must be a non-empty array of strings"
        )
    if not all(isinstance(ext, str) and ext for ext in value):
        raise ConfigurationError(
            f"Setting '{SETTINGS_SECTION}:TargetExtensions' must only contain non-empty strings"
        )
    return tuple(value)


def load_settings(path: Optional[str] = None) -> RepositorySettings:
    """Load RepositorySettings from the settings file and environment.

    The settings file may be absent when every value is supplied through
    the environment; an explicitly requested file must exist.
    """
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))

    overrides: Dict[str, Any] = {}
    for key, env_name in _ENV_OVERRIDES.items():
        value = _env_list(env_name) if key == "TargetExtensions" else _env_str(env_name)
        if value is not None:
            overrides[key] = value

    env_complete = len(overrides) == len(_ENV_OVERRIDES)
    values = _read_section(settings_path(path), required=bool(path) or not env_complete)
    values = {**values, **overrides}

    return RepositorySettings(
        api_base=_require_api_base(values),
        owner=_require_str(values, "Owner"),
        repo=_require_str(values, "Repo"),
        target_extensions=_require_extensions(values),
        user_agent=_require_str(values, "UserAgent"),
    )
