"""API key providers."""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from pathlib import Path

from .errors import CredentialError
from .models import CredentialProvider

API_KEY_ENV = "RAPIDAPI_KEY"
DEFAULT_SECRETS_FILE = "~/.config/domain-checker/secrets.json"


class StaticCredentialProvider:
    """Key passed explicitly, e.g. from the command line."""

    def __init__(self, api_key: str | None) -> None:
        self._api_key = api_key

    def get_api_key(self) -> str | None:
        return self._api_key or None


class EnvCredentialProvider:
    """Key read from an environment variable."""

    def __init__(self, name: str = API_KEY_ENV) -> None:
        self._name = name

    def get_api_key(self) -> str | None:
        return os.getenv(self._name) or None


class SecretsFileCredentialProvider:
    """Key read from a JSON secrets file shaped ``{"RapidApi": {"ApiKey": "..."}}``."""

    def __init__(self, path: str = DEFAULT_SECRETS_FILE) -> None:
        self._path = Path(path).expanduser()

    def get_api_key(self) -> str | None:
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            raise CredentialError(f"Error loading API key from {self._path}: {exc}") from exc
        section = payload.get("RapidApi") if isinstance(payload, dict) else None
        value = section.get("ApiKey") if isinstance(section, dict) else None
        return value if isinstance(value, str) and value else None


class ChainCredentialProvider:
    """Return the first key any provider yields."""

    def __init__(self, providers: Sequence[CredentialProvider]) -> None:
        self._providers = tuple(providers)

    def get_api_key(self) -> str | None:
        for provider in self._providers:
            value = provider.get_api_key()
            if value:
                return value
        return None


def default_provider(
    api_key: str | None = None, secrets_file: str | None = None
) -> ChainCredentialProvider:
    """Flag, then environment, then secrets file."""
    return ChainCredentialProvider(
        [
            StaticCredentialProvider(api_key),
            EnvCredentialProvider(),
            SecretsFileCredentialProvider(secrets_file or DEFAULT_SECRETS_FILE),
        ]
    )


def require_api_key(provider: CredentialProvider) -> str:
    """Resolve the key or raise CredentialError."""
    api_key = provider.get_api_key()
    if not api_key:
        raise CredentialError(
            f"API key not found. Set {API_KEY_ENV}, pass --api-key, "
            "or add RapidApi.ApiKey to the secrets file."
        )
    return api_key
