"""Read-only access to the API credential used for remote corrections."""
from __future__ import annotations

from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .config_manager import ConfigManager


# Value shipped in sample configs; never a real key.
PLACEHOLDER_API_KEY = "YOUR_OPENAI_API_KEY_HERE"


def is_usable_credential(value: Optional[str]) -> bool:
    """Return False for None, blank strings and the placeholder sentinel."""
    if value is None or not value.strip():
        return False
    return value != PLACEHOLDER_API_KEY


class CredentialStore(Protocol):
    def get(self) -> Optional[str]:
        """Return the stored credential, or None."""

    def is_present(self) -> bool:
        """Return True when ``get()`` yields a usable credential."""


class StaticCredentialStore:
    """Credential fixed at construction (command-line flag, tests)."""

    def __init__(self, api_key: Optional[str] = None) -> None:
        self._api_key = api_key

    def get(self) -> Optional[str]:
        return self._api_key

    def is_present(self) -> bool:
        return is_usable_credential(self._api_key)

    def __repr__(self) -> str:
        # Never expose the key itself.
        return f"StaticCredentialStore(present={self.is_present()})"


class ConfigCredentialStore:
    """Credential read from the persistent configuration on every call."""

    def __init__(self, config: "ConfigManager") -> None:
        self._config = config

    def get(self) -> Optional[str]:
        return self._config.get_api_key()

    def is_present(self) -> bool:
        return is_usable_credential(self.get())

    def __repr__(self) -> str:
        return f"ConfigCredentialStore(file={self._config.config_file})"
