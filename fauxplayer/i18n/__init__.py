"""Message catalog for log and error messages."""

from pathlib import Path

import yaml

# Catalog consulted when the active locale has no entry for a key
FALLBACK_LOCALE = "en"

CATALOG_DIR = Path(__file__).parent


def _load_catalog(locale: str) -> dict:
    yaml_path = CATALOG_DIR / f"{locale}.yaml"
    if not yaml_path.exists():
        return {}
    with open(yaml_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _lookup(catalog: dict, key: str) -> str | None:
    value: dict | str = catalog
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return None
    return value if isinstance(value, str) else None


class I18n:
    """Loads a locale's messages and formats them by dot-notation key."""

    def __init__(self, locale: str = FALLBACK_LOCALE):
        """Initialize the catalog for a locale.

        Args:
            locale: The locale to load (default: "en").
        """
        self._locale = locale
        self._messages = _load_catalog(locale)
        self._fallback = (
            self._messages if locale == FALLBACK_LOCALE else _load_catalog(FALLBACK_LOCALE)
        )

    @property
    def locale(self) -> str:
        return self._locale

    def get(self, key: str, **kwargs: object) -> str:
        """Get a message by dot-notation key.

        Args:
            key: The dot-notation key (e.g., "log.track_changed").
            **kwargs: Values to substitute into the message.

        Returns:
            The formatted message, or the key itself if no catalog has it.
        """
        message = _lookup(self._messages, key)
        if message is None:
            message = _lookup(self._fallback, key)
        if message is None:
            return key

        try:
            return message.format(**kwargs)
        except KeyError:
            return message


_i18n = I18n()


def t(key: str, **kwargs: object) -> str:
    """Get a message from the active catalog.

    Args:
        key: The dot-notation key (e.g., "error.empty_queue").
        **kwargs: Values to substitute into the message.

    Returns:
        The formatted message.
    """
    return _i18n.get(key, **kwargs)


def set_locale(locale: str) -> None:
    """Switch the active catalog.

    Args:
        locale: The locale to use.
    """
    global _i18n
    _i18n = I18n(locale)


def get_locale() -> str:
    """Get the active locale code."""
    return _i18n.locale


def get_available_locales() -> list[str]:
    """Get the locale codes that have a catalog file, sorted."""
    return sorted(yaml_file.stem for yaml_file in CATALOG_DIR.glob("*.yaml"))


def is_valid_locale(locale: str) -> bool:
    """Check if a locale code has a catalog file."""
    return locale in get_available_locales()
