"""Option store supplying the naming prefix for each target kind."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = {
    "prefix.function": "jaxon_",
    "prefix.class": "Jaxon.",
    "prefix.event": "jaxon_event_",
}

# Option files written for the server library nest everything under "core"
_CORE_SECTION = "core."


class OptionNotFoundError(KeyError):
    """An option key has no value."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Option not found: {self.key}"


class OptionsLoadError(Exception):
    """Error loading options from a file."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


def _flatten(data: dict, prefix: str = "") -> dict[str, Any]:
    """Flatten nested dicts into dotted keys."""
    flat = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


class Options:
    """Flat, dotted-key option lookup with built-in defaults."""

    def __init__(self, values: dict[str, Any] | None = None):
        self._values = dict(DEFAULT_OPTIONS)
        if values:
            self._values.update(values)

    @classmethod
    def from_json(cls, path: str | Path) -> "Options":
        """Load options from a JSON file, on top of the defaults.

        Nested objects become dotted keys, and a leading ``core`` section is
        dropped so ``{"core": {"prefix": {"class": "App."}}}`` sets
        ``prefix.class``.

        Raises:
            OptionsLoadError: If the file cannot be read or is not a JSON object
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read options file {path}: {e}")
            raise OptionsLoadError(f"Could not read {path}: {e}", str(path)) from e
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in options file {path}: {e}")
            raise OptionsLoadError(f"Invalid JSON in {path}: {e}", str(path)) from e

        if not isinstance(data, dict):
            raise OptionsLoadError(
                f"Options file {path} must contain a JSON object", str(path)
            )

        values = {}
        for key, value in _flatten(data).items():
            if key.startswith(_CORE_SECTION):
                key = key[len(_CORE_SECTION) :]
            values[key] = value

        logger.info(f"Loaded {len(values)} options from {path}")
        return cls(values)

    def get_option(self, key: str) -> Any:
        """Return the value for a key.

        Raises:
            OptionNotFoundError: If the key has no value
        """
        try:
            return self._values[key]
        except KeyError:
            raise OptionNotFoundError(key) from None

    def set_option(self, key: str, value: Any) -> None:
        self._values[key] = value

    def has_option(self, key: str) -> bool:
        return key in self._values
