"""Translation lookup with a fallback language."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()


class Translator:
    """
    Resolve dotted translation keys against per-language dictionaries.

    Lookup order is the active language, then the fallback language, then the
    caller's default, then the key itself. Keys may index into lists, so
    "translation.months.7" reads the eighth month name.
    """

    def __init__(
        self, resources: dict[str, dict[str, Any]], language: str, fallback_language: str
    ) -> None:
        if language not in resources:
            msg = f"Unknown language: {language}"
            raise ValueError(msg)
        self._resources = resources
        self.language = language
        self.fallback_language = fallback_language

    @property
    def languages(self) -> list[str]:
        return list(self._resources)

    def change_language(self, language: str) -> None:
        """Switch the active language."""
        if language not in self._resources:
            msg = f"Unknown language: {language}"
            raise ValueError(msg)
        self.language = language

    def t(self, key: str, default: Any = None, *, return_objects: bool = False) -> Any:
        """Translate a key for the active language."""
        for language in (self.language, self.fallback_language):
            value = _lookup(self._resources.get(language, {}), key)
            if value is _MISSING:
                continue
            if isinstance(value, dict | list) and not return_objects:
                logger.debug("Key %s resolved to an object in %s", key, language)
                break
            return value
        if default is not None:
            return default
        return None if return_objects else key

    def month_name(self, month_index: int) -> str:
        """Localized name of a 0-11 month index."""
        return self.t(f"translation.months.{month_index}", default="month")


def _lookup(tree: Any, key: str) -> Any:
    node = tree
    for part in key.split("."):
        if isinstance(node, dict):
            if part not in node:
                return _MISSING
            node = node[part]
        elif isinstance(node, list) and part.isdigit() and int(part) < len(node):
            node = node[int(part)]
        else:
            return _MISSING
    return node
