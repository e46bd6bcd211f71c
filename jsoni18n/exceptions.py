"""Domain-specific exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jsoni18n.catalog import Catalog


class I18nError(Exception):
    pass


class CatalogLoadError(I18nError):
    """Raised when the catalog directory cannot be walked or read."""

    def __init__(self, path: str, message: str, *, partial: Catalog | None = None) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
        self.partial = partial


class InvalidMessageValue(I18nError, TypeError):
    def __init__(self, namespace: str, key: str, value: Any) -> None:
        super().__init__(
            f"Message {key!r} in {namespace!r} must be a string, got {type(value).__name__}."
        )
        self.namespace = namespace
        self.key = key
        self.value = value
