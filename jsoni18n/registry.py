"""Process-wide catalog state shared by translators."""

from __future__ import annotations

import threading
from pathlib import Path

from jsoni18n.catalog import EMPTY_CATALOG, Catalog
from jsoni18n.loader import load_catalog


class CatalogRegistry:
    """Holds the current catalog and the missing-translation debug flag.

    ``load`` builds the new catalog before taking the lock, so readers only
    ever see a complete catalog. Concurrent loads are serialized.
    """

    def __init__(self, catalog: Catalog | None = None, *, debug: bool = False) -> None:
        self._lock = threading.RLock()
        self._load_lock = threading.Lock()
        self._catalog = catalog if catalog is not None else EMPTY_CATALOG
        self._debug = debug

    @property
    def catalog(self) -> Catalog:
        with self._lock:
            return self._catalog

    @property
    def debug(self) -> bool:
        with self._lock:
            return self._debug

    def set_debug(self, enabled: bool) -> None:
        with self._lock:
            self._debug = bool(enabled)

    def load(self, root: str | Path) -> Catalog:
        """Replace the current catalog with the one found under ``root``.

        On failure the previous catalog stays in place.
        """

        with self._load_lock:
            catalog = load_catalog(root)
            with self._lock:
                self._catalog = catalog
        return catalog

    def replace(self, catalog: Catalog) -> None:
        """Install a catalog built elsewhere, e.g. with :func:`load_catalog`."""

        with self._lock:
            self._catalog = catalog

    def reset(self) -> None:
        with self._lock:
            self._catalog = EMPTY_CATALOG
            self._debug = False


default_registry = CatalogRegistry()


def load(root: str | Path) -> Catalog:
    """Load the catalog under ``root`` into the default registry."""

    return default_registry.load(root)


def debug(enabled: bool) -> None:
    """Toggle logging of missing translations."""

    default_registry.set_debug(enabled)


def get_catalog() -> Catalog:
    return default_registry.catalog


def reset() -> None:
    default_registry.reset()


__all__ = ["CatalogRegistry", "debug", "default_registry", "get_catalog", "load", "reset"]
