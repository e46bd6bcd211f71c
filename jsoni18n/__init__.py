"""Runtime string translation backed by a directory tree of JSON catalogs."""

from jsoni18n.catalog import Catalog
from jsoni18n.exceptions import CatalogLoadError, I18nError, InvalidMessageValue
from jsoni18n.formatting import format_message
from jsoni18n.loader import load_catalog, namespace_for
from jsoni18n.registry import CatalogRegistry, debug, get_catalog, load, reset
from jsoni18n.translator import Translator, new

__all__ = [
    "Catalog",
    "CatalogLoadError",
    "CatalogRegistry",
    "I18nError",
    "InvalidMessageValue",
    "Translator",
    "debug",
    "format_message",
    "get_catalog",
    "load",
    "load_catalog",
    "namespace_for",
    "new",
    "reset",
]
