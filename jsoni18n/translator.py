"""Per-caller translation handle over a shared catalog."""

from __future__ import annotations

from typing import Any

from jsoni18n.catalog import Catalog
from jsoni18n.formatting import format_message
from jsoni18n.logging import logger
from jsoni18n.registry import CatalogRegistry, default_registry


class Translator:
    """Translate message keys for a current language.

    The catalog is read from ``registry`` on every call unless a fixed
    ``catalog`` is given. A translator is meant to be used by one writer at
    a time; independent instances never interfere.
    """

    def __init__(
        self,
        language: str,
        *,
        catalog: Catalog | None = None,
        registry: CatalogRegistry | None = None,
        debug: bool | None = None,
    ) -> None:
        self._language = language
        self._catalog = catalog
        self._registry = registry or default_registry
        self._debug = debug

    def __repr__(self) -> str:
        return f"Translator(language={self._language!r})"

    @property
    def language(self) -> str:
        return self._language

    def set_lang(self, language: str) -> None:
        self._language = language

    def get_lang(self) -> str:
        return self._language

    @property
    def catalog(self) -> Catalog:
        return self._catalog if self._catalog is not None else self._registry.catalog

    @property
    def debug(self) -> bool:
        return self._debug if self._debug is not None else self._registry.debug

    def print(self, key: str, *args: Any, lang: str | None = None) -> str:
        """Return the translation of ``key``, formatted with ``args``.

        A trailing string argument naming a loaded namespace selects that
        language for this call only, unless ``lang`` is given. On a miss the
        key itself is returned, formatted when it carries ``%`` directives.
        """

        catalog = self.catalog
        language = lang if lang is not None else self._language
        if lang is None and args and isinstance(args[-1], str) and args[-1] in catalog:
            language = args[-1]
            args = args[:-1]

        message = catalog.lookup(language, key)
        if message is None:
            if self.debug:
                logger.warning("translation_missing", language=language, key=key)
            message = key

        if args and "%" in message:
            return format_message(message, args)
        return message

    def plural(
        self,
        count: int,
        zero_key: str,
        one_key: str,
        many_key: str,
        *values: Any,
        lang: str | None = None,
    ) -> str:
        """Pick the zero, one or many form for ``count`` and translate it.

        ``count`` becomes the first formatting argument. A leading ``""`` in
        ``values`` is a placeholder and is dropped.
        """

        if values and isinstance(values[0], str) and values[0] == "":
            values = values[1:]
        args = (count, *values)

        if count <= 0:
            key = zero_key
        elif count == 1:
            key = one_key
        else:
            key = many_key
        return self.print(key, *args, lang=lang)


def new(language: str) -> Translator:
    """Return a translator bound to the default registry."""

    return Translator(language)


__all__ = ["Translator", "new"]
