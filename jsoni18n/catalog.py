"""Immutable catalog of language tables keyed by namespace."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from jsoni18n.exceptions import InvalidMessageValue


class Catalog(Mapping[str, Mapping[str, str]]):
    """Read-only mapping of namespace name to its language table.

    Tables are copied on construction and exposed through mapping proxies,
    so a catalog can be shared between threads without locking.
    """

    __slots__ = ("_tables",)

    def __init__(self, tables: Mapping[str, Mapping[str, str]] | None = None) -> None:
        frozen: dict[str, Mapping[str, str]] = {}
        for namespace, table in (tables or {}).items():
            for key, value in table.items():
                if not isinstance(value, str):
                    raise InvalidMessageValue(namespace, key, value)
            frozen[namespace] = MappingProxyType(dict(table))
        self._tables = MappingProxyType(frozen)

    def __getitem__(self, namespace: str) -> Mapping[str, str]:
        return self._tables[namespace]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"Catalog(namespaces={sorted(self._tables)!r})"

    @property
    def namespaces(self) -> tuple[str, ...]:
        return tuple(sorted(self._tables))

    def lookup(self, namespace: str, key: str) -> str | None:
        """Return the message for ``key`` in ``namespace`` or ``None`` on a miss."""

        table = self._tables.get(namespace)
        if table is None:
            return None
        return table.get(key)


EMPTY_CATALOG = Catalog()

__all__ = ["Catalog", "EMPTY_CATALOG"]
