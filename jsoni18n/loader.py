"""Build a :class:`Catalog` from a directory tree of JSON files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from jsoni18n.catalog import Catalog
from jsoni18n.exceptions import CatalogLoadError
from jsoni18n.logging import logger

CATALOG_SUFFIX = ".json"


def namespace_for(root: str | Path, file_path: str | Path) -> str:
    """Return the namespace name of ``file_path`` relative to ``root``.

    ``<root>/admin/en.json`` becomes ``"admin/en"``.
    """

    relative = os.path.relpath(file_path, root)
    name = relative.replace(os.sep, "/")
    if os.altsep:
        name = name.replace(os.altsep, "/")
    name = name.removeprefix("/")
    return name.removesuffix(CATALOG_SUFFIX)


def parse_table(namespace: str, payload: Any, *, source: str | None = None) -> dict[str, str]:
    """Keep the string entries of a decoded JSON object, logging the rest."""

    table: dict[str, str] = {}
    for key, value in payload.items():
        if not isinstance(value, str):
            logger.warning(
                "catalog_entry_skipped",
                namespace=namespace,
                key=key,
                value_type=type(value).__name__,
                path=source,
            )
            continue
        table[key] = value
    return table


def _read_table(path: str, namespace: str) -> dict[str, str] | None:
    try:
        with open(path, "rb") as fp:
            raw = fp.read()
    except OSError as exc:
        raise CatalogLoadError(path, "Unable to read catalog file") from exc

    try:
        payload = json.loads(raw.decode("utf-8", errors="replace"))
    except json.JSONDecodeError as exc:
        logger.warning("catalog_parse_failed", path=path, namespace=namespace, error=str(exc))
        return None

    if not isinstance(payload, dict):
        logger.warning(
            "catalog_parse_failed",
            path=path,
            namespace=namespace,
            error=f"expected a JSON object, got {type(payload).__name__}",
        )
        return None
    return parse_table(namespace, payload, source=path)


def _raise_walk_error(exc: OSError) -> None:
    raise exc


def load_catalog(root: str | Path) -> Catalog:
    """Walk ``root`` and return a catalog of every ``.json`` file found.

    Unreadable directories or files abort the walk with
    :class:`CatalogLoadError`. Files that are not valid JSON objects are
    logged and left out of the catalog.
    """

    root = os.fspath(root)
    tables: dict[str, dict[str, str]] = {}
    try:
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if not filename.endswith(CATALOG_SUFFIX):
                    continue
                path = os.path.join(dirpath, filename)
                namespace = namespace_for(root, path)
                try:
                    table = _read_table(path, namespace)
                except CatalogLoadError as exc:
                    exc.partial = Catalog(tables)
                    raise
                if table is not None:
                    tables[namespace] = table
    except OSError as exc:
        raise CatalogLoadError(
            getattr(exc, "filename", None) or root,
            "Unable to walk catalog directory",
            partial=Catalog(tables),
        ) from exc

    catalog = Catalog(tables)
    logger.info("catalog_loaded", root=root, namespaces=len(catalog))
    return catalog


__all__ = ["CATALOG_SUFFIX", "load_catalog", "namespace_for", "parse_table"]
