"""Tests for process-wide catalog state and reloads."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

import jsoni18n
from jsoni18n import CatalogLoadError, CatalogRegistry


def test_round_trip_through_module_facade(write_catalog):
    jsoni18n.load(write_catalog({"en.json": {"hello": "Hi"}}))

    assert jsoni18n.new("en").print("hello") == "Hi"


def test_namespace_derivation_through_module_facade(write_catalog):
    jsoni18n.load(write_catalog({"admin/es.json": {"hello": "Hola"}}))

    assert jsoni18n.new("admin/es").print("hello") == "Hola"


def test_partial_failure_load_keeps_valid_namespaces(write_catalog):
    catalog = jsoni18n.load(
        write_catalog({"en.json": {"hello": "Hi"}, "fr.json": "{not json"})
    )

    assert catalog.namespaces == ("en",)
    assert jsoni18n.get_catalog() is catalog


def test_reload_replaces_catalog(write_catalog):
    jsoni18n.load(write_catalog({"en.json": {"hello": "Hi", "bye": "Bye"}}))
    jsoni18n.load(write_catalog({"fr.json": {"hello": "Bonjour"}}))

    catalog = jsoni18n.get_catalog()
    assert catalog.namespaces == ("fr",)
    assert jsoni18n.new("en").print("hello") == "hello"
    assert jsoni18n.new("fr").print("hello") == "Bonjour"


def test_failed_load_keeps_previous_catalog(write_catalog, tmp_path: Path):
    previous = jsoni18n.load(write_catalog({"en.json": {"hello": "Hi"}}))

    with pytest.raises(CatalogLoadError):
        jsoni18n.load(tmp_path / "missing")

    assert jsoni18n.get_catalog() is previous
    assert jsoni18n.new("en").print("hello") == "Hi"


def test_debug_toggle_and_reset(write_catalog):
    jsoni18n.load(write_catalog({"en.json": {"hello": "Hi"}}))
    jsoni18n.debug(True)
    assert jsoni18n.new("en").debug is True

    jsoni18n.reset()

    assert jsoni18n.new("en").debug is False
    assert len(jsoni18n.get_catalog()) == 0


def test_registries_are_isolated(write_catalog):
    first = CatalogRegistry()
    second = CatalogRegistry()

    first.load(write_catalog({"en.json": {"hello": "Hi"}}))

    assert "en" in first.catalog
    assert len(second.catalog) == 0
    assert len(jsoni18n.get_catalog()) == 0


def test_readers_only_see_complete_catalogs_during_reloads(write_catalog):
    roots = [
        write_catalog({"en.json": {"a": "one", "b": "one"}}),
        write_catalog({"en.json": {"a": "two", "b": "two"}}),
    ]
    registry = CatalogRegistry()
    registry.load(roots[0])
    stop = threading.Event()
    errors: list[str] = []

    def reader() -> None:
        t = jsoni18n.Translator("en", registry=registry)
        while not stop.is_set():
            catalog = t.catalog
            pair = (catalog.lookup("en", "a"), catalog.lookup("en", "b"))
            if pair not in {("one", "one"), ("two", "two")}:
                errors.append(repr(pair))

    def writer() -> None:
        for i in range(20):
            registry.load(roots[i % 2])

    readers = [threading.Thread(target=reader) for _ in range(4)]
    writers = [threading.Thread(target=writer) for _ in range(2)]
    for thread in readers + writers:
        thread.start()
    for thread in writers:
        thread.join()
    stop.set()
    for thread in readers:
        thread.join()

    assert errors == []
    assert registry.catalog.lookup("en", "a") in {"one", "two"}


def test_replace_installs_prebuilt_catalog():
    registry = CatalogRegistry(jsoni18n.Catalog({"en": {"hello": "Hi"}}))
    t = jsoni18n.Translator("en", registry=registry)
    assert t.print("hello") == "Hi"

    registry.replace(jsoni18n.Catalog({"en": {"hello": "Hello"}}))

    assert t.print("hello") == "Hello"
    assert registry.catalog.namespaces == ("en",)
