"""Shared pytest fixtures for catalog and translator tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
import structlog

import jsoni18n
from jsoni18n.config import get_settings


@pytest.fixture(autouse=True)
def _isolate_state():
    jsoni18n.reset()
    get_settings.cache_clear()
    yield
    jsoni18n.reset()
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., Path]:
    """Write ``{relative_path: payload}`` files under a fresh catalog root."""

    counter = {"n": 0}

    def _write(files: dict[str, Any], root: Path | None = None) -> Path:
        if root is None:
            counter["n"] += 1
            root = tmp_path / f"locales{counter['n']}"
        root.mkdir(parents=True, exist_ok=True)
        for relative, payload in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            text = payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False)
            path.write_text(text, encoding="utf-8")
        return root

    return _write
