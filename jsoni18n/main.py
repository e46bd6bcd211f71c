"""Command-line entrypoint for looking up translations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from jsoni18n.config import get_settings
from jsoni18n.exceptions import CatalogLoadError
from jsoni18n.logging import configure_logging, logger
from jsoni18n.registry import CatalogRegistry
from jsoni18n.translator import Translator


def _coerce_arg(value: str) -> Any:
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsoni18n-lookup",
        description="Translate a message key using a JSON catalog directory.",
    )
    parser.add_argument("key", help="Message key (or many-form key with --count).")
    parser.add_argument("args", nargs="*", help="Formatting arguments.")
    parser.add_argument("--path", help="Catalog root directory (default: I18N_LOCALES_PATH).")
    parser.add_argument("--lang", help="Language namespace (default: I18N_DEFAULT_LANGUAGE).")
    parser.add_argument("--count", type=int, help="Select a plural form for this count.")
    parser.add_argument("--zero", help="Key used when count <= 0.")
    parser.add_argument("--one", help="Key used when count == 1.")
    parser.add_argument("--debug", action="store_true", help="Log missing translations.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    options = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level_value, stream=sys.stderr)

    root = options.path or settings.locales_path
    if root is None:
        parser.print_usage(sys.stderr)
        print("error: no catalog path given (use --path or I18N_LOCALES_PATH)", file=sys.stderr)
        return 2

    registry = CatalogRegistry(debug=options.debug or settings.debug)
    try:
        registry.load(root)
    except CatalogLoadError as exc:
        logger.error("catalog_load_failed", path=exc.path, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    translator = Translator(options.lang or settings.default_language, registry=registry)
    args = [_coerce_arg(value) for value in options.args]
    if options.count is None:
        text = translator.print(options.key, *args)
    else:
        text = translator.plural(
            options.count,
            options.zero or options.key,
            options.one or options.key,
            options.key,
            *args,
        )
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
