"""printf-style substitution for translated messages."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from jsoni18n.logging import logger


def format_message(template: str, args: Sequence[Any]) -> str:
    """Apply ``template % args``, returning the template untouched on mismatch."""

    try:
        return template % tuple(args)
    except (TypeError, ValueError, KeyError) as exc:
        logger.warning(
            "translation_format_failed",
            template=template,
            args=[repr(arg) for arg in args],
            error=str(exc),
        )
        return template


__all__ = ["format_message"]
