from __future__ import annotations

from structlog.testing import capture_logs

from jsoni18n import format_message


def test_format_message_applies_printf_directives():
    assert format_message("%s has %d items (%.1f%%)", ("cart", 3, 42.5)) == "cart has 3 items (42.5%)"


def test_format_message_accepts_lists():
    assert format_message("%s-%s", ["a", "b"]) == "a-b"


def test_format_message_returns_template_on_mismatch():
    with capture_logs() as logs:
        assert format_message("%s and %s", ("one",)) == "%s and %s"
        assert format_message("%(name)s", ("x",)) == "%(name)s"

    assert len(logs) == 2
    assert all(entry["event"] == "translation_format_failed" for entry in logs)
