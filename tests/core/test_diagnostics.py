# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_diagnostics.py
#   file_relpath : tests/core/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration diagnostics log."""

from __future__ import annotations

from yamlscribe.core.diagnostics import Diagnostic, DiagnosticLevel, DiagnosticLog


def test_log_collects_in_order() -> None:
    log = DiagnosticLog()
    log.add_info("loaded")
    log.add_warning("unknown key")
    log.add_error("bad value")
    log.add_error("worse value")

    assert len(log) == 4
    assert [d.level for d in log] == [
        DiagnosticLevel.INFO,
        DiagnosticLevel.WARNING,
        DiagnosticLevel.ERROR,
        DiagnosticLevel.ERROR,
    ]
    assert log.has_warning()
    assert log.has_error()
    assert log.errors() == ["bad value", "worse value"]


def test_empty_log() -> None:
    log = DiagnosticLog()
    assert len(log) == 0
    assert not log.has_warning()
    assert not log.has_error()
    assert log.errors() == []


def test_render_without_color() -> None:
    diag = Diagnostic(DiagnosticLevel.WARNING, "unknown key 'x'")
    assert diag.render(color=False) == "warning: unknown key 'x'"


def test_render_with_color_keeps_message() -> None:
    diag = Diagnostic(DiagnosticLevel.ERROR, "bad")
    text: str = diag.render(color=True)
    assert "error:" in text
    assert text.endswith(" bad")
