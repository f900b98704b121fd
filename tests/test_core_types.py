"""Tests for core result types."""

from pathlib import Path

from core.types import CheckSummary, DecodeFailure, DocumentReport, ExtractionResult, LinkKind


def test_link_kind_values():
    assert LinkKind("external") is LinkKind.EXTERNAL
    assert LinkKind("local") is LinkKind.LOCAL


def test_extraction_result_defaults_are_independent():
    first = ExtractionResult()
    second = ExtractionResult()
    first.local_references.append("a.md")

    assert second.local_references == []
    assert second.diagnostics == []


def test_document_report_flags():
    clean = DocumentReport(source=Path("a.md"))
    undecodable = DocumentReport(source=Path("a.md"), diagnostics=[DecodeFailure("x", "y")])
    missing = DocumentReport(source=Path("a.md"), missing=[Path("b.md")])

    assert not clean.has_missing and not clean.has_problems
    assert not undecodable.has_missing and undecodable.has_problems
    assert missing.has_missing and missing.has_problems


def test_check_summary_totals():
    summary = CheckSummary(
        reports=[
            DocumentReport(source=Path("a.md"), missing=[Path("x.md"), Path("y.md")]),
            DocumentReport(source=Path("b.md")),
        ],
        unreadable=[(Path("c.md"), "boom")],
    )

    assert summary.documents_checked == 2
    assert summary.missing_count == 2
    assert summary.has_missing
    assert not CheckSummary().has_missing
