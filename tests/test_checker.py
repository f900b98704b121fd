"""
Tests for the checker driver.
"""
import logging
from pathlib import Path

import pytest

from config.settings import Settings
from core.exceptions import DocumentReadError, SourceError
from mdlinks.checker import LinkChecker


class TestLinkChecker:
    """Test checking files and directory trees."""

    def test_check_file(self, docs_dir, write_doc):
        doc = write_doc(docs_dir / "guide.md", "[a](a.md) [b](https://example.com)")

        report = LinkChecker().check_file(doc)

        assert report.source == doc
        assert report.missing == [docs_dir / "a.md"]

    def test_check_file_unreadable_propagates(self, docs_dir):
        with pytest.raises(DocumentReadError):
            LinkChecker().check_file(docs_dir / "absent.md")

    def test_settings_reach_the_pipeline(self, docs_dir):
        (docs_dir / "s.md").write_text("x", encoding="utf-8")
        text = "![d](d.png) [s](s.md#part)"

        literal = LinkChecker(Settings(check_images=True)).check_text(text, docs_dir / "guide.md")
        stripped = LinkChecker(Settings(strip_fragments=True)).check_text(text, docs_dir / "guide.md")

        assert literal.missing == [docs_dir / "d.png", docs_dir / "s.md#part"]
        assert stripped.missing == []

    def test_dialect_settings(self, docs_dir):
        text = "| h |\n|---|\n| [x](x.md) |\n"

        with_tables = LinkChecker().check_text(text, docs_dir / "t.md")
        without_tables = LinkChecker(Settings(enable_tables=False)).check_text(text, docs_dir / "t.md")

        assert with_tables.missing == [docs_dir / "x.md"]
        # the row is still a paragraph, so the link survives
        assert without_tables.missing == [docs_dir / "x.md"]

    def test_check_tree_is_independent_per_document(self, tmp_path, write_doc):
        write_doc(tmp_path / "a.md", "[x](x.md)")
        write_doc(tmp_path / "sub" / "b.md", "[x](x.md) [up](../a.md)")
        write_doc(tmp_path / "sub" / "ignored.txt", "[x](nope.md)")

        summary = LinkChecker().check_tree(tmp_path)

        assert [r.source for r in summary.reports] == [tmp_path / "a.md", tmp_path / "sub" / "b.md"]
        assert summary.reports[0].missing == [tmp_path / "x.md"]
        assert summary.reports[1].missing == [tmp_path / "sub" / "x.md"]
        assert summary.missing_count == 2
        assert summary.has_missing

    def test_check_tree_skips_unreadable_documents(self, tmp_path, write_doc, caplog):
        (tmp_path / "bad.md").write_bytes(b"\xff\xfe broken")
        write_doc(tmp_path / "good.md", "[x](x.md)")

        with caplog.at_level(logging.ERROR):
            summary = LinkChecker().check_tree(tmp_path)

        assert [r.source for r in summary.reports] == [tmp_path / "good.md"]
        assert [path for path, _ in summary.unreadable] == [tmp_path / "bad.md"]
        assert "bad.md" in caplog.text

    def test_check_tree_custom_extensions(self, tmp_path, write_doc):
        write_doc(tmp_path / "page.mdx", "[x](x.md)")
        write_doc(tmp_path / "page.md", "[y](y.md)")

        summary = LinkChecker(Settings(markdown_extensions=[".mdx"])).check_tree(tmp_path)

        assert [r.source for r in summary.reports] == [tmp_path / "page.mdx"]


class TestCheckPath:
    """Test source argument handling."""

    def test_single_file(self, docs_dir, write_doc):
        doc = write_doc(docs_dir / "guide.md", "[a](a.md)")
        summary = LinkChecker().check_path(doc)

        assert summary.documents_checked == 1
        assert summary.reports[0].missing == [docs_dir / "a.md"]

    def test_directory(self, docs_dir, write_doc):
        write_doc(docs_dir / "one.md", "fine")
        write_doc(docs_dir / "two.md", "[a](a.md)")

        summary = LinkChecker().check_path(docs_dir)

        assert summary.documents_checked == 2
        assert summary.missing_count == 1

    def test_missing_source(self, tmp_path):
        with pytest.raises(SourceError, match="not found"):
            LinkChecker().check_path(tmp_path / "nope")

    def test_not_markdown(self, tmp_path, write_doc):
        doc = write_doc(tmp_path / "notes.txt", "[a](a.md)")

        with pytest.raises(SourceError) as excinfo:
            LinkChecker().check_path(doc)

        assert excinfo.value.path == doc
        assert "does not appear to be a Markdown file" in excinfo.value.reason

    def test_accepts_string_paths(self, tmp_path, write_doc):
        write_doc(tmp_path / "guide.md", "text")
        summary = LinkChecker().check_path(str(tmp_path / "guide.md"))

        assert summary.reports[0].source == Path(tmp_path / "guide.md")
