"""
Link checker driver.

Ties the parser, resolver and document helpers to the settings and decides
how failures of individual documents are handled.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from config.settings import Settings
from core.exceptions import DocumentReadError, SourceError
from core.types import CheckSummary, DocumentReport
from mdlinks.documents import is_markdown, iter_markdown_files, read_markdown
from mdlinks.parser import build_parser
from mdlinks.resolver import check_document_text
from utils.logging_config import get_logger, log_extra

logger = get_logger(__name__)


class LinkChecker:
    """Checks Markdown documents for links to local files that do not exist."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.parser = build_parser(
            tables=self.settings.enable_tables,
            autolink=self.settings.enable_autolink,
        )

    def check_text(self, text: str, source_path: Union[str, Path]) -> DocumentReport:
        report = check_document_text(
            text,
            source_path,
            parser=self.parser,
            include_images=self.settings.check_images,
            strip_fragments=self.settings.strip_fragments,
        )
        logger.debug(
            "Checked %s",
            report.source,
            extra=log_extra(
                source=str(report.source),
                links=report.link_count,
                missing=len(report.missing),
                undecodable=len(report.diagnostics),
            ),
        )
        return report

    def check_file(self, path: Union[str, Path]) -> DocumentReport:
        """Read and check one document. Read failures propagate."""
        return self.check_text(read_markdown(path), path)

    def check_tree(self, root: Union[str, Path]) -> CheckSummary:
        """
        Check every Markdown file below ``root``.

        A document that cannot be read is logged, recorded in
        ``CheckSummary.unreadable`` and skipped; the walk carries on.
        """
        summary = CheckSummary()
        for path in iter_markdown_files(
            root,
            extensions=self.settings.markdown_extensions,
            follow_symlinks=self.settings.follow_symlinks,
        ):
            try:
                summary.reports.append(self.check_file(path))
            except DocumentReadError as exc:
                logger.error("Cannot read %s: %s", exc.path, exc.reason)
                summary.unreadable.append((exc.path, exc.reason))
        logger.info(
            "Checked %d documents, %d missing links",
            summary.documents_checked,
            summary.missing_count,
        )
        return summary

    def check_path(self, src: Union[str, Path]) -> CheckSummary:
        """
        Check a single Markdown file or a directory tree.

        Raises:
            SourceError: If ``src`` is missing, is not a Markdown file, or is
                neither a file nor a directory
            DocumentReadError: If ``src`` is a file that cannot be read
        """
        src = Path(src)
        if not src.exists():
            raise SourceError(src, "not found. Skipping.")
        if src.is_file():
            if not is_markdown(src, self.settings.markdown_extensions):
                raise SourceError(src, "does not appear to be a Markdown file. Skipping.")
            return CheckSummary(reports=[self.check_file(src)])
        if src.is_dir():
            return self.check_tree(src)
        raise SourceError(src, "is neither a file nor a directory. Skipping.")
