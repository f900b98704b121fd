"""Console presentation of check results."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.text import Text

from core.types import CheckSummary, DocumentReport

MISSING_HEADER = "The following linked files cannot be found:"

SOURCE_STYLE = "magenta"
MISSING_STYLE = "white"
ERROR_STYLE = "red"


def make_console(color: str = "auto", stderr: bool = False) -> Console:
    """Build a rich console honouring the ``auto``/``always``/``never`` policy."""
    if color == "always":
        return Console(stderr=stderr, force_terminal=True, highlight=False)
    if color == "never":
        return Console(stderr=stderr, color_system=None, highlight=False)
    return Console(stderr=stderr, highlight=False)


class ConsoleReporter:
    """
    Prints missing links on stdout and everything else on stderr.

    The header is printed once, before the first missing link of the run.
    """

    def __init__(
        self,
        color: str = "auto",
        out: Optional[Console] = None,
        err: Optional[Console] = None,
    ) -> None:
        self.out = out if out is not None else make_console(color)
        self.err = err if err is not None else make_console(color, stderr=True)
        self._header_printed = False

    def _line(self, console: Console, text: str, style: Optional[str] = None) -> None:
        console.print(Text(text, style=style or ""), soft_wrap=True)

    def notice(self, message: str) -> None:
        self._line(self.err, message)

    def error(self, message: str) -> None:
        self._line(self.err, message, ERROR_STYLE)

    def document(self, report: DocumentReport, show_source: bool = False) -> None:
        """Print the diagnostics and missing links of one document."""
        for failure in report.diagnostics:
            self.error(f"Error decoding the following path: {failure.raw}")
            self.error(f"The following error was produced: {failure.reason}")

        if report.missing and not self._header_printed:
            self._header_printed = True
            self.notice(MISSING_HEADER)

        for missing in report.missing:
            if show_source:
                self._line(self.err, "")
                self._line(self.out, str(report.source), SOURCE_STYLE)
            self._line(self.out, str(missing), MISSING_STYLE)

    def unreadable(self, path: Path, reason: str) -> None:
        self.error(f"`{path}` could not be read: {reason}")

    def summary(self, summary: CheckSummary, show_source: bool = False) -> None:
        for report in summary.reports:
            self.document(report, show_source=show_source)
        for path, reason in summary.unreadable:
            self.unreadable(path, reason)
