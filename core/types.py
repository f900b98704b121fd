"""
Core type definitions for the Markdown link checker.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Tuple


class LinkKind(Enum):
    EXTERNAL = "external"
    LOCAL = "local"


@dataclass(frozen=True)
class DecodeFailure:
    """A link target dropped because it could not be decoded."""
    raw: str
    reason: str


@dataclass
class ExtractionResult:
    """Decoded local references and the diagnostics gathered while decoding."""
    local_references: List[str] = field(default_factory=list)
    diagnostics: List[DecodeFailure] = field(default_factory=list)


@dataclass
class DocumentReport:
    """Outcome of checking one Markdown document."""
    source: Path
    missing: List[Path] = field(default_factory=list)
    diagnostics: List[DecodeFailure] = field(default_factory=list)
    link_count: int = 0

    @property
    def has_missing(self) -> bool:
        return bool(self.missing)

    @property
    def has_problems(self) -> bool:
        return bool(self.missing or self.diagnostics)


@dataclass
class CheckSummary:
    """Reports for every document checked in one run."""
    reports: List[DocumentReport] = field(default_factory=list)
    unreadable: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def documents_checked(self) -> int:
        return len(self.reports)

    @property
    def missing_count(self) -> int:
        return sum(len(r.missing) for r in self.reports)

    @property
    def has_missing(self) -> bool:
        return any(r.has_missing for r in self.reports)
