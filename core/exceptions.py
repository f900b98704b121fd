"""
Unified exception hierarchy.

Every error raised by the link checker derives from ``LinkCheckError`` so callers
can catch one base class and still inspect the error code.
"""
from pathlib import Path
from typing import Optional, Union


class LinkCheckError(Exception):
    """Base exception for the project."""

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: Optional[str] = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class LinkDecodeError(LinkCheckError):
    """A link target could not be percent-decoded into text."""

    def __init__(
        self,
        raw: str,
        reason: str,
        code: str = "LINK_DECODE_ERROR"
    ) -> None:
        self.raw: str = raw
        self.reason: str = reason
        super().__init__(f"cannot decode {raw!r}: {reason}", code)


class DocumentReadError(LinkCheckError):
    """A Markdown document could not be read."""

    def __init__(
        self,
        path: Union[str, Path],
        reason: str,
        code: str = "DOCUMENT_READ_ERROR"
    ) -> None:
        self.path: Path = Path(path)
        self.reason: str = reason
        super().__init__(f"{self.path}: {reason}", code)


class SourceError(LinkCheckError):
    """The source given to the checker cannot be checked at all."""

    def __init__(
        self,
        path: Union[str, Path],
        reason: str,
        code: str = "SOURCE_ERROR"
    ) -> None:
        self.path: Path = Path(path)
        self.reason: str = reason
        super().__init__(f"`{self.path}` {reason}", code)


class ConfigurationError(LinkCheckError):
    """Configuration error."""

    def __init__(self, message: str, code: str = "CONFIG_ERROR") -> None:
        super().__init__(message, code)
