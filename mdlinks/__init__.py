"""
Markdown local link checker.

Provides:
- Markdown parsing into a syntax tree (tables and autolinks enabled)
- Link extraction, URL classification and path resolution
- File and directory checking with console reporting
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "LinkChecker",
    "ConsoleReporter",
    "build_parser",
    "parse_markdown",
    "check_document_text",
    "find_missing_links",
    "is_markdown",
    "iter_markdown_files",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "LinkChecker": ("mdlinks.checker", "LinkChecker"),
    "ConsoleReporter": ("mdlinks.report", "ConsoleReporter"),
    "build_parser": ("mdlinks.parser", "build_parser"),
    "parse_markdown": ("mdlinks.parser", "parse_markdown"),
    "check_document_text": ("mdlinks.resolver", "check_document_text"),
    "find_missing_links": ("mdlinks.resolver", "find_missing_links"),
    "is_markdown": ("mdlinks.documents", "is_markdown"),
    "iter_markdown_files": ("mdlinks.documents", "iter_markdown_files"),
}


def __getattr__(name: str) -> Any:
    target = _EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module 'mdlinks' has no attribute '{name}'")

    module_name, symbol_name = target
    module = import_module(module_name)
    symbol = getattr(module, symbol_name)
    globals()[name] = symbol
    return symbol


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))
