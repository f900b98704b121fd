"""
Markdown parsing.

Wraps markdown-it-py so the rest of the checker only ever sees a
``SyntaxTreeNode`` tree. The dialect is CommonMark plus GFM tables and
autolinking of bare URLs; nothing else is switched on.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional, Union

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode


def build_parser(tables: bool = True, autolink: bool = True) -> MarkdownIt:
    """
    Build a CommonMark parser with the requested extensions.

    Args:
        tables: Enable GFM pipe tables
        autolink: Turn bare URLs such as ``www.example.com`` into links
            (requires linkify-it-py)

    Returns:
        Configured ``MarkdownIt`` instance
    """
    md = MarkdownIt("commonmark", {"linkify": autolink})
    if tables:
        md.enable("table")
    if autolink:
        md.enable("linkify")
    return md


@lru_cache(maxsize=None)
def default_parser() -> MarkdownIt:
    """Shared parser with the fixed dialect {tables: on, autolink: on}."""
    return build_parser(tables=True, autolink=True)


def parse_markdown(
    text: Union[str, bytes], parser: Optional[MarkdownIt] = None
) -> SyntaxTreeNode:
    """
    Parse document text into a syntax tree rooted at a single ``root`` node.

    Parsing never fails: anything markdown-it cannot read as structure ends up
    as plain text. Bytes are decoded as UTF-8 with replacement characters, so
    a link whose URL bytes are not UTF-8 keeps its target with U+FFFD in place
    of the bad bytes and is resolved like any other. Pass ``str`` to keep
    undecodable input out of the link targets altogether.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    md = parser if parser is not None else default_parser()
    return SyntaxTreeNode(md.parse(text))
