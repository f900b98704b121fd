"""
Link extraction and resolution.

Pipeline for a single document:

1. Walk the syntax tree and collect every link target in document order.
2. Drop targets that are absolute URLs.
3. Percent-decode the rest; undecodable targets become diagnostics.
4. Resolve relative paths against the document's directory.
5. Report every resolved path with no filesystem entry.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union
from urllib.parse import SplitResult, unquote_to_bytes, urlsplit

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from core.exceptions import LinkDecodeError
from core.types import DecodeFailure, DocumentReport, ExtractionResult, LinkKind
from mdlinks.parser import parse_markdown
from utils.logging_config import get_logger, log_extra

logger = get_logger(__name__)

LINK_NODE = "link"
IMAGE_NODE = "image"

# Schemes whose URLs are meaningless without a host
_HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

# Never valid in a host name, checked after percent-decoding
_FORBIDDEN_HOST_CHARS = frozenset(" #%/:<>?@[\\]^|\x7f")


def _node_target(node: SyntaxTreeNode) -> Optional[str]:
    key = "src" if node.type == IMAGE_NODE else "href"
    value = node.attrs.get(key)
    return value if isinstance(value, str) else None


def iter_link_nodes(
    root: SyntaxTreeNode, include_images: bool = False
) -> Iterator[SyntaxTreeNode]:
    """
    Yield link nodes in pre-order, depth-first, left-to-right order.

    The children of a link node are its display text and are never searched.
    An explicit stack keeps deep documents from exhausting the recursion limit.
    """
    wanted = {LINK_NODE, IMAGE_NODE} if include_images else {LINK_NODE}
    stack = list(reversed(root.children))
    while stack:
        node = stack.pop()
        if node.type in wanted:
            yield node
            continue
        stack.extend(reversed(node.children))


def extract_link_targets(
    root: SyntaxTreeNode, include_images: bool = False
) -> List[str]:
    """Return the raw URL of every link node, in document order."""
    targets: List[str] = []
    for node in iter_link_nodes(root, include_images=include_images):
        target = _node_target(node)
        if target is None:
            continue
        try:
            target.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug("Dropping link target that is not valid text: %r", target)
            continue
        targets.append(target)
    return targets


def _split_url(target: str) -> SplitResult:
    parts = urlsplit(target)
    scheme = parts.scheme.lower()
    if scheme in _HOST_REQUIRED_SCHEMES and not parts.netloc:
        # "http:host/path" and "http:/host/path" both name host "host"
        rest = target[len(parts.scheme) + 1:].lstrip("/\\")
        parts = urlsplit(f"{scheme}://{rest}")
    return parts


def _valid_host(parts: SplitResult) -> bool:
    hostname = parts.hostname
    if not hostname:
        return False
    if parts.netloc.rpartition("@")[2].startswith("["):
        # bracketed IPv6 literal, already checked by urlsplit
        return True
    try:
        host = unquote_to_bytes(hostname).decode("utf-8")
    except UnicodeError:
        return False
    return not any(ch in _FORBIDDEN_HOST_CHARS or ch < " " for ch in host)


def is_external(target: str) -> bool:
    """
    Whether ``target`` parses as an absolute URL.

    A target is external when it carries a valid scheme and any port it
    names is in range; ``http``-like schemes additionally need a valid host.
    Anything the URL parser rejects is local.
    """
    try:
        parts = _split_url(target.strip())
        if not parts.scheme:
            return False
        # raises for a non-numeric or out of range port
        parts.port
        if parts.scheme.lower() in _HOST_REQUIRED_SCHEMES:
            return _valid_host(parts)
    except ValueError:
        return False
    return True


def classify_target(target: str) -> LinkKind:
    return LinkKind.EXTERNAL if is_external(target) else LinkKind.LOCAL


def decode_reference(target: str) -> str:
    """
    Percent-decode ``target`` into text.

    Escapes that are not valid (``%zz``) are kept verbatim; decoded bytes that
    are not UTF-8 raise ``LinkDecodeError``.
    """
    try:
        return unquote_to_bytes(target).decode("utf-8")
    except UnicodeError as exc:
        raise LinkDecodeError(target, str(exc)) from exc


def strip_fragment(target: str) -> str:
    """Remove a trailing ``#fragment`` from a link target."""
    path, _, _ = target.partition("#")
    return path


def collect_local_references(
    targets: Iterable[str], strip_fragments: bool = False
) -> ExtractionResult:
    """
    Classify and decode link targets.

    Returns the decoded local references in their original order together with
    one ``DecodeFailure`` for every target that could not be decoded.
    """
    result = ExtractionResult()
    for target in targets:
        if classify_target(target) is LinkKind.EXTERNAL:
            continue

        candidate = target
        if strip_fragments and "#" in target:
            candidate = strip_fragment(target)
            if not candidate:
                # in-document anchor
                continue

        try:
            decoded = decode_reference(candidate)
        except LinkDecodeError as exc:
            logger.debug(
                "Failed to decode link target",
                extra=log_extra(target=target, reason=exc.reason),
            )
            result.diagnostics.append(DecodeFailure(raw=target, reason=exc.reason))
            continue
        result.local_references.append(decoded)
    return result


def resolve_reference(reference: str, base_dir: Union[str, Path]) -> Path:
    """Join a relative reference onto ``base_dir``; absolute ones pass through."""
    path = Path(reference)
    if path.is_absolute():
        return path
    return Path(base_dir) / path


def base_directory(source_path: Union[str, Path]) -> Path:
    """Directory containing ``source_path``; empty for a bare file name."""
    return Path(source_path).parent


def find_missing(paths: Iterable[Path]) -> List[Path]:
    """Return the paths with no filesystem entry, keeping their order."""
    return [path for path in paths if not os.path.lexists(path)]


def check_document_text(
    text: Union[str, bytes],
    source_path: Union[str, Path],
    *,
    parser: Optional[MarkdownIt] = None,
    include_images: bool = False,
    strip_fragments: bool = False,
) -> DocumentReport:
    """
    Run the whole pipeline over one document.

    Args:
        text: Document contents
        source_path: Where the document lives; only its directory is used
        parser: Parser to use instead of the default dialect
        include_images: Also check image sources
        strip_fragments: Ignore ``#fragment`` suffixes and pure anchors instead
            of resolving them as part of the file name

    Returns:
        ``DocumentReport`` with missing paths in document order
    """
    tree = parse_markdown(text, parser=parser)
    targets = extract_link_targets(tree, include_images=include_images)
    extraction = collect_local_references(targets, strip_fragments=strip_fragments)

    base_dir = base_directory(source_path)
    resolved = [resolve_reference(ref, base_dir) for ref in extraction.local_references]

    return DocumentReport(
        source=Path(source_path),
        missing=find_missing(resolved),
        diagnostics=extraction.diagnostics,
        link_count=len(targets),
    )


def find_missing_links(
    text: Union[str, bytes], source_path: Union[str, Path]
) -> List[Path]:
    """Missing local link targets of a document, in document order."""
    return check_document_text(text, source_path).missing
