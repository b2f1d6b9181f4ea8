"""Frontmatter parsing for text resources.

A text resource may begin with a block of YAML metadata delimited by
``---`` fence lines::

    ---
    title: An interesting muse...
    ---
    Space is shaped!

:func:`split_frontmatter` turns such a source into a flat record: every
frontmatter field becomes a key, and the text after the block becomes
the ``body`` key.  The ``body`` key is always present and always a
string.

The closing fence is optional.  When it is missing the remainder of the
file is frontmatter and the body is empty, so a resource may declare its
body inline::

    ---
    title: An example without main body
    body: Foo!
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

import yaml

from textmode.exceptions import MalformedFrontmatterError

if TYPE_CHECKING:
    from textmode.resource_type import ResourceType

_logger = logging.getLogger(__name__)

#: Encoding used when a resource type does not name one.
DEFAULT_ENCODING: str = "utf8"

#: Opening fence, closing fence and everything between them.  A closing
#: fence may end with ``\r`` so CRLF files are fenced too.
_FENCED_RE = re.compile(r"^---(.+?)^---(?=\r|$)", re.MULTILINE | re.DOTALL)

#: A record of frontmatter fields plus the mandatory ``body`` key.
ParsedRecord = dict[str, Any]


def split_frontmatter(source: str, parse_frontmatter: bool | None = True) -> ParsedRecord:
    """Split *source* into frontmatter fields and a ``body``.

    The text following the frontmatter block takes precedence over a
    ``body`` field declared inside the frontmatter; the inline field is
    only used when no trailing text remains.  Leading and trailing
    whitespace is always trimmed from the body.

    Args:
        source: Full decoded text of the resource.
        parse_frontmatter: When false the whole (trimmed) source becomes
            the body and no YAML is parsed.  ``None`` counts as true.

    Returns:
        A new dict that always contains a ``"body"`` string.

    Raises:
        MalformedFrontmatterError: If the frontmatter is not valid YAML
            or does not describe a mapping.

    Example::

        record = split_frontmatter("---\\ntitle: Hello\\n---\\nWorld")
        assert record == {"title": "Hello", "body": "World"}
    """
    if parse_frontmatter is None:
        parse_frontmatter = True

    if not parse_frontmatter:
        return _ensure_body({"body": source.strip()})

    frontmatter, body = _split_source(source)
    record = _load_frontmatter(frontmatter)
    record = _coerce_body(record)
    record = _override_body(record, body)
    return _ensure_body(record)


def resolve_encoding(resource_type: ResourceType | None = None) -> str:
    """Return the encoding named by *resource_type*, or :data:`DEFAULT_ENCODING`."""
    if resource_type is not None and resource_type.encoding:
        return resource_type.encoding
    return DEFAULT_ENCODING


# ------------------------------------------------------------------
# Pipeline stages
# ------------------------------------------------------------------


def _split_source(source: str) -> tuple[str, str]:
    """Return the ``(frontmatter_text, candidate_body)`` pair for *source*."""
    if not source.startswith("---"):
        return "", source

    match = _FENCED_RE.search(source)
    if match is not None:
        return match.group(1).strip(), source[match.end() :]

    _logger.debug("No closing frontmatter fence; treating remainder as frontmatter")
    return source[3:].strip(), ""


def _load_frontmatter(frontmatter: str) -> ParsedRecord:
    """Parse YAML *frontmatter* into a new record."""
    if not frontmatter:
        return {}

    try:
        data = yaml.safe_load(frontmatter)
    except yaml.YAMLError as exc:
        raise MalformedFrontmatterError(f"Invalid YAML in frontmatter: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFrontmatterError(
            f"Frontmatter must be a YAML mapping, got {type(data).__name__}"
        )
    return dict(data)


def _coerce_body(record: ParsedRecord) -> ParsedRecord:
    """Convert a non-string inline ``body`` field to its string form."""
    body = record.get("body")
    if body is None or isinstance(body, str):
        return record
    return {**record, "body": str(body)}


def _override_body(record: ParsedRecord, body: str) -> ParsedRecord:
    """Let non-empty trailing text replace any inline ``body`` field."""
    body = body.strip()
    if not body:
        return record
    return {**record, "body": body}


def _ensure_body(record: ParsedRecord) -> ParsedRecord:
    """Guarantee that ``body`` is present and a string."""
    if isinstance(record.get("body"), str):
        return record
    return {**record, "body": ""}
