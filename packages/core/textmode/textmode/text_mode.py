"""Mode for reading and writing text resource files.

This module implements :class:`TextMode`, which reads text files with an
optional YAML frontmatter block into flat resource records and writes a
record's ``body`` back to disk.

Reading and writing are deliberately asymmetric: frontmatter fields are
read into the record, but only ``body`` is ever written.  A resource
read from a file with frontmatter and written back out loses its
frontmatter.

All methods are ``async`` to satisfy the :class:`~textmode.Mode`
interface.  File I/O is synchronous internally because text resources
are small and local disk access does not meaningfully block the event
loop.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from textmode.mode import Mode
from textmode.parsing import ParsedRecord, resolve_encoding, split_frontmatter
from textmode.resource_type import ResourceType

_logger = logging.getLogger(__name__)


class TextMode(Mode):
    """Mode for text resources with optional YAML frontmatter.

    Every record produced by :meth:`read_file` contains a ``body``
    string and an ``_encoding`` entry.  ``_encoding`` defaults to the
    encoding the file was read with, but frontmatter may override it to
    change the encoding used when the resource is written::

        ---
        _encoding: ascii
        ---
        Plain old text.

    Example::

        mode = TextMode()
        resource = await mode.read_file("index.md")
        print(resource["title"])
        await mode.write_file("index.html", resource)
    """

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    async def read_file(
        self,
        path: str | Path,
        resource_type: ResourceType | None = None,
    ) -> ParsedRecord:
        """Read a text file and parse any frontmatter it begins with.

        Args:
            path: File to read.
            resource_type: Controls the encoding used to decode the file
                and whether frontmatter is parsed.  Defaults to UTF-8
                with frontmatter parsing enabled.

        Returns:
            Record of frontmatter fields plus ``body`` and ``_encoding``.

        Raises:
            OSError: If the file does not exist or cannot be read.
            MalformedFrontmatterError: If the frontmatter is not a valid
                YAML mapping.
        """
        parse_frontmatter = resource_type.parse_frontmatter if resource_type is not None else True
        encoding = resolve_encoding(resource_type)

        _logger.debug("Reading %s as %s", path, encoding)
        with open(path, encoding=encoding, newline="") as fp:
            source = fp.read()

        data = self.read_string(source, parse_frontmatter)
        data["_encoding"] = data.get("_encoding") or encoding
        return data

    def read_string(self, source: str, parse_frontmatter: bool | None = True) -> ParsedRecord:
        """Read resource data from a string.

        See :func:`~textmode.split_frontmatter` for the parsing rules.

        Args:
            source: Source with frontmatter and/or body.
            parse_frontmatter: Indicates whether any frontmatter should
                be parsed.

        Returns:
            Record of frontmatter fields plus ``body``.
        """
        return split_frontmatter(source, parse_frontmatter)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    async def write_file(
        self,
        path: str | Path,
        resource: Mapping[str, Any] | None = None,
        resource_type: ResourceType | None = None,
    ) -> None:
        """Write the ``body`` of *resource* to *path*.

        Only the body is persisted; other fields are ignored.  The file
        is encoded with the resource's ``_encoding`` when set, otherwise
        with the encoding of *resource_type*.

        Args:
            path: File to write, replaced if it exists.
            resource: Resource record.  ``None`` writes an empty file.
            resource_type: Supplies the fallback encoding.

        Raises:
            OSError: If the file cannot be written.
        """
        data: Mapping[str, Any] = resource or {}

        encoding = data.get("_encoding") or resolve_encoding(resource_type)
        body = data.get("body") or ""

        _logger.debug("Writing %s as %s", path, encoding)
        with open(path, "w", encoding=encoding, newline="") as fp:
            fp.write(body)
