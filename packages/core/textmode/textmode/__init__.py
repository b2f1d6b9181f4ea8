"""Text resource mode with YAML frontmatter support.

This package reads text files that may begin with a YAML frontmatter
block into flat resource records, and writes a record's body back out:

* :func:`split_frontmatter` -- splits source text into frontmatter
  fields and a ``body``.
* :func:`resolve_encoding` -- picks the encoding for a resource type.
* :class:`TextMode` -- reads and writes text resource files.
* :class:`Mode` -- abstract base class for resource modes.
* :class:`Environment` / :class:`ModeRegistry` -- host registration point.
* :func:`setup` -- installs :class:`TextMode` as the ``"text"`` mode.
* :class:`ResourceType` -- per-call encoding and parsing configuration.
* :class:`TextModeError` -- base class for all library exceptions.

Install::

    pip install textmode
"""

from textmode.environment import Environment, ModeRegistry
from textmode.exceptions import MalformedFrontmatterError, ModeNotFoundError, TextModeError
from textmode.mode import Mode
from textmode.parsing import DEFAULT_ENCODING, ParsedRecord, resolve_encoding, split_frontmatter
from textmode.plugin import TEXT_MODE_NAME, PluginOptions, setup
from textmode.resource_type import ResourceType
from textmode.text_mode import TextMode

__all__ = [
    "DEFAULT_ENCODING",
    "TEXT_MODE_NAME",
    "Environment",
    "MalformedFrontmatterError",
    "Mode",
    "ModeNotFoundError",
    "ModeRegistry",
    "ParsedRecord",
    "PluginOptions",
    "ResourceType",
    "TextMode",
    "TextModeError",
    "resolve_encoding",
    "setup",
    "split_frontmatter",
]
