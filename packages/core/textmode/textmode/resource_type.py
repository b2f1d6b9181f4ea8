"""Pydantic configuration model for text resource types.

A :class:`ResourceType` tells :class:`~textmode.TextMode` how to read
and write the files of one kind of resource: which character encoding
to use and whether a leading YAML frontmatter block should be parsed.

Resource types are usually declared in a project configuration file.
String values may contain ``${VAR}`` placeholders that are resolved from
environment variables by :meth:`ResourceType.from_mapping`.  Unset
variables resolve to an empty string and emit a warning.

Example config (YAML)::

    encoding: ${SITE_ENCODING}
    parseFrontmatter: false
"""

from __future__ import annotations

import codecs
import logging
import os
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_logger = logging.getLogger(__name__)


class ResourceType(BaseModel):
    """Per-call configuration consumed by :class:`~textmode.TextMode`.

    Attributes:
        encoding: Character encoding used to read and write files.  An
            empty value falls back to ``"utf8"``.
        parse_frontmatter: Whether a leading ``---`` block is parsed as
            YAML frontmatter.  Also accepted as ``parseFrontmatter``.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    encoding: str | None = Field("utf8", description="Character encoding of resource files")
    parse_frontmatter: bool = Field(
        True,
        alias="parseFrontmatter",
        description="Parse a leading YAML frontmatter block",
    )

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str | None) -> str | None:
        if value:
            try:
                codecs.lookup(value)
            except LookupError:
                raise ValueError(f"Unknown encoding: {value!r}") from None
        return value

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> ResourceType:
        """Build a resource type from parsed JSON or YAML config data.

        ``${VAR}`` placeholders in string values are replaced before
        validation.

        Args:
            data: Mapping such as ``{"encoding": "ascii"}``.

        Returns:
            A validated :class:`ResourceType`.

        Raises:
            pydantic.ValidationError: If a value is invalid, e.g. an
                unknown encoding.
        """
        return cls.model_validate(resolve_env_vars(data))


# ------------------------------------------------------------------
# Environment variable resolution
# ------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def resolve_env_vars(data: Any) -> Any:
    """Recursively resolve ``${VAR}`` placeholders in config data.

    Walks dicts, lists, and strings.  Non-string scalars are returned
    as-is.
    """
    if isinstance(data, str):
        return _resolve_env_vars_in_string(data)
    if isinstance(data, dict):
        return {k: resolve_env_vars(v) for k, v in data.items()}
    if isinstance(data, list):
        return [resolve_env_vars(item) for item in data]
    return data


def _resolve_env_vars_in_string(value: str) -> str:
    def _replace(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name, "")
        if not env_value:
            _logger.warning("Environment variable '%s' is not set or empty", var_name)
        return env_value

    return _ENV_VAR_RE.sub(_replace, value)
