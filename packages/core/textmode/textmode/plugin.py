"""Plugin entry point that installs :class:`~textmode.TextMode` into an environment."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from textmode.environment import Environment
from textmode.text_mode import TextMode

_logger = logging.getLogger(__name__)

#: Name the text mode is registered under.
TEXT_MODE_NAME: str = "text"


class PluginOptions(BaseModel):
    """Options for configuring a plugin instance.

    No options are currently recognized; unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")


def setup(
    env: Environment,
    options: PluginOptions | Mapping[str, Any] | None = None,
) -> TextMode:
    """Set up a new instance of the plugin.

    Args:
        env: An environment that represents a project.
        options: Additional options for configuring the plugin instance.

    Returns:
        The :class:`~textmode.TextMode` registered as ``"text"``.
    """
    if options is not None and not isinstance(options, PluginOptions):
        options = PluginOptions.model_validate(dict(options))

    instance = TextMode()
    env.modes.set(TEXT_MODE_NAME, instance)
    _logger.debug("Registered '%s' mode", TEXT_MODE_NAME)
    return instance
