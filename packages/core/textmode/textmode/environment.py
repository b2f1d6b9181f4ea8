"""Host environment with a registry of named modes.

An :class:`Environment` represents a project that reads and writes
resources.  Plugins install their modes into :attr:`Environment.modes`
once at setup time; the project then looks modes up by name.

Example::

    from textmode import Environment, setup

    env = Environment()
    setup(env)

    mode = env.modes.get("text")
    resource = await mode.read_file("index.md")
"""

from __future__ import annotations

import logging

from textmode.exceptions import ModeNotFoundError
from textmode.mode import Mode

_logger = logging.getLogger(__name__)


class ModeRegistry:
    """Index of :class:`~textmode.Mode` instances keyed by name.

    Registering a mode under an existing name replaces the previous
    mode, so a project can swap in its own implementation of a built-in
    mode.
    """

    def __init__(self) -> None:
        self._modes: dict[str, Mode] = {}

    def __repr__(self) -> str:
        n = len(self._modes)
        label = "mode" if n == 1 else "modes"
        return f"ModeRegistry({n} {label})"

    def __contains__(self, name: object) -> bool:
        return name in self._modes

    def __len__(self) -> int:
        return len(self._modes)

    def set(self, name: str, mode: Mode) -> None:
        """Register *mode* under *name*.

        Args:
            name: Mode name, e.g. ``"text"``.
            mode: The :class:`~textmode.Mode` to register.

        Raises:
            ValueError: If *name* is empty.
            TypeError: If *mode* is not a :class:`~textmode.Mode`.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("mode name must be a non-empty string")
        if not isinstance(mode, Mode):
            raise TypeError(f"mode must be a Mode, got {type(mode).__name__}")
        if name in self._modes:
            _logger.debug("Replacing mode '%s'", name)
        self._modes[name] = mode

    def get(self, name: str) -> Mode:
        """Return the mode registered under *name*.

        Raises:
            ModeNotFoundError: If no mode with the given name is registered.
        """
        try:
            return self._modes[name]
        except KeyError:
            raise ModeNotFoundError(f"Mode '{name}' not found in registry") from None

    def names(self) -> list[str]:
        """Return registered mode names sorted alphabetically."""
        return sorted(self._modes)


class Environment:
    """A project that resources are read into and written out of."""

    def __init__(self) -> None:
        self.modes = ModeRegistry()

    def __repr__(self) -> str:
        return f"Environment(modes={self.modes!r})"
