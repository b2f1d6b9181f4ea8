"""Abstract interface for resource modes.

A *mode* knows how to turn a file on disk into a resource record and how
to write a record back out.  Hosts keep their modes in a
:class:`~textmode.ModeRegistry` keyed by name, so modes for different
kinds of content are interchangeable.

All methods are ``async`` so that implementations backed by network I/O
can be non-blocking.  Local filesystem implementations may use
synchronous I/O inside ``async def`` methods when file sizes are small.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from textmode.resource_type import ResourceType


class Mode(ABC):
    """Abstract base class that every resource mode must implement.

    Example::

        class JsonMode(Mode):
            async def read_file(self, path, resource_type=None): ...
            async def write_file(self, path, resource=None, resource_type=None): ...
    """

    @abstractmethod
    async def read_file(
        self,
        path: str | Path,
        resource_type: ResourceType | None = None,
    ) -> dict[str, Any]:
        """Read the file at *path* into a resource record.

        Args:
            path: File to read.
            resource_type: Optional configuration for the resource.

        Returns:
            Dictionary of resource fields.

        Raises:
            OSError: If the file cannot be read.
        """

    @abstractmethod
    async def write_file(
        self,
        path: str | Path,
        resource: Mapping[str, Any] | None = None,
        resource_type: ResourceType | None = None,
    ) -> None:
        """Write *resource* to the file at *path*.

        Args:
            path: File to write, replaced if it exists.
            resource: Resource record to persist.
            resource_type: Optional configuration for the resource.

        Raises:
            OSError: If the file cannot be written.
        """
