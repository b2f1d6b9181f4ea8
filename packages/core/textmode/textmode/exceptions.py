"""Exception hierarchy for the text mode.

All exceptions raised by :mod:`textmode` inherit from
:class:`TextModeError`, allowing callers to catch the entire family
with a single ``except`` clause.

* :class:`MalformedFrontmatterError` -- the YAML between the ``---``
  fences (or after an unterminated opening fence) could not be parsed
  into a mapping.
* :class:`ModeNotFoundError` -- no mode is registered under the
  requested name.

File-system failures are not wrapped: they surface as the builtin
:class:`OSError` raised by the I/O layer.
"""


class TextModeError(Exception):
    """Base exception for all text mode errors."""


class MalformedFrontmatterError(TextModeError, ValueError):
    """Frontmatter of a resource is not a valid YAML mapping.

    Raised by :func:`~textmode.split_frontmatter` (and therefore by
    :meth:`TextMode.read_file <textmode.TextMode.read_file>`) when the
    YAML parser rejects the frontmatter.  The original
    :class:`yaml.YAMLError` is available as ``__cause__``.

    Example::

        try:
            record = split_frontmatter("---\\ntitle: [unclosed\\n---\\nBody")
        except MalformedFrontmatterError as exc:
            print(f"Bad frontmatter: {exc}")
    """


class ModeNotFoundError(TextModeError, LookupError):
    """A requested mode is not registered with the environment.

    Example::

        try:
            mode = env.modes.get("binary")
        except ModeNotFoundError:
            print("Mode not found")
    """
