"""
Exception types raised by funcsynth.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from typing import Optional


class SynthError(Exception):
    """Base class for all funcsynth errors."""

    pass


class ConfigurationError(SynthError, ValueError):
    """
    Raised when a node or envelope is built with invalid parameters.

    Examples: negative envelope durations, an even unison voice count,
    a gate whose start lies after its end.
    """

    pass


class ParseError(SynthError, ValueError):
    """
    Raised for malformed MML notation.

    Attributes:
        text: The offending token text
        position: Character offset of the token within its track
        track: Index of the track (comma-separated voice), if known
    """

    def __init__(
        self,
        message: str,
        text: str = "",
        position: Optional[int] = None,
        track: Optional[int] = None,
    ):
        self.text = text
        self.position = position
        self.track = track
        location = []
        if track is not None:
            location.append(f"track {track}")
        if position is not None:
            location.append(f"position {position}")
        if location:
            message = f"{message} ({', '.join(location)}: {text!r})"
        super().__init__(message)


class ResourceError(SynthError, OSError):
    """Raised when an external resource (e.g. a filter file) is missing or truncated."""

    pass


class RenderError(SynthError, RuntimeError):
    """Raised for structural failures while rendering or filtering a buffer."""

    pass


class IntegralUnavailableError(SynthError, NotImplementedError):
    """Raised by integral() on nodes that have no closed-form antiderivative."""

    pass
