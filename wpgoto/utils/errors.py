"""Error types raised while classifying and resolving a goto invocation.

Every error is terminal: the command boundary prints the message and exits
with a non-zero status.
"""

from __future__ import annotations


class GotoError(Exception):
    """Base exception for all goto errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(GotoError):
    """Too many tokens, or nothing to resolve."""


class InvocationError(GotoError):
    """The argument vector or invoker path is unavailable."""


class ContextError(GotoError):
    """A location was given without a project and the cwd is not inside one."""


class ThemeLookupError(GotoError, LookupError):
    """The active theme could not be read from the site database."""


class ConfigError(GotoError):
    """goto.yaml exists but cannot be used."""
