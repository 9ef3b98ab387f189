"""Exceptions raised by the element scaffolder."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every error the scaffolder raises on purpose."""


class ConfigError(ScaffoldError):
    """Raised when the scaffold configuration is invalid (e.g. a bad element name)."""


class DirectiveError(ScaffoldError):
    """Raised when the test harness suite list cannot be rewritten."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class DirectiveNotFoundError(DirectiveError):
    """The ``WCT.loadSuites([...])`` directive is missing from the harness file."""


class MalformedDirectiveError(DirectiveError):
    """The suite list exists but is not a valid array of strings."""
