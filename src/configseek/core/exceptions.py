"""Domain exceptions for configseek.

All library errors inherit from ConfigseekError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

A configuration source that simply does not exist is not an error: loaders
report it as ``None`` and the search moves on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class ConfigseekError(Exception):
    """Base class for all configseek exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ResolutionError(ConfigseekError):
    """Raised when a search path or config path does not exist.

    Attributes:
        path: The path that could not be resolved.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the path."""
        return f"Verify the path exists: {self.path}"


class ConfigParseError(ConfigseekError):
    """Raised when an existing configuration file cannot be parsed.

    Attributes:
        filepath: Path to the file that failed to parse.
        line: Line number where the error occurred (if available).
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        filepath: Path,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.filepath = filepath
        self.line = line
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the file at the specific line."""
        if self.line:
            return f"Check {self.filepath.name} at line {self.line}"
        return f"Check {self.filepath.name} for syntax errors"


class ConfigurationError(ConfigseekError):
    """Raised for invalid explorer options."""

    pass
