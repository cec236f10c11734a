"""Typed domain errors for the rail network route finder.

Lookups that find nothing are not errors here: queries return ``None``
or an empty tuple. Errors are reserved for failures that must stop the
application, such as a network that cannot be loaded.

All errors inherit from RailNetError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RailNetError(Exception):
    """Base error for the route finder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NetworkLoadError(RailNetError):
    """The network data could not be loaded.

    Raised at startup only; the route graph is never built from a
    partially loaded source.

    Attributes:
        file_path: Path to the data file if relevant
        line_number: 1-based line of the offending row, if any
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class ConfigurationError(RailNetError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
