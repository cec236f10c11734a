"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import ConfigurationError, NetworkLoadError, RailNetError
from .models import (
    JourneyPath,
    LineStop,
    LineSummary,
    Segment,
    SegmentRecord,
    Termini,
    TimedSegment,
)

__all__ = [
    # Models
    "SegmentRecord",
    "Segment",
    "TimedSegment",
    "Termini",
    "LineStop",
    "LineSummary",
    "JourneyPath",
    # Errors
    "RailNetError",
    "NetworkLoadError",
    "ConfigurationError",
]
