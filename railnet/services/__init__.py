"""Services layer - Application orchestration.

Available services:
- RouteFinderService: Termini, station listing and path queries
"""

from .route_finder import RouteFinderService

__all__ = ["RouteFinderService"]
