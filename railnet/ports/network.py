"""Network ports - Abstractions for loading the rail network.

The route graph is built once from the records a source delivers; how
those records are stored is up to the adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import SegmentRecord


class NetworkSourcePort(Protocol):
    """Port for loading raw network data.

    Implementations: adapters/network/csv_source.py,
    adapters/network/memory_source.py
    """

    def load_segments(self) -> Sequence[SegmentRecord]:
        """Load route segments in source order.

        Returns:
            The segment records, duplicates included.

        Raises:
            NetworkLoadError: If the source cannot be read.
        """
        ...

    def load_step_free(self) -> AbstractSet[str]:
        """Load the names of stations with step-free access.

        Raises:
            NetworkLoadError: If the source cannot be read.
        """
        ...
