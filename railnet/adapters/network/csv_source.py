"""CSV network source adapter.

Reads the two network files:
- the lines file: a header row, then ``route,origin,destination,minutes``
- the step-free file: a header row, then one station name per row

Blank rows are skipped and fields are whitespace-trimmed. Any unreadable
file or malformed row aborts the load.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple

from ...config import NetworkConfig, get_config
from ...domain.errors import NetworkLoadError
from ...domain.models import SegmentRecord


@dataclass
class CSVNetworkSource:
    """Network source that loads from CSV files.

    Implements NetworkSourcePort. Both files are read at most once.

    Attributes:
        config: Network configuration (paths, file names, encoding)
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _segments: Optional[Tuple[SegmentRecord, ...]] = field(default=None, repr=False)
    _step_free: Optional[FrozenSet[str]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_segments(self) -> Sequence[SegmentRecord]:
        """Load route segments from the lines file.

        Returns:
            The segment records in file order.

        Raises:
            NetworkLoadError: If the file is missing or a row is malformed.
        """
        if self._segments is not None:
            return self._segments

        path = self.config.lines_path
        self._logger.debug("Loading segments", extra={"lines_path": str(path)})

        records: List[SegmentRecord] = []
        for line_number, row in self._rows(path):
            if len(row) != 4:
                raise NetworkLoadError(
                    f"Expected 4 columns, got {len(row)}",
                    file_path=str(path),
                    line_number=line_number,
                )
            route, origin, destination, minutes = row
            try:
                records.append(
                    SegmentRecord(route, origin, destination, int(minutes))
                )
            except ValueError as e:
                raise NetworkLoadError(
                    f"Invalid duration {minutes!r}",
                    file_path=str(path),
                    line_number=line_number,
                    cause=e,
                )

        self._segments = tuple(records)
        self._logger.info("Segments loaded", extra={"rows": len(records)})
        return self._segments

    def load_step_free(self) -> FrozenSet[str]:
        """Load the step-free station names.

        Raises:
            NetworkLoadError: If the file is missing or unreadable.
        """
        if self._step_free is not None:
            return self._step_free

        path = self.config.step_free_path
        self._logger.debug("Loading step-free stations", extra={"path": str(path)})

        self._step_free = frozenset(row[0] for _, row in self._rows(path) if row[0])
        self._logger.info(
            "Step-free stations loaded", extra={"stations": len(self._step_free)}
        )
        return self._step_free

    def _rows(self, path: Path) -> Iterator[Tuple[int, List[str]]]:
        """Yield trimmed, non-blank data rows with their 1-based line number."""
        try:
            with path.open(newline="", encoding=self.config.encoding) as f:
                rows = list(csv.reader(f))
        except (OSError, UnicodeDecodeError) as e:
            raise NetworkLoadError(
                f"Failed to read network file {path}",
                file_path=str(path),
                cause=e,
            )

        for line_number, row in enumerate(rows[1:], start=2):
            fields = [value.strip() for value in row]
            if not any(fields):
                continue
            yield line_number, fields

    def clear_cache(self) -> None:
        """Clear cached segment and station data."""
        self._segments = None
        self._step_free = None
        self._logger.debug("Network cache cleared")
