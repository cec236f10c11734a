"""Network adapters - Implementations of the NetworkSourcePort.

Available implementations:
- CSVNetworkSource: Loads segments and step-free stations from CSV files
- InMemoryNetworkSource: Serves records held in memory
"""

from .csv_source import CSVNetworkSource
from .memory_source import InMemoryNetworkSource

__all__ = ["CSVNetworkSource", "InMemoryNetworkSource"]
