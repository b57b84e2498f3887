"""Data collection strategies for CompositeTreeLib.

DataCollectors define what information to extract from each visit during a
traversal, so the same walk can produce paths, sizes or statistics.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from .traverser import Visit


@dataclass
class TreeStats:
    """Summary of a tree's shape."""
    file_count: int = 0
    folder_count: int = 0
    total_size: int = 0
    max_depth: int = 0

    @property
    def node_count(self) -> int:
        return self.file_count + self.folder_count


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, visit: Visit) -> Any:
        """Collect data from a visit.

        Args:
            visit: The (node, depth, path) record to collect from

        Returns:
            Collected data (type depends on collector)
        """
        pass


class PathCollector(DataCollector):
    """Collects the slash-joined path of each node."""

    def collect(self, visit: Visit) -> str:
        return visit.path


class SizeCollector(DataCollector):
    """Collects the size of each node.

    Folder sizes are recomputed per visit; nothing is cached between calls.
    """

    def collect(self, visit: Visit) -> int:
        return visit.node.get_size()


class StatsCollector(DataCollector):
    """Accumulates TreeStats across a traversal.

    Only file sizes are added to the total, so folders are not counted
    twice.
    """

    def __init__(self):
        self.stats = TreeStats()

    def collect(self, visit: Visit) -> TreeStats:
        node = visit.node
        if node.is_composite():
            self.stats.folder_count += 1
        else:
            self.stats.file_count += 1
            self.stats.total_size += node.get_size()
        self.stats.max_depth = max(self.stats.max_depth, visit.depth)
        return self.stats


class CustomCollector(DataCollector):
    """Wraps a plain callable as a collector.

    Example:
        >>> collector = CustomCollector(lambda v: v.node.name.upper())
    """

    def __init__(self, func: Callable[[Visit], Any]):
        self.func = func

    def collect(self, visit: Visit) -> Any:
        return self.func(visit)
