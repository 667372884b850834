"""Case registry: labeled, ordered collections of benchmark cases.

Usage:
    from dbperf.benchmarks.registry import CaseRegistry

    registry = CaseRegistry()
    registry.add("sqlite3", [PerfCase("Orders.fetchAll", setup, test)])
    registry.add("sqlite3(manu)", [PerfCase("Orders.fetchAll", setup, test)])
"""

from collections.abc import Iterable, Iterator

from dbperf.benchmarks.base import PerfCase


class CaseRegistry:
    """Ordered mapping of variant label to the cases it contributes.

    Insertion order of labels, and of cases within a label, is the
    execution order. Case names may repeat across labels (that is what the
    report compares) and even within one label.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[PerfCase]] = {}

    def add(self, label: str, cases: Iterable[PerfCase]) -> None:
        """Register cases under a label, extending it if already present.

        Args:
            label: Variant label, e.g. "sqlite3(manu)".
            cases: Cases in execution order.
        """
        self._entries.setdefault(label, []).extend(cases)

    def labels(self) -> list[str]:
        """Return labels in registration order."""
        return list(self._entries)

    def cases(self, label: str) -> list[PerfCase]:
        """Return the cases registered under a label."""
        return list(self._entries[label])

    def items(self) -> Iterator[tuple[str, list[PerfCase]]]:
        """Iterate ``(label, cases)`` pairs in registration order."""
        for label, cases in self._entries.items():
            yield label, list(cases)

    @property
    def case_count(self) -> int:
        """Return the number of cases across all labels."""
        return sum(len(cases) for cases in self._entries.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        """Return number of labels."""
        return len(self._entries)

    def __contains__(self, label: str) -> bool:
        return label in self._entries

