"""Shared timing and CSV output for the scalability benchmarks."""

from __future__ import annotations

import csv
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUTPUT_DIR = Path("benchmark")
DEFAULT_REPETITIONS = 100

SCALABILITY_HEADER = (
    "Tamanho",
    "TempoInsercao(ms)",
    "TempoBusca(ms)",
    "TempoRemocao(ms)",
    "LatenciaMedia(ms)",
    "Memoria(B)",
)


def _format_number(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class ScalabilityRow:
    """Timings for one input size of a benchmark."""

    size: int
    insert_ms: float
    search_ms: float
    remove_ms: float
    memory: int
    extras: tuple[int, ...] = ()

    def latency_ms(self) -> float:
        """Mean of the insert, search and remove times."""
        return (self.insert_ms + self.search_ms + self.remove_ms) / 3.0

    def csv_fields(self) -> list[str]:
        """The row as CSV cells, numbers with six significant digits."""
        return [
            str(self.size),
            _format_number(self.insert_ms),
            _format_number(self.search_ms),
            _format_number(self.remove_ms),
            _format_number(self.latency_ms()),
            str(self.memory),
            *(str(extra) for extra in self.extras),
        ]


def scale_sizes(count: int) -> list[int]:
    """Input sizes of 10%, 50% and 100% of ``count``."""
    return [int(count * 0.1), int(count * 0.5), count]


def time_per_repetition(action: Callable[[], object], repetitions: int = DEFAULT_REPETITIONS) -> float:
    """Run ``action`` repeatedly and return the mean time in milliseconds."""
    if repetitions < 1:
        raise ValueError("repetitions must be at least 1")
    start = time.perf_counter()
    for _ in range(repetitions):
        action()
    elapsed = time.perf_counter() - start
    return elapsed * 1000.0 / repetitions


def write_csv(path: str | Path, header: Sequence[str], rows: Iterable[ScalabilityRow]) -> Path:
    """Write the header and rows to ``path``, creating its directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(header)
        for row in rows:
            writer.writerow(row.csv_fields())
    return path