"""Counting hash table that records repeated-key insertions, and its benchmark."""

from __future__ import annotations

from pathlib import Path

from .benchmark import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_REPETITIONS,
    SCALABILITY_HEADER,
    ScalabilityRow,
    scale_sizes,
    time_per_repetition,
    write_csv,
)
from .dataset import DEFAULT_DATA_PATH, WORKCLASS, load_column

# Estimated bytes per entry: key string, counter and a pointer.
ENTRY_BYTES = 44

CUCKOO_HEADER = (*SCALABILITY_HEADER, "Kicks")


class CuckooHash:
    """Key counter whose ``kicks`` count inserts of keys already present."""

    def __init__(self) -> None:
        self._table: dict[str, int] = {}
        self.kicks = 0

    def insert(self, key: str) -> None:
        """Count one occurrence of ``key``."""
        if key in self._table:
            self.kicks += 1
        self._table[key] = self._table.get(key, 0) + 1

    def search(self, key: str) -> bool:
        """Whether ``key`` is present."""
        return key in self._table

    def remove(self, key: str) -> None:
        """Drop ``key``; unknown keys are ignored."""
        self._table.pop(key, None)

    def clear(self) -> None:
        """Empty the table and reset the kick count."""
        self._table.clear()
        self.kicks = 0

    def __len__(self) -> int:
        return len(self._table)

    def memory_estimate(self) -> int:
        """Estimated bytes used by the entries."""
        return len(self._table) * ENTRY_BYTES


def run_benchmark(
    data_path: str | Path = DEFAULT_DATA_PATH,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    repetitions: int = DEFAULT_REPETITIONS,
) -> list[ScalabilityRow]:
    """Time insert, search and remove at three sizes and write the CSV."""
    print("\n--- Executando Benchmark: Cuckoo Hash ---")
    data = load_column(data_path, WORKCLASS)
    rows = []
    for size in scale_sizes(len(data)):
        keys = data[:size]
        half = keys[: size // 2]
        cuckoo = CuckooHash()

        def fill() -> None:
            cuckoo.clear()
            for key in keys:
                cuckoo.insert(key)

        def search() -> None:
            for key in half:
                cuckoo.search(key)

        def build_and_remove() -> None:
            temp = CuckooHash()
            for key in keys:
                temp.insert(key)
            for key in half:
                temp.remove(key)

        insert_ms = time_per_repetition(fill, repetitions)
        search_ms = time_per_repetition(search, repetitions)
        remove_ms = time_per_repetition(build_and_remove, repetitions)
        rows.append(
            ScalabilityRow(size, insert_ms, search_ms, remove_ms, cuckoo.memory_estimate(), (cuckoo.kicks,))
        )

    path = write_csv(Path(output_dir) / "escalabilidade_cuckoo.csv", CUCKOO_HEADER, rows)
    print(f"✅ Benchmark de escalabilidade gerado em {path.as_posix()}")
    return rows