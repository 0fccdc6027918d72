"""Benchmark of the built-in hash table keyed by workclass."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Iterable
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

HASH_HEADER = (*SCALABILITY_HEADER, "Colisoes")


def count_collisions(
    keys: Iterable[str], hasher: Callable[[str], Hashable] = hash
) -> int:
    """Count keys whose hash value was already produced by an earlier key."""
    seen: Counter = Counter()
    collisions = 0
    for key in keys:
        value = hasher(key)
        seen[value] += 1
        if seen[value] > 1:
            collisions += 1
    return collisions


def run_benchmark(
    data_path: str | Path = DEFAULT_DATA_PATH,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    repetitions: int = DEFAULT_REPETITIONS,
) -> list[ScalabilityRow]:
    """Time insert, search and remove at three sizes and write the CSV."""
    print("\n--- Executando Benchmark: Hash (unordered_map) ---")
    data = load_column(data_path, WORKCLASS)
    rows = []
    for size in scale_sizes(len(data)):
        keys = data[:size]
        half = keys[: size // 2]
        table: dict[str, int] = {}

        def fill() -> None:
            table.clear()
            for key in keys:
                table[key] = table.get(key, 0) + 1

        def search() -> None:
            for key in half:
                table.get(key)

        def copy_and_remove() -> None:
            temp = dict(table)
            for key in half:
                temp.pop(key, None)

        insert_ms = time_per_repetition(fill, repetitions)
        search_ms = time_per_repetition(search, repetitions)
        remove_ms = time_per_repetition(copy_and_remove, repetitions)
        memory = len(table) * ENTRY_BYTES
        rows.append(
            ScalabilityRow(size, insert_ms, search_ms, remove_ms, memory, (count_collisions(keys),))
        )

    path = write_csv(Path(output_dir) / "escalabilidade_hash.csv", HASH_HEADER, rows)
    print(f"✅ Benchmark de escalabilidade gerado em {path.as_posix()}")
    return rows