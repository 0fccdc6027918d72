"""Skip list of unique string keys, and its benchmark."""

from __future__ import annotations

import random
from collections.abc import Iterator
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
from .dataset import DEFAULT_DATA_PATH, EDUCATION, load_column

MAX_LEVEL = 6
# Estimated bytes per node (key string plus pointer vector) and per pointer.
NODE_BYTES = 56
POINTER_BYTES = 8


class _Node:
    __slots__ = ("key", "forward")

    def __init__(self, key: str, level: int) -> None:
        self.key = key
        self.forward: list[_Node | None] = [None] * (level + 1)


class SkipList:
    """Ordered set of strings with probabilistic express lanes."""

    def __init__(self, max_level: int = MAX_LEVEL, rng: random.Random | None = None) -> None:
        self.max_level = max_level
        self._rng = rng if rng is not None else random.Random()
        self.clear()

    def clear(self) -> None:
        """Remove every key."""
        self._header = _Node("", self.max_level)
        self.level = 0
        self._size = 0

    def random_level(self) -> int:
        """Draw a node level by coin flips, capped at ``max_level``."""
        level = 0
        while self._rng.random() < 0.5 and level < self.max_level:
            level += 1
        return level

    def _predecessors(self, key: str) -> list[_Node]:
        update = [self._header] * (self.max_level + 1)
        current = self._header
        for i in range(self.level, -1, -1):
            while (nxt := current.forward[i]) is not None and nxt.key < key:
                current = nxt
            update[i] = current
        return update

    def insert(self, key: str) -> None:
        """Add ``key``; keys already present are left alone."""
        update = self._predecessors(key)
        found = update[0].forward[0]
        if found is not None and found.key == key:
            return
        level = self.random_level()
        if level > self.level:
            self.level = level
        node = _Node(key, level)
        for i in range(level + 1):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        self._size += 1

    def search(self, key: str) -> bool:
        """Whether ``key`` is present."""
        found = self._predecessors(key)[0].forward[0]
        return found is not None and found.key == key

    def remove(self, key: str) -> None:
        """Remove ``key``; unknown keys are ignored."""
        update = self._predecessors(key)
        found = update[0].forward[0]
        if found is None or found.key != key:
            return
        for i in range(self.level + 1):
            if update[i].forward[i] is not found:
                break
            update[i].forward[i] = found.forward[i]
        while self.level > 0 and self._header.forward[self.level] is None:
            self.level -= 1
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        """Keys in ascending order."""
        node = self._header.forward[0]
        while node is not None:
            yield node.key
            node = node.forward[0]

    def memory_estimate(self) -> int:
        """Estimated bytes used by the nodes and the header's pointers."""
        return self._size * NODE_BYTES + (self.max_level + 1) * POINTER_BYTES


def run_benchmark(
    data_path: str | Path = DEFAULT_DATA_PATH,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    repetitions: int = DEFAULT_REPETITIONS,
    seed: int | None = None,
) -> list[ScalabilityRow]:
    """Time insert, search and remove at three sizes and write the CSV."""
    print("\n--- Executando Benchmark: Skip List ---")
    rng = random.Random(seed)
    data = load_column(data_path, EDUCATION, min_fields=4, skip_empty=True)
    rows = []
    for size in scale_sizes(len(data)):
        keys = data[:size]
        half = keys[: size // 2]
        skiplist = SkipList(rng=rng)

        def fill() -> None:
            skiplist.clear()
            for key in keys:
                skiplist.insert(key)

        def search() -> None:
            for key in half:
                skiplist.search(key)

        def build_and_remove() -> None:
            temp = SkipList(rng=rng)
            for key in keys:
                temp.insert(key)
            for key in half:
                temp.remove(key)

        insert_ms = time_per_repetition(fill, repetitions)
        search_ms = time_per_repetition(search, repetitions)
        remove_ms = time_per_repetition(build_and_remove, repetitions)
        rows.append(ScalabilityRow(size, insert_ms, search_ms, remove_ms, skiplist.memory_estimate()))

    path = write_csv(Path(output_dir) / "escalabilidade_skiplist.csv", SCALABILITY_HEADER, rows)
    print(f"✅ Benchmark de escalabilidade gerado em {path.as_posix()}")
    return rows