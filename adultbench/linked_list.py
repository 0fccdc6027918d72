"""Singly linked list of (education, workclass) records, and its benchmark."""

from __future__ import annotations

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
from .dataset import DEFAULT_DATA_PATH, load_pairs

# Estimated bytes per node: the node itself plus two key strings.
NODE_BYTES = 136


class _Node:
    __slots__ = ("education", "workclass", "next")

    def __init__(self, education: str, workclass: str, next_node: _Node | None) -> None:
        self.education = education
        self.workclass = workclass
        self.next = next_node


class LinkedList:
    """Records pushed at the head, searched and removed by education."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def insert(self, education: str, workclass: str) -> None:
        """Push a record at the head."""
        self._head = _Node(education, workclass, self._head)
        self._size += 1

    def search(self, education: str) -> bool:
        """Whether any record has ``education``."""
        return any(found == education for found, _ in self)

    def remove(self, education: str) -> None:
        """Remove the first record with ``education``; unknown keys are ignored."""
        previous = None
        node = self._head
        while node is not None:
            if node.education == education:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return
            previous, node = node, node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Records from head to tail as (education, workclass)."""
        node = self._head
        while node is not None:
            yield node.education, node.workclass
            node = node.next

    def memory_estimate(self) -> int:
        """Estimated bytes used by the nodes."""
        return self._size * NODE_BYTES


def run_benchmark(
    data_path: str | Path = DEFAULT_DATA_PATH,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    repetitions: int = DEFAULT_REPETITIONS,
) -> list[ScalabilityRow]:
    """Time insert, search and remove at three sizes and write the CSV.

    The list used for insertion keeps growing across repetitions.
    """
    print("\n--- Executando Benchmark: Lista Encadeada ---")
    pairs = load_pairs(data_path)
    rows = []
    for size in scale_sizes(len(pairs)):
        entries = pairs[:size]
        half = [education for education, _ in entries[: size // 2]]
        linked = LinkedList()

        def fill() -> None:
            for education, workclass in entries:
                linked.insert(education, workclass)

        def search() -> None:
            for education in half:
                linked.search(education)

        def build_and_remove() -> None:
            temp = LinkedList()
            for education, workclass in entries:
                temp.insert(education, workclass)
            for education in half:
                temp.remove(education)

        insert_ms = time_per_repetition(fill, repetitions)
        search_ms = time_per_repetition(search, repetitions)
        remove_ms = time_per_repetition(build_and_remove, repetitions)
        rows.append(ScalabilityRow(size, insert_ms, search_ms, remove_ms, linked.memory_estimate()))

    path = write_csv(Path(output_dir) / "escalabilidade_lista.csv", SCALABILITY_HEADER, rows)
    print(f"✅ Benchmark de escalabilidade gerado em {path.as_posix()}")
    return rows