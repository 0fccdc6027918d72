"""AVL tree keyed by education, counting workclasses, and its benchmark."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field
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

# Estimated bytes per node: node, key string and counter.
NODE_BYTES = 140


@dataclass(eq=False)
class AVLNode:
    """A tree node holding one education and its workclass counts."""

    education: str
    workclasses: Counter = field(default_factory=Counter)
    height: int = 1
    left: AVLNode | None = None
    right: AVLNode | None = None


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: AVLNode | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


class AVLTree:
    """Self-balancing search tree of educations."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None
        self._size = 0

    def insert(self, education: str, workclass: str) -> None:
        """Add one record; a known education only gains a workclass count."""
        self.root = self._insert(self.root, education, workclass)

    def _insert(self, node: AVLNode | None, education: str, workclass: str) -> AVLNode:
        if node is None:
            self._size += 1
            return AVLNode(education, Counter({workclass: 1}))
        if education < node.education:
            node.left = self._insert(node.left, education, workclass)
        elif education > node.education:
            node.right = self._insert(node.right, education, workclass)
        else:
            node.workclasses[workclass] += 1
            return node

        _update(node)
        factor = _balance(node)
        if factor > 1 and education < node.left.education:
            return _rotate_right(node)
        if factor < -1 and education > node.right.education:
            return _rotate_left(node)
        if factor > 1 and education > node.left.education:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if factor < -1 and education < node.right.education:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def find(self, education: str) -> AVLNode | None:
        """Return the node for ``education``, or None."""
        node = self.root
        while node is not None and node.education != education:
            node = node.left if education < node.education else node.right
        return node

    def remove(self, education: str) -> None:
        """Remove ``education`` and all its counts; unknown keys are ignored."""
        self.root = self._remove(self.root, education)

    def _remove(self, node: AVLNode | None, education: str) -> AVLNode | None:
        if node is None:
            return None
        if education < node.education:
            node.left = self._remove(node.left, education)
        elif education > node.education:
            node.right = self._remove(node.right, education)
        else:
            if node.left is None or node.right is None:
                self._size -= 1
                return node.left if node.left is not None else node.right
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.education = successor.education
            node.workclasses = Counter(successor.workclasses)
            node.right = self._remove(node.right, successor.education)

        _update(node)
        factor = _balance(node)
        if factor > 1 and _balance(node.left) >= 0:
            return _rotate_right(node)
        if factor > 1:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if factor < -1 and _balance(node.right) <= 0:
            return _rotate_left(node)
        if factor < -1:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self.root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, education: object) -> bool:
        return isinstance(education, str) and self.find(education) is not None

    def __iter__(self) -> Iterator[str]:
        """Educations in ascending order."""
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.education
            node = node.right

    def memory_estimate(self) -> int:
        """Estimated bytes used by the nodes."""
        return self._size * NODE_BYTES


def _build(pairs: list[tuple[str, str]]) -> AVLTree:
    tree = AVLTree()
    for education, workclass in pairs:
        tree.insert(education, workclass)
    return tree


def run_benchmark(
    data_path: str | Path = DEFAULT_DATA_PATH,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    repetitions: int = DEFAULT_REPETITIONS,
) -> list[ScalabilityRow]:
    """Time insert, search and remove at three sizes and write the CSV."""
    print("\n--- Executando Benchmark: AVL Tree ---")
    pairs = load_pairs(data_path)
    rows = []
    for size in scale_sizes(len(pairs)):
        entries = pairs[:size]
        half = [education for education, _ in entries[: size // 2]]

        insert_ms = time_per_repetition(lambda: _build(entries), repetitions)
        tree = _build(entries)

        def search() -> None:
            for education in half:
                tree.find(education)

        def build_and_remove() -> None:
            temp = _build(entries)
            for education in half:
                temp.remove(education)

        search_ms = time_per_repetition(search, repetitions)
        remove_ms = time_per_repetition(build_and_remove, repetitions)
        rows.append(ScalabilityRow(size, insert_ms, search_ms, remove_ms, tree.memory_estimate()))

    path = write_csv(Path(output_dir) / "escalabilidade_avl.csv", SCALABILITY_HEADER, rows)
    print(f"✅ Benchmark de escalabilidade gerado em {path.as_posix()}")
    return rows