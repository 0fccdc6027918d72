import csv

import pytest

from adultbench.linked_list import NODE_BYTES, LinkedList, run_benchmark

EDUCATIONS = ["Bachelors", "HS-grad", "Masters", "Doctorate"]


def _row(index: int) -> str:
    edu = EDUCATIONS[index % len(EDUCATIONS)]
    return (
        f"{20 + index}, Private, 1000, {edu}, 13, Never-married, Sales, "
        f"Not-in-family, White, Male, 0, 0, 40, United-States, <=50K"
    )


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "adult.data"
    path.write_text("\n".join(_row(i) for i in range(20)) + "\n", encoding="utf-8")
    return path


def test_insert_pushes_at_head():
    linked = LinkedList()
    linked.insert("A", "x")
    linked.insert("B", "y")
    assert list(linked) == [("B", "y"), ("A", "x")]
    assert len(linked) == 2


def test_search():
    linked = LinkedList()
    linked.insert("A", "x")
    assert linked.search("A") is True
    assert linked.search("B") is False


def test_remove_first_match_only():
    linked = LinkedList()
    linked.insert("A", "old")
    linked.insert("B", "y")
    linked.insert("A", "new")
    linked.remove("A")
    assert list(linked) == [("B", "y"), ("A", "old")]
    assert len(linked) == 2


def test_remove_unknown_is_ignored():
    linked = LinkedList()
    linked.insert("A", "x")
    linked.remove("Z")
    assert list(linked) == [("A", "x")]


def test_remove_tail_and_memory():
    linked = LinkedList()
    for name in "ABC":
        linked.insert(name, "w")
    linked.remove("A")
    assert [edu for edu, _ in linked] == ["C", "B"]
    assert linked.memory_estimate() == len(linked) * NODE_BYTES


def test_benchmark_list_grows_across_repetitions(tmp_path, data_file):
    out_dir = tmp_path / "bench"
    rows = run_benchmark(data_file, out_dir, repetitions=3)
    assert [row.size for row in rows] == [2, 10, 20]
    assert [row.memory for row in rows] == [3 * row.size * NODE_BYTES for row in rows]
    with open(out_dir / "escalabilidade_lista.csv", encoding="utf-8") as handle:
        lines = list(csv.reader(handle))
    assert lines[0][0] == "Tamanho"
    assert len(lines) == 4