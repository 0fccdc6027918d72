import csv

import pytest

from adultbench.avl import AVLTree, run_benchmark
from adultbench.benchmark import SCALABILITY_HEADER

EDUCATIONS = ["Bachelors", "HS-grad", "Masters", "Doctorate"]
WORKCLASSES = ["Private", "State-gov", "Self-emp"]


def _check_balanced(node):
    if node is None:
        return 0
    left = _check_balanced(node.left)
    right = _check_balanced(node.right)
    assert abs(left - right) <= 1
    assert node.height == 1 + max(left, right)
    return node.height


def test_insert_keeps_order_and_balance():
    tree = AVLTree()
    keys = [f"k{n:03d}" for n in range(100)]
    for key in keys:
        tree.insert(key, "w")
    assert list(tree) == sorted(keys)
    assert len(tree) == 100
    assert _check_balanced(tree.root) == tree.height()
    assert tree.height() <= 10


def test_duplicates_count_workclasses():
    tree = AVLTree()
    tree.insert("Bachelors", "Private")
    tree.insert("Bachelors", "Private")
    tree.insert("Bachelors", "State-gov")
    node = tree.find("Bachelors")
    assert len(tree) == 1
    assert node.workclasses == {"Private": 2, "State-gov": 1}


def test_find_and_contains():
    tree = AVLTree()
    tree.insert("Masters", "Private")
    assert "Masters" in tree
    assert "Doctorate" not in tree
    assert tree.find("Doctorate") is None


def test_remove_keeps_balance_and_counts():
    tree = AVLTree()
    keys = [f"k{n:02d}" for n in range(50)]
    for key in keys:
        tree.insert(key, key + "-w")
    for key in keys[::2]:
        tree.remove(key)
    assert list(tree) == keys[1::2]
    assert len(tree) == 25
    _check_balanced(tree.root)
    assert tree.find("k11").workclasses == {"k11-w": 1}


def test_remove_missing_is_ignored():
    tree = AVLTree()
    tree.insert("a", "w")
    tree.remove("b")
    assert list(tree) == ["a"]


def test_remove_everything_empties_tree():
    tree = AVLTree()
    for key in "dbfaceg":
        tree.insert(key, "w")
    for key in "abcdefg":
        tree.remove(key)
    assert len(tree) == 0
    assert tree.height() == 0
    assert list(tree) == []


def test_memory_estimate_scales_with_nodes():
    one, two = AVLTree(), AVLTree()
    one.insert("a", "w")
    two.insert("a", "w")
    two.insert("b", "w")
    two.insert("b", "x")
    assert AVLTree().memory_estimate() == 0
    assert two.memory_estimate() == 2 * one.memory_estimate()


@pytest.fixture
def data_file(tmp_path):
    lines = []
    for n in range(20):
        fields = [str(20 + n), WORKCLASSES[n % 3], "1000", EDUCATIONS[n % 4], "13", "Never-married",
                  "Adm-clerical", "Not-in-family", "White", "Male", "0", "0", str(30 + n),
                  "United-States", "<=50K"]
        lines.append(", ".join(fields))
    path = tmp_path / "adult.data"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_run_benchmark_writes_csv(data_file, tmp_path):
    out_dir = tmp_path / "bench"
    rows = run_benchmark(data_file, out_dir, 1)
    assert [row.size for row in rows] == [2, 10, 20]
    with open(out_dir / "escalabilidade_avl.csv", newline="", encoding="utf-8") as handle:
        table = list(csv.reader(handle))
    assert table[0] == list(SCALABILITY_HEADER)
    assert [line[0] for line in table[1:]] == ["2", "10", "20"]
    assert [line[5] for line in table[1:]] == [str(row.memory) for row in rows]
    assert rows[0].memory < rows[2].memory