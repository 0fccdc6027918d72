import csv

import pytest

from adultbench.cuckoo import CUCKOO_HEADER, CuckooHash, run_benchmark

WORKCLASSES = ["Private", "State-gov", "Self-emp"]


def test_insert_counts_kicks_for_repeats():
    table = CuckooHash()
    for key in ["a", "b", "a", "a"]:
        table.insert(key)
    assert table.kicks == 2
    assert len(table) == 2


def test_search_and_remove():
    table = CuckooHash()
    table.insert("Private")
    assert table.search("Private")
    table.remove("Private")
    table.remove("missing")
    assert not table.search("Private")
    assert len(table) == 0


def test_clear_resets_kicks():
    table = CuckooHash()
    table.insert("x")
    table.insert("x")
    table.clear()
    assert table.kicks == 0
    assert len(table) == 0
    assert table.memory_estimate() == 0


def test_memory_scales_with_distinct_keys():
    one, two = CuckooHash(), CuckooHash()
    one.insert("a")
    for key in ["a", "b", "b"]:
        two.insert(key)
    assert two.memory_estimate() == 2 * one.memory_estimate()


@pytest.fixture
def data_file(tmp_path):
    lines = []
    for n in range(20):
        fields = [str(20 + n), WORKCLASSES[n % 3], "1000", "Bachelors", "13", "Never-married",
                  "Adm-clerical", "Not-in-family", "White", "Male", "0", "0", "40",
                  "United-States", "<=50K"]
        lines.append(", ".join(fields))
    path = tmp_path / "adult.data"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_run_benchmark_reports_kicks(data_file, tmp_path):
    out_dir = tmp_path / "bench"
    rows = run_benchmark(data_file, out_dir, 2)
    keys = [WORKCLASSES[n % 3] for n in range(20)]
    for row in rows:
        prefix = keys[: row.size]
        assert row.extras == (len(prefix) - len(set(prefix)),)
    with open(out_dir / "escalabilidade_cuckoo.csv", newline="", encoding="utf-8") as handle:
        table = list(csv.reader(handle))
    assert table[0] == list(CUCKOO_HEADER)
    assert [line[-1] for line in table[1:]] == [str(row.extras[0]) for row in rows]