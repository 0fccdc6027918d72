import csv
import random

import pytest

from adultbench.skiplist import MAX_LEVEL, NODE_BYTES, POINTER_BYTES, SkipList, run_benchmark

EDUCATIONS = ["Bachelors", "HS-grad", "Masters"]


def _row(index: int) -> str:
    edu = EDUCATIONS[index % len(EDUCATIONS)]
    return (
        f"{20 + index}, Private, 1000, {edu}, 13, Never-married, Sales, "
        f"Not-in-family, White, Male, 0, 0, 40, United-States, <=50K"
    )


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "adult.data"
    lines = [_row(i) for i in range(20)] + ["1, a, b,  ", "short, line"]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _filled(keys, seed=0):
    skiplist = SkipList(rng=random.Random(seed))
    for key in keys:
        skiplist.insert(key)
    return skiplist


def test_iteration_is_sorted_and_unique():
    keys = ["m", "c", "x", "a", "c", "m"]
    skiplist = _filled(keys)
    assert list(skiplist) == sorted(set(keys))
    assert len(skiplist) == len(set(keys))


def test_search_and_remove():
    skiplist = _filled(["b", "a", "c"])
    assert skiplist.search("b")
    skiplist.remove("b")
    assert not skiplist.search("b")
    assert list(skiplist) == ["a", "c"]
    skiplist.remove("zzz")
    assert len(skiplist) == 2


def test_removing_all_resets_level():
    keys = [f"k{i:03d}" for i in range(200)]
    skiplist = _filled(keys, seed=3)
    for key in keys:
        skiplist.remove(key)
    assert list(skiplist) == []
    assert skiplist.level == 0


def test_random_level_bounds():
    skiplist = SkipList(rng=random.Random(1))
    levels = [skiplist.random_level() for _ in range(2000)]
    assert min(levels) == 0
    assert max(levels) <= MAX_LEVEL


def test_seeded_lists_match():
    keys = [f"k{i}" for i in range(50)]
    first = _filled(keys, seed=7)
    second = _filled(keys, seed=7)
    assert list(first) == sorted(keys)
    assert list(second) == sorted(keys)
    assert 0 <= first.level <= MAX_LEVEL
    assert first.level == second.level
    first_levels = [first.random_level() for _ in range(20)]
    second_levels = [second.random_level() for _ in range(20)]
    assert first_levels == second_levels


def test_clear_and_memory():
    skiplist = _filled(["a", "b", "c"])
    assert skiplist.memory_estimate() == 3 * NODE_BYTES + (MAX_LEVEL + 1) * POINTER_BYTES
    skiplist.clear()
    assert len(skiplist) == 0
    assert skiplist.memory_estimate() == (MAX_LEVEL + 1) * POINTER_BYTES


def test_benchmark(tmp_path, data_file):
    out_dir = tmp_path / "bench"
    rows = run_benchmark(data_file, out_dir, repetitions=2, seed=5)
    assert [row.size for row in rows] == [2, 10, 20]
    expected = len(EDUCATIONS) * NODE_BYTES + (MAX_LEVEL + 1) * POINTER_BYTES
    assert rows[-1].memory == expected
    with open(out_dir / "escalabilidade_skiplist.csv", encoding="utf-8") as handle:
        lines = list(csv.reader(handle))
    assert len(lines) == 4