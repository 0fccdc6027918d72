# adultbench

Tools for exploring the UCI *Adult* census dataset (`adult.data`) and for
measuring how several classic data structures scale when filled with its
values.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The dataset

By default every tool reads `Data/adult.data` relative to the current
directory. Each line is a comma-separated record; fields are cleaned by
removing all spaces. Lines with fewer fields than a task needs are skipped,
as are lines whose numeric fields (age, hours per week) cannot be parsed.

`adultbench.dataset` provides the loaders:

* `load_records(path)` – every full row as a `Record` (age, workclass,
  education, hours, income);
* `load_pairs(path, min_fields, skip_empty)` – `(education, workclass)` pairs;
* `load_column(path, index, min_fields, skip_empty)` – one cleaned column;
* `preview_lines(path, count)` and `run_preview(path, out)` – the cleaned
  fields of the first lines, the latter printing the first five as
  `Linha N: [field] [field] ...`.

## Reports

```
adultbench-report [--data PATH] [--output DIR]
```

reads the dataset once (default `Data/adult.data`) and writes four text
reports to the output directory (default `analise/`):

* `estatisticas.txt` – mean age per education level, frequency of each
  workclass and the population standard deviation of weekly hours per
  education level;
* `agrupamento.txt` – education counts within each workclass, and the
  education levels found in each income class;
* `filtragem_ordenacao.txt` – records with more than 40 hours per week,
  ordered by workclass;
* `tendencias.txt` – a one-year projection in which everyone under 60 ages by
  one year and anyone working more than 30 hours works one hour more, with
  the projected mean hours per education level.

If the data file cannot be opened the command prints an error and exits
with status 1. The same reports are available as strings from
`statistics_report`, `grouping_report`, `filter_sort_report` and
`trend_report` in `adultbench.report`, and `write_reports(records,
output_dir)` writes them all.

## Additional analyses

`adultbench.analysis.run_additional_analysis(data_path)` prints the mean age
per education level, the people with income `>50K` and education
`Bachelors`, and the three most frequent workclasses per education level.
The pieces are also available on their own: `mean_age_by_education`,
`high_income_bachelors` and `top_workclasses_by_education`.

## Benchmarks

Each of these modules has a `run_benchmark(data_path, output_dir,
repetitions)` function:

| Module | Structure | Key |
|--------|-----------|-----|
| `adultbench.avl` | `AVLTree` | education |
| `adultbench.cuckoo` | `CuckooHash`, a counting hash reporting repeated-key "kicks" | workclass |
| `adultbench.hash_table` | the built-in `dict`, reporting hash collisions | workclass |
| `adultbench.linked_list` | `LinkedList` | education |
| `adultbench.skiplist` | `SkipList` (`run_benchmark` also takes a `seed`) | education |

Each benchmark takes 10 %, 50 % and 100 % of the loaded keys, repeats
insertion, lookup of the first half and removal of the first half a number of
times (100 by default), and writes one CSV row per size to
`benchmark/escalabilidade_<structure>.csv` with the columns

```
Tamanho,TempoInsercao(ms),TempoBusca(ms),TempoRemocao(ms),LatenciaMedia(ms),Memoria(B)
```

plus a `Kicks` column for the counting hash and a `Colisoes` column for the
plain hash table. Times are the mean per repetition in milliseconds; the
latency column is the mean of the three timings; memory is an estimate
derived from the number of stored entries or nodes. The function returns
the rows as `ScalabilityRow` objects.

```python
from adultbench import avl

rows = avl.run_benchmark("Data/adult.data", "benchmark", repetitions=10)
```

## Constraint tests

`adultbench.constraints.run_constraint_tests(data_path)` inserts at most
5000 pairs into an AVL tree, times inserting every pair, and computes the
mean age of the Bachelors education after setting a tenth of the ages
(drawn at random) to 999. It then prints instructions for two further
experiments to be carried out by hand.

## Using the structures

```python
from adultbench.avl import AVLTree
from adultbench.skiplist import SkipList

tree = AVLTree()
tree.insert("Bachelors", "Private")
tree.insert("Bachelors", "State-gov")
assert "Bachelors" in tree
assert tree.find("Bachelors").workclasses["Private"] == 1

keys = SkipList()
keys.insert("HS-grad")
assert keys.search("HS-grad")
```

## What this package does not do

There is no interactive menu and no command for the benchmarks, the
additional analyses or the constraint tests; they are run by calling the
functions above from Python. There is no trie and no benchmark of
occupations.