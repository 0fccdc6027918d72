"""Additional analyses: mean ages, high-income bachelors and top workclasses."""

from __future__ import annotations

import sys
from collections import Counter, defaultdict
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .dataset import DEFAULT_DATA_PATH, Record, load_records

TOP_LIMIT = 3


def mean_age_by_education(records: Iterable[Record]) -> dict[str, float]:
    """Mean age per education, keyed in ascending education order."""
    ages: dict[str, list[int]] = defaultdict(list)
    for record in records:
        ages[record.education].append(record.age)
    return {education: sum(values) / len(values) for education, values in sorted(ages.items())}


def high_income_bachelors(records: Iterable[Record]) -> list[Record]:
    """Records with education Bachelors and income above 50K, in file order."""
    return [
        record
        for record in records
        if record.education == "Bachelors" and record.income == ">50K"
    ]


def top_workclasses_by_education(
    records: Iterable[Record], limit: int = TOP_LIMIT
) -> dict[str, list[tuple[str, int]]]:
    """The most frequent workclasses per education, most frequent first.

    Ties keep ascending workclass order.
    """
    counts: dict[str, Counter] = defaultdict(Counter)
    for record in records:
        counts[record.education][record.workclass] += 1
    return {
        education: sorted(sorted(counter.items()), key=lambda item: -item[1])[:limit]
        for education, counter in sorted(counts.items())
    }


def run_additional_analysis(
    data_path: str | Path = DEFAULT_DATA_PATH, out: TextIO | None = None
) -> None:
    """Load the data file and print the three additional analyses."""
    out = out if out is not None else sys.stdout
    out.write("\n--- Executando Análises Adicionais ---\n")
    records = load_records(data_path)

    out.write("1️⃣  Média de idade por education:\n")
    for education, mean in mean_age_by_education(records).items():
        out.write(f"  {education}: {mean:.2f} anos\n")

    out.write("\n2️⃣  Pessoas com income >50K e education == Bachelors:\n")
    for record in high_income_bachelors(records):
        out.write(f"  Idade: {record.age}, Workclass: {record.workclass}\n")

    out.write("\n3️⃣  Top 3 workclass por education:\n")
    for education, top in top_workclasses_by_education(records, TOP_LIMIT).items():
        out.write(f"  {education}:\n")
        for workclass, count in top:
            out.write(f"    {workclass}: {count}\n")
    out.write("--- Fim das Análises Adicionais ---\n")