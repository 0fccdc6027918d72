"""Statistics, grouping, filtering and trend reports written to text files."""

from __future__ import annotations

import argparse
import statistics
import sys
from collections import Counter, defaultdict
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from .dataset import DEFAULT_DATA_PATH, Record, load_records

DEFAULT_REPORT_DIR = Path("analise")
HOURS_THRESHOLD = 40
AGE_LIMIT = 60
HOURS_GROWTH_THRESHOLD = 30


def _group(records: Sequence[Record], key: str, value: str) -> dict[str, list[int]]:
    groups: dict[str, list[int]] = defaultdict(list)
    for record in records:
        groups[getattr(record, key)].append(getattr(record, value))
    return dict(sorted(groups.items()))


def statistics_report(records: Sequence[Record]) -> str:
    """Mean age per education, workclass frequencies and hours deviation."""
    lines = ["Média de idade por nível de educação:"]
    ages = _group(records, "education", "age")
    for education, values in ages.items():
        lines.append(f"{education}: {statistics.fmean(values):.2f} anos")

    lines += ["", "Frequência de cada workclass:"]
    for workclass, count in sorted(Counter(r.workclass for r in records).items()):
        lines.append(f"{workclass}: {count} registros")

    lines += ["", "Desvio padrão de horas semanais por education:"]
    for education, values in _group(records, "education", "hours").items():
        lines.append(f"{education}: {statistics.pstdev(values):.2f} h/semana")
    return "\n".join(lines) + "\n"


def grouping_report(records: Sequence[Record]) -> str:
    """Education counts per workclass and the educations seen per income."""
    grouped: dict[str, Counter] = defaultdict(Counter)
    by_income: dict[str, set[str]] = defaultdict(set)
    for record in records:
        grouped[record.workclass][record.education] += 1
        by_income[record.income].add(record.education)

    parts = ["Distribuição de education por workclass:\n"]
    for workclass, counter in sorted(grouped.items()):
        parts.append(f"\n{workclass}:\n")
        parts.extend(f"  {education}: {count} registros\n" for education, count in sorted(counter.items()))

    parts.append("\nClassificação de education por income:\n")
    for income, educations in sorted(by_income.items()):
        parts.append(f"{income}: " + "".join(f"{e}, " for e in sorted(educations)) + "\n")
    return "".join(parts)


def filter_sort_report(records: Sequence[Record]) -> str:
    """Records working more than 40 hours, ordered by workclass."""
    selected = sorted((r for r in records if r.hours > HOURS_THRESHOLD), key=lambda r: r.workclass)
    parts = ["Registros com >40h semanais ordenados por workclass:\n\n"]
    parts.extend(f"{r.workclass:<15} | {r.education:<15} | {r.hours}h/semana\n" for r in selected)
    return "".join(parts)


def simulate_next_year(records: Sequence[Record]) -> list[Record]:
    """Age everyone under 60 by a year; those working over 30 hours gain one."""
    return [
        replace(
            record,
            age=record.age + 1,
            hours=record.hours + 1 if record.hours > HOURS_GROWTH_THRESHOLD else record.hours,
        )
        for record in records
        if record.age < AGE_LIMIT
    ]


def trend_report(records: Sequence[Record]) -> str:
    """Mean weekly hours per education after the simulated year."""
    simulated = simulate_next_year(records)
    parts = ["Previsão de média de horas por educação após 1 ano (simulado):\n"]
    for education, hours in _group(simulated, "education", "hours").items():
        parts.append(f"{education}: {statistics.fmean(hours):.2f} h/semana\n")
    parts.append(f"\nTotal de novos registros simulados: {len(simulated)}\n")
    return "".join(parts)


_REPORTS = (
    ("estatisticas.txt", statistics_report, "Análise estatística salva em"),
    ("agrupamento.txt", grouping_report, "Agrupamento/Classificação salvos em"),
    ("filtragem_ordenacao.txt", filter_sort_report, "Filtragem/Ordenação salva em"),
    ("tendencias.txt", trend_report, "Simulação de tendências salva em"),
)


def write_reports(
    records: Sequence[Record],
    output_dir: str | Path = DEFAULT_REPORT_DIR,
    out: TextIO | None = None,
) -> list[Path]:
    """Write the four reports into ``output_dir`` and return their paths."""
    out = out if out is not None else sys.stdout
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    written = []
    for name, build, message in _REPORTS:
        path = directory / name
        path.write_text(build(records), encoding="utf-8")
        out.write(f"✅ {message} '{path.as_posix()}'\n")
        written.append(path)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """Read the data file and write every report."""
    parser = argparse.ArgumentParser(description="Write analysis reports of the adult data file.")
    parser.add_argument("--data", type=Path, default=DEFAULT_DATA_PATH, help="data file to read")
    parser.add_argument("--output", type=Path, default=DEFAULT_REPORT_DIR, help="report directory")
    args = parser.parse_args(argv)

    try:
        records = load_records(args.data)
    except OSError:
        print(f"Erro fatal: não foi possível abrir {args.data.as_posix()}", file=sys.stderr)
        return 1

    print("Dados lidos. Iniciando análises...")
    write_reports(records, args.output)
    print("\nTodas as análises foram concluídas!")
    return 0