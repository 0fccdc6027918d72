"""Experiments running the AVL tree and analyses under imposed constraints."""

from __future__ import annotations

import random
import re
import sys
import time
from collections import defaultdict
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .avl import AVLTree
from .dataset import AGE, DEFAULT_DATA_PATH, EDUCATION, HOURS, load_pairs, split_fields

STRUCTURE_LIMIT = 5000
LATENCY_EVERY = 100
CORRUPTED_AGE = 999
CORRUPTED_FRACTION = 0.1
_MIN_ANALYSIS_FIELDS = 13

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def load_test_pairs(path: str | Path = DEFAULT_DATA_PATH) -> list[tuple[str, str]]:
    """(education, workclass) pairs from rows of four or more fields."""
    return load_pairs(path, min_fields=4, skip_empty=True)


def _timed_build(pairs: Sequence[tuple[str, str]], every: int = 0, delay: float = 0.0) -> tuple[AVLTree, float]:
    tree = AVLTree()
    start = time.perf_counter()
    for index, (education, workclass) in enumerate(pairs):
        tree.insert(education, workclass)
        if delay > 0 and every > 0 and index > 0 and index % every == 0:
            time.sleep(delay)
    return tree, (time.perf_counter() - start) * 1000.0


def structure_limit_test(
    pairs: Sequence[tuple[str, str]], limit: int = STRUCTURE_LIMIT
) -> tuple[AVLTree, float]:
    """Insert at most ``limit`` pairs; return the tree and elapsed milliseconds."""
    return _timed_build(pairs[:limit])


def latency_test(
    pairs: Sequence[tuple[str, str]], every: int = LATENCY_EVERY, delay: float = 0.0
) -> tuple[AVLTree, float]:
    """Insert every pair, sleeping ``delay`` seconds after each ``every`` inserts."""
    return _timed_build(pairs, every, delay)


def corrupt_ages(
    ages: Sequence[int],
    fraction: float = CORRUPTED_FRACTION,
    rng: random.Random | None = None,
) -> list[int]:
    """A copy of ``ages`` with randomly drawn positions set to an absurd age.

    As many positions as ``fraction`` of the length are drawn, with replacement.
    """
    rng = rng if rng is not None else random.Random()
    corrupted = list(ages)
    if not corrupted:
        return corrupted
    for _ in range(int(len(corrupted) * fraction)):
        corrupted[rng.randrange(len(corrupted))] = CORRUPTED_AGE
    return corrupted


def corrupted_data_test(
    path: str | Path = DEFAULT_DATA_PATH,
    fraction: float = CORRUPTED_FRACTION,
    rng: random.Random | None = None,
) -> dict[str, float]:
    """Mean age of every Bachelors education after corrupting part of the ages.

    Education names are kept as read, spaces included.
    """
    entries: list[tuple[str, int]] = []
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            fields = split_fields(line.rstrip("\n"))
            if len(fields) < _MIN_ANALYSIS_FIELDS:
                continue
            age = _leading_int(fields[AGE])
            if age is None or _leading_int(fields[HOURS]) is None:
                continue
            entries.append((fields[EDUCATION], age))

    ages = corrupt_ages([age for _, age in entries], fraction, rng)
    groups: dict[str, list[int]] = defaultdict(list)
    for (education, _), age in zip(entries, ages):
        groups[education].append(age)
    return {
        education: sum(values) / len(values)
        for education, values in sorted(groups.items())
        if "Bachelors" in education
    }


def run_constraint_tests(
    data_path: str | Path = DEFAULT_DATA_PATH,
    out: TextIO | None = None,
    rng: random.Random | None = None,
) -> None:
    """Run the three automated constraint tests and print the manual ones."""
    out = out if out is not None else sys.stdout
    out.write("\n============================================\n")
    out.write("       MENU DE TESTES COM RESTRIÇÕES        \n")
    out.write("============================================\n")

    out.write(f"\n--- Iniciando Teste (R2): Limite de {STRUCTURE_LIMIT} elementos na AVL ---\n")
    pairs = load_test_pairs(data_path)
    _, elapsed = structure_limit_test(pairs, STRUCTURE_LIMIT)
    out.write("Resultado:\n")
    out.write(f"  - Tempo para inserir {STRUCTURE_LIMIT} elementos: {elapsed:g} ms\n")
    out.write("Análise: O sistema operou normalmente, mas parou de inserir dados ao atingir o limite imposto.\n")

    out.write("\n--- Iniciando Teste (R12): Simulação de Alta Latência (1ms a cada 100 inserções) ---\n")
    _, elapsed = latency_test(pairs, LATENCY_EVERY)
    out.write("Resultado:\n")
    out.write(f"  - Tempo de inserção total com latência artificial: {elapsed:g} ms\n")
    out.write("Análise: O tempo de inserção total aumentou significativamente devido aos atrasos simulados.\n")

    out.write("\n--- Iniciando Teste (R18): Simulação de Dados Corrompidos (10% de anomalias) ---\n")
    out.write("Este teste executa a análise estatística sobre dados corrompidos para comparar os resultados.\n")
    means = corrupted_data_test(data_path, CORRUPTED_FRACTION, rng)
    out.write("Resultado (Média de idade com dados corrompidos):\n")
    for education, mean in means.items():
        out.write(f"  - {education}: {mean:g} anos\n")
    out.write("Análise: A média de idade para 'Bachelors' fica distorcida, provando o impacto de dados anômalos.\n")

    out.write("\n--- Teste (R6) e (R21): Instruções Manuais ---\n")
    out.write("Para os testes restantes, siga as instruções abaixo e anote os resultados para seu relatório:\n\n")
    out.write("  Teste de Restrição de Processamento (R6):\n")
    out.write("  1. Execute a opção de benchmark da Árvore AVL no menu principal.\n")
    out.write("  2. Enquanto o benchmark roda, abra o Gerenciador de Tarefas (Ctrl+Shift+Esc).\n")
    out.write("  3. Vá para a aba 'Detalhes', clique com o botão direito no processo do programa.\n")
    out.write("  4. Selecione 'Definir afinidade' e marque apenas 'CPU 0'.\n")
    out.write("  5. Compare o tempo de execução com o benchmark normal e documente a lentidão.\n\n")
    out.write("  Teste de Restrição Algorítmica (R21):\n")
    out.write("  1. Execute a opção de benchmark da 'Árvore AVL' (eficiente) e anote o tempo de busca.\n")
    out.write("  2. Execute a opção de benchmark da 'Lista Encadeada' (ineficiente) e anote o tempo de busca.\n")
    out.write("  3. No seu relatório, compare os dois tempos. A diferença drástica comprova o impacto da escolha do algoritmo.\n")
    out.write("\n--- Fim dos testes com restrições ---\n")