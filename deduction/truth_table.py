"""
deduction/truth_table.py — sprawdzanie poprawności argumentu tablicą prawdy.

Przegląd wszystkich 2**k wartościowań k zmiennych. Koszt jest wykładniczy
z założenia: narzędzie jest przeznaczone dla małej liczby zmiennych.
Opcjonalny limit max_variables zatrzymuje obliczenia przed enumeracją.

Werdykt:
  - żadne wartościowanie nie spełnia wszystkich przesłanek → INCONSISTENT
    (argument jest poprawny w sposób pusty)
  - każde wartościowanie spełniające przesłanki spełnia wniosek → VALID
  - w przeciwnym razie → INVALID, z listą kontrprzykładów
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .evaluator import collect_variables, evaluate
from .types import (
    Assignment,
    Expr,
    TooManyVariablesError,
    TruthTableReport,
    TruthTableRow,
    Verdict,
)

logger = logging.getLogger(__name__)


def assignments(variables: Sequence[str]) -> list[Assignment]:
    """
    Wszystkie wartościowania; wiersz i przypisuje zmiennej j bit j liczby i
    (pierwszy wiersz: wszystkie False).
    """
    return [
        {v: bool(mask & (1 << j)) for j, v in enumerate(variables)}
        for mask in range(1 << len(variables))
    ]


def check_argument(
    premises:      Sequence[Expr],
    conclusion:    Expr,
    *,
    max_variables: int | None = None,
) -> TruthTableReport:
    """
    Buduje tablicę prawdy argumentu i wyznacza werdykt.

    Args:
        premises:      przesłanki (kolejność zachowana w premise_values)
        conclusion:    wniosek
        max_variables: opcjonalny limit liczby zmiennych

    Raises:
        TooManyVariablesError gdy liczba zmiennych przekracza max_variables.
    """
    variables = collect_variables([*premises, conclusion])
    if max_variables is not None and len(variables) > max_variables:
        raise TooManyVariablesError(len(variables), max_variables)

    rows: list[TruthTableRow] = []
    consistent = False
    counterexamples: list[TruthTableRow] = []

    for assignment in assignments(variables):
        values = tuple(evaluate(p, assignment, strict=True) for p in premises)
        row = TruthTableRow(
            assignment=assignment,
            premise_values=values,
            premises_satisfied=all(values),
            conclusion_true=evaluate(conclusion, assignment, strict=True),
        )
        if row.premises_satisfied:
            consistent = True
            if not row.conclusion_true:
                counterexamples.append(row)
        rows.append(row)

    if not consistent:
        verdict = Verdict.INCONSISTENT
    elif counterexamples:
        verdict = Verdict.INVALID
    else:
        verdict = Verdict.VALID

    logger.debug(
        "tablica prawdy: %d zmiennych, %d wierszy, werdykt=%s",
        len(variables), len(rows), verdict,
    )
    return TruthTableReport(
        variables=variables,
        rows=rows,
        verdict=verdict,
        counterexamples=counterexamples,
    )
