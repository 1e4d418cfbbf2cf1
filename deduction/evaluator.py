"""
deduction/evaluator.py — wartościowanie wyrażeń i zbieranie zmiennych.

Polityka brakujących zmiennych:
  - domyślnie (strict=False) zmienna spoza wartościowania ma wartość False,
  - strict=True podnosi UnassignedVariableError.
Tablica prawdy zawsze buduje wartościowania pełne, więc polityka nie ma tam
znaczenia.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .types import And, Expr, Implies, Not, Or, UnassignedVariableError, Var


def evaluate(expr: Expr, assignment: Mapping[str, bool], *, strict: bool = False) -> bool:
    """Oblicza wartość logiczną wyrażenia przy danym wartościowaniu."""
    if isinstance(expr, Var):
        if expr.name in assignment:
            return bool(assignment[expr.name])
        if strict:
            raise UnassignedVariableError(expr.name)
        return False
    if isinstance(expr, Not):
        return not evaluate(expr.operand, assignment, strict=strict)
    if isinstance(expr, And):
        return (evaluate(expr.left, assignment, strict=strict)
                and evaluate(expr.right, assignment, strict=strict))
    if isinstance(expr, Or):
        return (evaluate(expr.left, assignment, strict=strict)
                or evaluate(expr.right, assignment, strict=strict))
    if isinstance(expr, Implies):
        return (not evaluate(expr.left, assignment, strict=strict)
                or evaluate(expr.right, assignment, strict=strict))
    raise TypeError(f"Nie jest wyrażeniem: {expr!r}")


def _walk_vars(expr: Expr, seen: dict[str, None]) -> None:
    if isinstance(expr, Var):
        seen.setdefault(expr.name, None)
    elif isinstance(expr, Not):
        _walk_vars(expr.operand, seen)
    else:
        _walk_vars(expr.left, seen)
        _walk_vars(expr.right, seen)


def collect_variables(exprs: Iterable[Expr]) -> list[str]:
    """
    Zwraca nazwy zmiennych bez powtórzeń, w kolejności pierwszego wystąpienia
    (przesłanki po kolei, lewe poddrzewo przed prawym).
    """
    seen: dict[str, None] = {}
    for expr in exprs:
        _walk_vars(expr, seen)
    return list(seen)
