"""
deduction/printer.py — postać kanoniczna wyrażenia.

Postać kanoniczna jest jednocześnie kluczem równości: dwa drzewa są tym samym
faktem wtedy i tylko wtedy, gdy ich postacie kanoniczne są równe. Pełne
nawiasowanie operatorów dwuargumentowych zapewnia różnowartościowość
względem kształtu drzewa.
"""

from __future__ import annotations

from .types import And, Expr, Implies, Not, Or, Var

_BINARY_OPS: dict[type, str] = {
    And:     "&",
    Or:      "|",
    Implies: "->",
}


def canonical(expr: Expr) -> str:
    """
    Zwraca postać kanoniczną wyrażenia.

    Przykłady::

        Var("P")                        → "P"
        Not(Var("P"))                   → "~P"
        Not(And(Var("P"), Var("Q")))    → "~((P & Q))"
        Implies(Var("A"), Implies(...)) → "(A -> (B -> C))"
    """
    if isinstance(expr, Var):
        return expr.name
    if isinstance(expr, Not):
        inner = expr.operand
        if isinstance(inner, Var):
            return f"~{inner.name}"
        return f"~({canonical(inner)})"
    op = _BINARY_OPS.get(type(expr))
    if op is None:
        raise TypeError(f"Nie jest wyrażeniem: {expr!r}")
    return f"({canonical(expr.left)} {op} {canonical(expr.right)})"


def same(a: Expr, b: Expr) -> bool:
    """Równość strukturalna przez postać kanoniczną."""
    return canonical(a) == canonical(b)
