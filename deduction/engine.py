"""
deduction/engine.py — silnik dedukcji naturalnej: wnioskowanie w przód.

Obsługuje:
  - fakty początkowe: przesłanki ("Premise k") i założenia tymczasowe ("Assumption")
  - zamkniętą tabelę reguł:
      Simplification, Modus Ponens, Modus Tollens, Hypothetical Syllogism,
      Disjunctive Syllogism, Conjunction Introduction (tylko gdy cel jest
      koniunkcją, i tylko dla członów celu)
  - deduplikację po postaci kanonicznej (pierwsze wstawienie wygrywa)
  - zatrzymanie w chwili dodania celu, w punkcie stałym albo po MAX_PASSES
    przebiegach

Każdy przebieg iteruje po migawce kluczy z początku przebiegu: fakty dodane
w trakcie przebiegu stają się podmiotem reguł dopiero w następnym. Warunki
"fakt istnieje" sprawdzane są na bieżącym zbiorze faktów.

Tabela reguł jest zamknięta. Brak wyprowadzenia nie oznacza niepoprawności
argumentu — rozstrzyga tablica prawdy.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from .printer import canonical, same
from .types import (
    And,
    Expr,
    Fact,
    Implies,
    InferenceRule,
    Not,
    Or,
    ProofRun,
    StopReason,
)

logger = logging.getLogger(__name__)

MAX_PASSES = 5000


# ---------------------------------------------------------------------------
# Wnioski reguł
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Conclusion:
    """Kandydat na nowy fakt: wyrażenie + reguła + klucze źródeł."""
    expression: Expr
    rule:       InferenceRule
    sources:    tuple[str, ...]

    @property
    def justification(self) -> str:
        return f"{self.rule} from {' and '.join(self.sources)}"


Facts = dict[str, Fact]

# (klucz F, F, klucz G, G, bieżące fakty, cel) → wnioski
PairRule = Callable[[str, Expr, str, Expr, Facts, Expr], Iterator[Conclusion]]


def _simplification(f_key: str, f: Expr) -> Iterator[Conclusion]:
    if isinstance(f, And):
        yield Conclusion(f.left,  InferenceRule.SIMPLIFICATION, (f_key,))
        yield Conclusion(f.right, InferenceRule.SIMPLIFICATION, (f_key,))


def _modus_ponens(
    f_key: str, f: Expr, g_key: str, g: Expr, facts: Facts, goal: Expr,
) -> Iterator[Conclusion]:
    if isinstance(f, Implies):
        left_key = canonical(f.left)
        if left_key in facts:
            yield Conclusion(f.right, InferenceRule.MODUS_PONENS, (f_key, left_key))


def _modus_tollens(
    f_key: str, f: Expr, g_key: str, g: Expr, facts: Facts, goal: Expr,
) -> Iterator[Conclusion]:
    if isinstance(f, Implies):
        neg_right_key = canonical(Not(f.right))
        if neg_right_key in facts:
            yield Conclusion(Not(f.left), InferenceRule.MODUS_TOLLENS, (f_key, neg_right_key))


def _hypothetical_syllogism(
    f_key: str, f: Expr, g_key: str, g: Expr, facts: Facts, goal: Expr,
) -> Iterator[Conclusion]:
    if isinstance(f, Implies) and isinstance(g, Implies):
        if same(f.right, g.left):
            yield Conclusion(
                Implies(f.left, g.right),
                InferenceRule.HYPOTHETICAL_SYLLOGISM,
                (f_key, g_key),
            )


def _disjunctive_syllogism(
    f_key: str, f: Expr, g_key: str, g: Expr, facts: Facts, goal: Expr,
) -> Iterator[Conclusion]:
    if isinstance(f, Or):
        not_left_key = canonical(Not(f.left))
        if not_left_key in facts:
            yield Conclusion(f.right, InferenceRule.DISJUNCTIVE_SYLLOGISM, (f_key, not_left_key))
        not_right_key = canonical(Not(f.right))
        if not_right_key in facts:
            yield Conclusion(f.left, InferenceRule.DISJUNCTIVE_SYLLOGISM, (f_key, not_right_key))


def _conjunction_introduction(
    f_key: str, f: Expr, g_key: str, g: Expr, facts: Facts, goal: Expr,
) -> Iterator[Conclusion]:
    # Tylko dla celu-koniunkcji; wynik zawsze w kolejności członów celu.
    if not isinstance(goal, And):
        return
    left_key  = canonical(goal.left)
    right_key = canonical(goal.right)
    if f_key == left_key and g_key == right_key:
        yield Conclusion(And(f, g), InferenceRule.CONJUNCTION_INTRO, (f_key, g_key))
    elif g_key == left_key and f_key == right_key:
        yield Conclusion(And(g, f), InferenceRule.CONJUNCTION_INTRO, (g_key, f_key))


PAIR_RULES: tuple[PairRule, ...] = (
    _modus_ponens,
    _modus_tollens,
    _hypothetical_syllogism,
    _disjunctive_syllogism,
    _conjunction_introduction,
)


# ---------------------------------------------------------------------------
# Silnik
# ---------------------------------------------------------------------------

class ForwardChainer:
    """
    Wnioskowanie w przód do celu lub punktu stałego.

    Użycie::

        chainer = ForwardChainer(premises, goal, assumptions=[a])
        run     = chainer.run()
        if run.goal_found:
            for fact in run.ordered_facts():
                print(fact.sequence, fact.key, fact.justification)
    """

    def __init__(
        self,
        premises:    Sequence[Expr],
        goal:        Expr,
        assumptions: Sequence[Expr] = (),
        *,
        max_passes:  int = MAX_PASSES,
    ) -> None:
        self._premises    = list(premises)
        self._assumptions = list(assumptions)
        self._goal        = goal
        self._goal_key    = canonical(goal)
        self._max_passes  = max_passes

    # ------------------------------------------------------------------

    def run(self) -> ProofRun:
        """Uruchamia wyszukiwanie; każde wywołanie startuje od pustego zbioru faktów."""
        run = ProofRun(goal=self._goal)

        initial = [
            Conclusion(p, InferenceRule.PREMISE, ()) for p in self._premises
        ] + [
            Conclusion(a, InferenceRule.ASSUMPTION, ()) for a in self._assumptions
        ]
        for idx, c in enumerate(initial, start=1):
            text = f"Premise {idx}" if c.rule is InferenceRule.PREMISE else str(c.rule)
            if self._add(run, c, text) and run.order[-1] == self._goal_key:
                return self._finish(run, StopReason.GOAL_FOUND)

        changed = True
        while changed and run.passes < self._max_passes:
            changed = False
            run.passes += 1
            before = len(run.order)
            snapshot = list(run.order)

            for c in self._conclusions(run.facts, snapshot):
                if self._add(run, c, c.justification):
                    changed = True
                    if run.order[-1] == self._goal_key:
                        return self._finish(run, StopReason.GOAL_FOUND)

            logger.debug("przebieg %d: +%d faktów", run.passes, len(run.order) - before)

        reason = StopReason.PASS_LIMIT if changed else StopReason.FIXED_POINT
        return self._finish(run, reason)

    # ------------------------------------------------------------------

    def _conclusions(self, facts: Facts, snapshot: list[str]) -> Iterator[Conclusion]:
        """Wnioski wszystkich reguł dla migawki, w ustalonej kolejności."""
        for f_key in snapshot:
            f = facts[f_key].expression
            yield from _simplification(f_key, f)
            for g_key in snapshot:
                if g_key == f_key:
                    continue
                g = facts[g_key].expression
                for rule in PAIR_RULES:
                    yield from rule(f_key, f, g_key, g, facts, self._goal)

    @staticmethod
    def _add(run: ProofRun, c: Conclusion, justification: str) -> bool:
        """Dodaje fakt, jeśli jego klucza jeszcze nie ma. Zwraca True gdy dodano."""
        key = canonical(c.expression)
        if key in run.facts:
            return False
        run.facts[key] = Fact(
            expression=c.expression,
            rule=c.rule,
            justification=justification,
            derived_from=c.sources,
            sequence=len(run.order) + 1,
        )
        run.order.append(key)
        return True

    def _finish(self, run: ProofRun, reason: StopReason) -> ProofRun:
        run.goal_found  = reason is StopReason.GOAL_FOUND
        run.stop_reason = reason
        logger.debug(
            "cel %s: %s po %d przebiegach, %d faktów",
            self._goal_key, reason, run.passes, len(run.order),
        )
        return run


def forward_chain(
    premises:    Sequence[Expr],
    goal:        Expr,
    assumptions: Sequence[Expr] = (),
    *,
    max_passes:  int = MAX_PASSES,
) -> ProofRun:
    """Skrót: ForwardChainer(premises, goal, assumptions, max_passes=...).run()."""
    return ForwardChainer(premises, goal, assumptions, max_passes=max_passes).run()
