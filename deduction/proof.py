"""
deduction/proof.py — orkiestracja dowodu.

Kolejność prób:
  1. wyprowadzenie bezpośrednie: silnik na (przesłanki, cel)
  2. dla celu A -> B: dowód warunkowy — założenie A, cel B, a na końcu
     krok wprowadzenia implikacji (rozładowanie założenia)
  3. brak wyprowadzenia — wynik poprawny, nie werdykt: tabela reguł jest
     niepełna, rozstrzyga tablica prawdy
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .engine import MAX_PASSES, forward_chain
from .printer import canonical
from .types import Expr, Implies, ProofMethod, ProofResult, ProofRun, ProofStep

logger = logging.getLogger(__name__)

DISCHARGE_JUSTIFICATION = "Implication Introduction (discharge assumption)"
NO_PROOF_NOTE = (
    "No derivation found with this rule set; "
    "the truth table is authoritative."
)


def _steps(run: ProofRun) -> list[ProofStep]:
    return [ProofStep(f.key, f.justification) for f in run.ordered_facts()]


def attempt_proof(
    premises:   Sequence[Expr],
    goal:       Expr,
    *,
    max_passes: int = MAX_PASSES,
) -> ProofResult:
    """
    Szuka dowodu celu z przesłanek.

    Returns:
        ProofResult z derived=True i listą kroków (DIRECT / CONDITIONAL)
        albo derived=False, method=NONE i run próby bezpośredniej.
    """
    run = forward_chain(premises, goal, max_passes=max_passes)
    if run.goal_found:
        logger.debug("dowód bezpośredni: %d kroków", len(run.order))
        return ProofResult(True, ProofMethod.DIRECT, _steps(run), run)

    if isinstance(goal, Implies):
        cond_run = forward_chain(premises, goal.right, [goal.left], max_passes=max_passes)
        if cond_run.goal_found:
            steps = _steps(cond_run)
            steps.append(ProofStep(canonical(goal), DISCHARGE_JUSTIFICATION))
            logger.debug("dowód warunkowy: %d kroków", len(steps))
            return ProofResult(True, ProofMethod.CONDITIONAL, steps, cond_run)

    logger.debug("brak wyprowadzenia dla %s", canonical(goal))
    return ProofResult(False, ProofMethod.NONE, [], run)
