"""
deduction/argument.py — pełna analiza argumentu z tekstu.

Etapy (w tej kolejności):
  1. parsowanie przesłanek i wniosku    → Argument   (ParseError z rolą formuły)
  2. tablica prawdy                      → TruthTableReport
  3. próba dowodu                        → ProofResult

Publiczne API:
  parse_argument(premises_raw, conclusion_raw)  -> Argument
  analyze_argument(premises_raw, conclusion_raw, max_passes, max_variables) -> Analysis
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .engine import MAX_PASSES
from .parser import parse
from .proof import NO_PROOF_NOTE, attempt_proof
from .truth_table import check_argument
from .types import Expr, ParseError, ProofResult, TruthTableReport, Verdict


@dataclass(frozen=True, slots=True)
class Argument:
    premises_raw:   tuple[str, ...]
    conclusion_raw: str
    premises:       tuple[Expr, ...]
    conclusion:     Expr


@dataclass(slots=True)
class Analysis:
    argument: Argument
    table:    TruthTableReport
    proof:    ProofResult

    def summary(self) -> str:
        """Jednozdaniowy werdykt (po angielsku, jak w komunikatach silnika)."""
        verdict = self.table.verdict
        if verdict is Verdict.INCONSISTENT:
            text = "Premises are inconsistent (unsatisfiable); the argument is vacuously valid."
        elif verdict is Verdict.VALID:
            text = f'Conclusion "{self.argument.conclusion_raw}" is VALID (truth-table confirmed).'
        else:
            text = f'Conclusion "{self.argument.conclusion_raw}" is INVALID (truth-table confirmed).'
        if not self.proof.derived:
            text += " " + NO_PROOF_NOTE
        return text


def parse_argument(premises_raw: Iterable[str], conclusion_raw: str) -> Argument:
    """
    Parsuje przesłanki i wniosek. Puste przesłanki są pomijane,
    pozostałe przycinane.

    Raises:
        ParseError z role="premise k" (k liczone po pominięciu pustych)
        albo role="conclusion".
    """
    cleaned = tuple(p.strip() for p in premises_raw if p.strip())
    premises: list[Expr] = []
    for idx, text in enumerate(cleaned, start=1):
        try:
            premises.append(parse(text))
        except ParseError as e:
            raise e.in_role(f"premise {idx}") from None

    conclusion_raw = conclusion_raw.strip()
    try:
        conclusion = parse(conclusion_raw)
    except ParseError as e:
        raise e.in_role("conclusion") from None

    return Argument(
        premises_raw=cleaned,
        conclusion_raw=conclusion_raw,
        premises=tuple(premises),
        conclusion=conclusion,
    )


def analyze_argument(
    premises_raw:   Iterable[str],
    conclusion_raw: str,
    *,
    max_passes:     int = MAX_PASSES,
    max_variables:  int | None = None,
) -> Analysis:
    """Parsuje argument, sprawdza go tablicą prawdy i szuka dowodu."""
    argument = parse_argument(premises_raw, conclusion_raw)
    table = check_argument(argument.premises, argument.conclusion, max_variables=max_variables)
    proof = attempt_proof(argument.premises, argument.conclusion, max_passes=max_passes)
    return Analysis(argument=argument, table=table, proof=proof)
