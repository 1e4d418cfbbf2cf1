"""
deduction/types.py — podstawowe typy silnika dedukcji.

Wyrażenia (niezmienne drzewa):
    Var, Not, And, Or, Implies   — pięć wariantów, alias Expr
Silnik:
    Fact, ProofRun, StopReason, InferenceRule
Wyniki:
    TruthTableRow, TruthTableReport, Verdict, ProofStep, ProofResult, ProofMethod
Błędy:
    LogicError → TokenizeError, ParseError, UnassignedVariableError,
                 TooManyVariablesError
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


# ---------------------------------------------------------------------------
# Wyrażenia
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Var:
    """Zmienna zdaniowa (atom)."""
    name: str

    def __str__(self) -> str:
        from deduction.printer import canonical
        return canonical(self)


@dataclass(frozen=True, slots=True)
class Not:
    operand: Expr

    def __str__(self) -> str:
        from deduction.printer import canonical
        return canonical(self)


@dataclass(frozen=True, slots=True)
class And:
    left:  Expr
    right: Expr

    def __str__(self) -> str:
        from deduction.printer import canonical
        return canonical(self)


@dataclass(frozen=True, slots=True)
class Or:
    left:  Expr
    right: Expr

    def __str__(self) -> str:
        from deduction.printer import canonical
        return canonical(self)


@dataclass(frozen=True, slots=True)
class Implies:
    """Implikacja materialna: left -> right."""
    left:  Expr
    right: Expr

    def __str__(self) -> str:
        from deduction.printer import canonical
        return canonical(self)


Expr = Var | Not | And | Or | Implies

# Wartościowanie: nazwa zmiennej → wartość logiczna
Assignment = dict[str, bool]


# ---------------------------------------------------------------------------
# Silnik wnioskowania w przód
# ---------------------------------------------------------------------------

class InferenceRule(StrEnum):
    """Zamknięta tabela reguł (plus dwa źródła faktów początkowych)."""
    PREMISE                 = "Premise"
    ASSUMPTION              = "Assumption"
    SIMPLIFICATION          = "Simplification"
    MODUS_PONENS            = "Modus Ponens"
    MODUS_TOLLENS           = "Modus Tollens"
    HYPOTHETICAL_SYLLOGISM  = "Hypothetical Syllogism"
    DISJUNCTIVE_SYLLOGISM   = "Disjunctive Syllogism"
    CONJUNCTION_INTRO       = "Conjunction Introduction"


class StopReason(StrEnum):
    GOAL_FOUND  = "goal_found"
    FIXED_POINT = "fixed_point"
    PASS_LIMIT  = "pass_limit"


@dataclass(frozen=True, slots=True)
class Fact:
    """
    Fakt wyprowadzony przez silnik.

    - expression:   wyrażenie
    - rule:         reguła, która dodała fakt
    - justification: tekst uzasadnienia, np. "Modus Tollens from (P -> Q) and ~Q"
    - derived_from: klucze (postacie kanoniczne) faktów źródłowych, w kolejności
    - sequence:     numer kolejny wstawienia (1-based, tylko do wyświetlania)
    """
    expression:    Expr
    rule:          InferenceRule
    justification: str
    derived_from:  tuple[str, ...]
    sequence:      int

    @property
    def key(self) -> str:
        return str(self.expression)


@dataclass
class ProofRun:
    """Wynik jednego uruchomienia silnika: fakty wg klucza + kolejność wstawiania."""
    goal:        Expr
    facts:       dict[str, Fact] = field(default_factory=dict)
    order:       list[str]       = field(default_factory=list)
    goal_found:  bool            = False
    passes:      int             = 0
    stop_reason: StopReason      = StopReason.FIXED_POINT

    def ordered_facts(self) -> list[Fact]:
        return [self.facts[k] for k in self.order]

    def __contains__(self, expr: object) -> bool:
        return str(expr) in self.facts


# ---------------------------------------------------------------------------
# Tablica prawdy
# ---------------------------------------------------------------------------

class Verdict(StrEnum):
    INCONSISTENT = "inconsistent"
    VALID        = "valid"
    INVALID      = "invalid"


@dataclass(frozen=True, slots=True)
class TruthTableRow:
    assignment:         Assignment
    premise_values:     tuple[bool, ...]
    premises_satisfied: bool
    conclusion_true:    bool

    @property
    def is_counterexample(self) -> bool:
        return self.premises_satisfied and not self.conclusion_true


@dataclass(slots=True)
class TruthTableReport:
    """
    Wynik sprawdzenia tablicą prawdy.

    - variables:       zmienne w kolejności pierwszego wystąpienia
    - rows:            2**k wierszy
    - verdict:         inconsistent / valid / invalid
    - counterexamples: wiersze, w których przesłanki są prawdziwe a wniosek fałszywy
    """
    variables:       list[str]
    rows:            list[TruthTableRow]
    verdict:         Verdict
    counterexamples: list[TruthTableRow] = field(default_factory=list)

    @property
    def satisfying_rows(self) -> int:
        return sum(1 for r in self.rows if r.premises_satisfied)

    @property
    def is_valid(self) -> bool:
        """True także dla sprzecznych przesłanek (ważność pusta)."""
        return self.verdict is not Verdict.INVALID


# ---------------------------------------------------------------------------
# Dowód
# ---------------------------------------------------------------------------

class ProofMethod(StrEnum):
    DIRECT      = "direct derivation"
    CONDITIONAL = "conditional proof"
    NONE        = "none"


@dataclass(frozen=True, slots=True)
class ProofStep:
    text:          str
    justification: str


@dataclass(slots=True)
class ProofResult:
    derived: bool
    method:  ProofMethod
    steps:   list[ProofStep] = field(default_factory=list)
    run:     ProofRun | None = None


# ---------------------------------------------------------------------------
# Błędy
# ---------------------------------------------------------------------------

class LogicError(Exception):
    """Bazowa klasa błędów wejścia silnika dedukcji."""


class TokenizeError(LogicError):
    """Wejście, którego nie da się podzielić na tokeny (w praktyce: nie-str)."""


class ParseError(LogicError):
    """
    Naruszenie gramatyki formuły.

    - message:  komunikat (np. "unexpected end of input")
    - text:     oryginalny tekst formuły
    - token:    token, na którym parser się zatrzymał (None na końcu wejścia)
    - position: 0-based offset tokenu w tekście (None na końcu wejścia)
    - role:     której formuły dotyczy błąd, np. "premise 2" (opcjonalnie)
    """

    def __init__(
        self,
        message:  str,
        *,
        text:     str = "",
        token:    str | None = None,
        position: int | None = None,
        role:     str | None = None,
    ) -> None:
        self.message  = message
        self.text     = text
        self.token    = token
        self.position = position
        self.role     = role
        super().__init__(message)

    def in_role(self, role: str) -> ParseError:
        """Zwraca kopię błędu z przypisaną rolą formuły."""
        return ParseError(
            self.message,
            text=self.text,
            token=self.token,
            position=self.position,
            role=role,
        )


class UnassignedVariableError(LogicError, KeyError):
    """Zmienna bez wartości przy ścisłej ewaluacji (strict=True)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unassigned variable: {name}")

    def __str__(self) -> str:
        return f"unassigned variable: {self.name}"


class TooManyVariablesError(LogicError, ValueError):
    """Liczba zmiennych przekracza limit tablicy prawdy."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(
            f"{count} variables exceed the truth-table limit of {limit} "
            f"({2 ** count} rows)"
        )
