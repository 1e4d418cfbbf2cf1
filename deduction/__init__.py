"""
deduction — silnik logiki zdań: parser, tablica prawdy, dedukcja naturalna.

Publiczne API:
  parse(text)                                  → Expr
  tokenize(text)                               → list[Token]
  canonical(expr)                              → str (klucz równości)
  evaluate(expr, assignment, strict)           → bool
  collect_variables(exprs)                     → list[str]
  check_argument(premises, conclusion)         → TruthTableReport
  forward_chain(premises, goal, assumptions)   → ProofRun
  attempt_proof(premises, goal)                → ProofResult
  analyze_argument(premises_raw, conclusion_raw) → Analysis
  Var, Not, And, Or, Implies                   typy wyrażeń
"""

from .argument    import Analysis, Argument, analyze_argument, parse_argument
from .engine      import MAX_PASSES, ForwardChainer, forward_chain
from .evaluator   import collect_variables, evaluate
from .loader      import EXAMPLE_CONCLUSION, EXAMPLE_PREMISES, load_argument_json, read_premises
from .parser      import Token, parse, tokenize
from .printer     import canonical
from .proof       import NO_PROOF_NOTE, attempt_proof
from .truth_table import check_argument
from .types       import (
    And,
    Expr,
    Fact,
    Implies,
    InferenceRule,
    LogicError,
    Not,
    Or,
    ParseError,
    ProofMethod,
    ProofResult,
    ProofRun,
    ProofStep,
    StopReason,
    TokenizeError,
    TooManyVariablesError,
    TruthTableReport,
    TruthTableRow,
    UnassignedVariableError,
    Var,
    Verdict,
)

__all__ = [
    "Analysis",
    "Argument",
    "analyze_argument",
    "parse_argument",
    "MAX_PASSES",
    "ForwardChainer",
    "forward_chain",
    "collect_variables",
    "evaluate",
    "EXAMPLE_CONCLUSION",
    "EXAMPLE_PREMISES",
    "load_argument_json",
    "read_premises",
    "Token",
    "parse",
    "tokenize",
    "canonical",
    "NO_PROOF_NOTE",
    "attempt_proof",
    "check_argument",
    "And",
    "Expr",
    "Fact",
    "Implies",
    "InferenceRule",
    "LogicError",
    "Not",
    "Or",
    "ParseError",
    "ProofMethod",
    "ProofResult",
    "ProofRun",
    "ProofStep",
    "StopReason",
    "TokenizeError",
    "TooManyVariablesError",
    "TruthTableReport",
    "TruthTableRow",
    "UnassignedVariableError",
    "Var",
    "Verdict",
]
