"""
Testy orkiestracji dowodu i analizy argumentu.

Sprawdzane:
1. Dowód bezpośredni i warunkowy (wprowadzenie implikacji)
2. Brak wyprowadzenia jako poprawny wynik, nie werdykt
3. parse_argument / analyze_argument
4. Wczytywanie argumentów z tekstu i JSON
"""

import json

import pytest

from deduction import (
    EXAMPLE_CONCLUSION,
    EXAMPLE_PREMISES,
    NO_PROOF_NOTE,
    ParseError,
    ProofMethod,
    ProofStep,
    StopReason,
    Verdict,
    analyze_argument,
    attempt_proof,
    load_argument_json,
    parse,
    parse_argument,
    read_premises,
)
from deduction.proof import DISCHARGE_JUSTIFICATION


def _prove(premises, goal):
    return attempt_proof([parse(p) for p in premises], parse(goal))


# =============================================================================
# DOWÓD
# =============================================================================

class TestAttemptProof:
    """Kolejność prób: bezpośrednio, warunkowo, brak wyprowadzenia."""

    def test_direct_modus_tollens(self):
        proof = _prove(["P -> Q", "~Q"], "~P")
        assert proof.derived
        assert proof.method is ProofMethod.DIRECT
        assert proof.steps == [
            ProofStep("(P -> Q)", "Premise 1"),
            ProofStep("~Q", "Premise 2"),
            ProofStep("~P", "Modus Tollens from (P -> Q) and ~Q"),
        ]

    def test_identity_by_conditional_proof(self):
        proof = _prove([], "P -> P")
        assert proof.derived
        assert proof.method is ProofMethod.CONDITIONAL
        assert proof.steps == [
            ProofStep("P", "Assumption"),
            ProofStep("(P -> P)", DISCHARGE_JUSTIFICATION),
        ]

    def test_conditional_proof_uses_premises(self):
        proof = _prove(["Q -> R"], "(P & Q) -> R")
        assert proof.method is ProofMethod.CONDITIONAL
        assert [s.text for s in proof.steps] == [
            "(Q -> R)", "(P & Q)", "P", "Q", "R", "((P & Q) -> R)",
        ]
        assert proof.steps[1].justification == "Assumption"
        assert proof.steps[4].justification == "Modus Ponens from (Q -> R) and Q"
        assert proof.run.goal == parse("R")

    def test_direct_derivation_is_preferred(self):
        proof = _prove(["P -> Q"], "P -> Q")
        assert proof.method is ProofMethod.DIRECT
        assert proof.steps == [ProofStep("(P -> Q)", "Premise 1")]

    def test_example_has_no_derivation(self):
        proof = _prove(EXAMPLE_PREMISES, EXAMPLE_CONCLUSION)
        assert not proof.derived
        assert proof.method is ProofMethod.NONE
        assert proof.steps == []
        assert proof.run.stop_reason is StopReason.FIXED_POINT
        assert proof.run.order[-1] == "~((P | Q))"

    def test_failed_implication_keeps_direct_run(self):
        proof = _prove(["Q"], "P -> R")
        assert not proof.derived
        assert proof.run.goal == parse("P -> R")

    def test_valid_argument_outside_rule_set(self):
        # Brak wprowadzenia alternatywy: poprawny argument bez wyprowadzenia.
        proof = _prove(["P"], "P | Q")
        assert not proof.derived

    def test_pass_limit_reported_as_no_derivation(self):
        proof = attempt_proof([parse("P & (Q & R)")], parse("R"), max_passes=1)
        assert not proof.derived
        assert proof.run.stop_reason is StopReason.PASS_LIMIT


# =============================================================================
# ARGUMENT
# =============================================================================

class TestParseArgument:
    """Parsowanie przesłanek i wniosku z tekstu."""

    def test_blank_premises_are_dropped(self):
        argument = parse_argument(["  P -> Q ", "", "   ", "~Q"], " ~P ")
        assert argument.premises_raw == ("P -> Q", "~Q")
        assert argument.conclusion_raw == "~P"
        assert argument.premises == (parse("P -> Q"), parse("~Q"))

    def test_premise_error_names_premise(self):
        with pytest.raises(ParseError) as exc:
            parse_argument(["P", "", "(Q"], "P")
        assert exc.value.role == "premise 2"
        assert exc.value.message == "missing closing parenthesis"
        assert exc.value.text == "(Q"

    def test_conclusion_error_names_conclusion(self):
        with pytest.raises(ParseError) as exc:
            parse_argument(["P"], "P ->")
        assert exc.value.role == "conclusion"
        assert str(exc.value) == "unexpected end of input"


class TestAnalyzeArgument:
    """Pełna analiza: parsowanie, tablica prawdy, dowód."""

    def test_example_is_inconsistent_without_proof(self):
        analysis = analyze_argument(EXAMPLE_PREMISES, EXAMPLE_CONCLUSION)
        assert analysis.table.verdict is Verdict.INCONSISTENT
        assert not analysis.proof.derived
        summary = analysis.summary()
        assert "inconsistent" in summary
        assert NO_PROOF_NOTE in summary

    def test_valid_with_proof(self):
        analysis = analyze_argument(["P -> Q", "~Q"], "~P")
        assert analysis.table.verdict is Verdict.VALID
        assert analysis.proof.derived
        assert analysis.summary() == 'Conclusion "~P" is VALID (truth-table confirmed).'

    def test_invalid_summary(self):
        analysis = analyze_argument(["P -> Q", "Q"], "P")
        assert analysis.table.verdict is Verdict.INVALID
        assert analysis.summary().startswith('Conclusion "P" is INVALID')


# =============================================================================
# WCZYTYWANIE
# =============================================================================

class TestLoader:
    """Argumenty z tekstu i z plików JSON."""

    def test_read_premises(self):
        assert read_premises("P -> Q\n\n  ~Q  \n") == ["P -> Q", "~Q"]

    def test_load_argument_json(self, tmp_path):
        path = tmp_path / "argument.json"
        path.write_text(json.dumps({"premises": ["P -> Q", "~Q"], "conclusion": "~P"}))
        assert load_argument_json(path) == (["P -> Q", "~Q"], "~P")

    def test_premises_default_to_empty(self, tmp_path):
        path = tmp_path / "argument.json"
        path.write_text(json.dumps({"conclusion": "P -> P"}))
        assert load_argument_json(path) == ([], "P -> P")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "argument.json"
        path.write_text("{premises:")
        with pytest.raises(ValueError, match="Nieprawidłowy JSON"):
            load_argument_json(path)

    def test_missing_conclusion(self, tmp_path):
        path = tmp_path / "argument.json"
        path.write_text(json.dumps({"premises": ["P"]}))
        with pytest.raises(ValueError, match="conclusion"):
            load_argument_json(path)

    def test_premises_must_be_strings(self, tmp_path):
        path = tmp_path / "argument.json"
        path.write_text(json.dumps({"premises": [1, 2], "conclusion": "P"}))
        with pytest.raises(ValueError, match="premises"):
            load_argument_json(path)

    def test_directory_is_value_error(self, tmp_path):
        with pytest.raises(ValueError, match="Nie można odczytać"):
            load_argument_json(tmp_path)

    def test_non_utf8_is_value_error(self, tmp_path):
        path = tmp_path / "argument.json"
        path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(ValueError, match="Nie można odczytać"):
            load_argument_json(path)
