"""
Testy tokenizera, parsera i postaci kanonicznej.

Sprawdzane:
1. Podział na tokeny (dwuznak '->', nazwy zmiennych, pozycje)
2. Pierwszeństwo i łączność operatorów
3. Komunikaty ParseError
4. Zgodność parsera z postacią kanoniczną (round trip)
"""

import pytest

from deduction import (
    And,
    Implies,
    Not,
    Or,
    ParseError,
    TokenizeError,
    Var,
    canonical,
    parse,
    tokenize,
)
from deduction.printer import same

P, Q, R, S = Var("P"), Var("Q"), Var("R"), Var("S")


def _texts(text):
    return [t.text for t in tokenize(text)]


# =============================================================================
# TOKENIZER
# =============================================================================

class TestTokenizer:
    """Podział tekstu na tokeny."""

    def test_implication_digraph_is_one_token(self):
        assert _texts("P->Q") == ["P", "->", "Q"]

    def test_operators_split_without_whitespace(self):
        assert _texts("~(P&Q)|R") == ["~", "(", "P", "&", "Q", ")", "|", "R"]

    def test_whitespace_is_insignificant(self):
        assert _texts("  P   ->\tQ \n") == ["P", "->", "Q"]

    def test_multi_character_variable_names(self):
        assert _texts("rain -> wet_street") == ["rain", "->", "wet_street"]

    def test_lone_dash_stays_in_variable_name(self):
        assert _texts("a-b -> c") == ["a-b", "->", "c"]

    def test_positions_are_character_offsets(self):
        tokens = tokenize("P  -> Q")
        assert [t.position for t in tokens] == [0, 3, 6]

    def test_empty_text_gives_no_tokens(self):
        assert tokenize("   ") == []

    def test_non_text_input_raises(self):
        with pytest.raises(TokenizeError):
            tokenize(42)


# =============================================================================
# PARSER
# =============================================================================

class TestParserPrecedence:
    """Pierwszeństwo: ~ przed &, & przed |, | przed ->."""

    def test_single_variable(self):
        assert parse("P") == P

    def test_full_precedence_ladder(self):
        expr = parse("~P & Q | R -> S")
        assert expr == Implies(Or(And(Not(P), Q), R), S)
        assert canonical(expr) == "(((~P & Q) | R) -> S)"

    def test_implication_is_right_associative(self):
        assert parse("A -> B -> C") == Implies(Var("A"), Implies(Var("B"), Var("C")))

    def test_conjunction_is_left_associative(self):
        assert parse("P & Q & R") == And(And(P, Q), R)

    def test_disjunction_is_left_associative(self):
        assert parse("P | Q | R") == Or(Or(P, Q), R)

    def test_negation_stacks(self):
        assert parse("~~P") == Not(Not(P))

    def test_negation_binds_tighter_than_and(self):
        assert parse("~P & Q") == And(Not(P), Q)

    def test_parentheses_override_precedence(self):
        assert parse("~(P & Q)") == Not(And(P, Q))
        assert parse("(P -> Q) -> R") == Implies(Implies(P, Q), R)

    def test_nested_parentheses(self):
        assert parse("((P))") == P


class TestParserErrors:
    """Naruszenia gramatyki zgłaszane jako ParseError."""

    def test_empty_input(self):
        with pytest.raises(ParseError, match="unexpected end of input"):
            parse("")

    def test_dangling_operator(self):
        with pytest.raises(ParseError, match="unexpected end of input") as exc:
            parse("P &")
        assert exc.value.token is None
        assert exc.value.text == "P &"

    def test_missing_closing_parenthesis(self):
        with pytest.raises(ParseError, match="missing closing parenthesis"):
            parse("(P | Q")

    def test_trailing_tokens(self):
        with pytest.raises(ParseError, match="unexpected token: Q") as exc:
            parse("P Q")
        assert exc.value.token == "Q"
        assert exc.value.position == 2

    def test_stray_closing_parenthesis(self):
        with pytest.raises(ParseError, match=r"unexpected token: \)"):
            parse("P)")

    def test_operator_where_variable_expected(self):
        with pytest.raises(ParseError, match="unexpected token: &"):
            parse("P -> & Q")

    def test_message_is_verbatim(self):
        with pytest.raises(ParseError) as exc:
            parse("(P")
        assert str(exc.value) == "missing closing parenthesis"
        assert exc.value.role is None

    def test_deep_negation_is_parse_error(self):
        text = "~" * 5000 + "P"
        with pytest.raises(ParseError, match="formula nested too deeply") as exc:
            parse(text)
        assert exc.value.text == text

    def test_deep_parentheses_are_parse_error(self):
        with pytest.raises(ParseError, match="formula nested too deeply"):
            parse("(" * 5000 + "P" + ")" * 5000)

    def test_moderate_nesting_parses(self):
        expr = parse("~" * 50 + "P")
        assert canonical(expr) == "~(" * 49 + "~P" + ")" * 49


# =============================================================================
# POSTAĆ KANONICZNA
# =============================================================================

class TestCanonicalPrinter:
    """Postać kanoniczna jako klucz równości."""

    def test_variable(self):
        assert canonical(P) == "P"

    def test_negated_variable_has_no_parentheses(self):
        assert canonical(Not(P)) == "~P"

    def test_negated_compound_is_wrapped(self):
        assert canonical(Not(Or(P, Q))) == "~((P | Q))"
        assert canonical(Not(Not(P))) == "~(~P)"

    def test_binary_operators_fully_parenthesized(self):
        assert canonical(And(P, Q)) == "(P & Q)"
        assert canonical(Or(P, Q)) == "(P | Q)"
        assert canonical(Implies(P, Q)) == "(P -> Q)"

    def test_str_uses_canonical_form(self):
        assert str(Implies(Not(P), And(Q, R))) == "(~P -> (Q & R))"

    def test_distinct_shapes_render_differently(self):
        left_nested  = And(And(P, Q), R)
        right_nested = And(P, And(Q, R))
        assert canonical(left_nested) != canonical(right_nested)
        assert not same(left_nested, right_nested)

    def test_same_compares_structure_not_identity(self):
        assert same(parse("P -> Q"), Implies(Var("P"), Var("Q")))

    @pytest.mark.parametrize("text", [
        "~P & Q | R -> S",
        "A -> B -> C",
        "~~(P | ~Q)",
        "(P -> Q) & (Q -> R) -> (P -> R)",
        "~(~P)",
    ])
    def test_round_trip_is_stable(self, text):
        first = canonical(parse(text))
        assert canonical(parse(first)) == first
