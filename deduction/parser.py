"""
deduction/parser.py — tokenizer i parser formuł (rekurencyjne zejście).

Gramatyka (od najsłabiej wiążącego)::

    implication := disjunction ( '->' implication )?    prawostronnie łączna
    disjunction := conjunction ( '|' conjunction )*      lewostronnie łączna
    conjunction := negation ( '&' negation )*            lewostronnie łączna
    negation    := '~' negation | primary
    primary     := VAR | '(' implication ')'

Publiczne API:
  tokenize(text) -> list[Token]
  parse(text)    -> Expr
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .types import And, Expr, Implies, Not, Or, ParseError, TokenizeError, Var

IMPLIES = "->"
OR      = "|"
AND     = "&"
NOT     = "~"
LPAREN  = "("
RPAREN  = ")"

OPERATORS: frozenset[str] = frozenset({IMPLIES, OR, AND, NOT, LPAREN, RPAREN})

# '->' przed znakami pojedynczymi; nazwa zmiennej to najdłuższy ciąg
# pozostałych znaków niebiałych, który nie zawiera '->'
_TOKEN_RE = re.compile(r"->|[()~&|]|(?:(?!->)[^\s()~&|])+")


@dataclass(frozen=True, slots=True)
class Token:
    text:     str
    position: int


def tokenize(text: str) -> list[Token]:
    """
    Dzieli tekst formuły na tokeny.

    Przykład::

        "P->~(Q&R)" → ["P", "->", "~", "(", "Q", "&", "R", ")"]

    Raises:
        TokenizeError gdy text nie jest napisem.
    """
    if not isinstance(text, str):
        raise TokenizeError(f"Oczekiwano tekstu formuły, otrzymano {type(text).__name__}")
    return [Token(m.group(0), m.start()) for m in _TOKEN_RE.finditer(text)]


class _Parser:
    """Parser jednej formuły; stan to lista tokenów i indeks bieżący."""

    def __init__(self, text: str) -> None:
        self._text   = text
        self._tokens = tokenize(text)
        self._i      = 0

    def _peek(self) -> str | None:
        if self._i < len(self._tokens):
            return self._tokens[self._i].text
        return None

    def _accept(self, tok: str) -> bool:
        if self._peek() == tok:
            self._i += 1
            return True
        return False

    def _error(self, message: str) -> ParseError:
        if self._i < len(self._tokens):
            t = self._tokens[self._i]
            return ParseError(message, text=self._text, token=t.text, position=t.position)
        return ParseError(message, text=self._text)

    # ------------------------------------------------------------------

    def parse(self) -> Expr:
        root = self._implication()
        if self._i < len(self._tokens):
            raise self._error(f"unexpected token: {self._tokens[self._i].text}")
        return root

    def _implication(self) -> Expr:
        left = self._disjunction()
        if self._accept(IMPLIES):
            return Implies(left, self._implication())
        return left

    def _disjunction(self) -> Expr:
        node = self._conjunction()
        while self._accept(OR):
            node = Or(node, self._conjunction())
        return node

    def _conjunction(self) -> Expr:
        node = self._negation()
        while self._accept(AND):
            node = And(node, self._negation())
        return node

    def _negation(self) -> Expr:
        if self._accept(NOT):
            return Not(self._negation())
        return self._primary()

    def _primary(self) -> Expr:
        tok = self._peek()
        if tok is None:
            raise self._error("unexpected end of input")
        if tok == LPAREN:
            self._i += 1
            expr = self._implication()
            if not self._accept(RPAREN):
                raise self._error("missing closing parenthesis")
            return expr
        if tok in OPERATORS:
            raise self._error(f"unexpected token: {tok}")
        self._i += 1
        return Var(tok)


def parse(text: str) -> Expr:
    """
    Parsuje tekst formuły do drzewa wyrażenia.

    Przykłady::

        parse("~P & Q | R -> S")  → (((~P & Q) | R) -> S)
        parse("A -> B -> C")      → (A -> (B -> C))

    Raises:
        TokenizeError gdy text nie jest napisem.
        ParseError    przy naruszeniu gramatyki albo zbyt głębokim
                      zagnieżdżeniu (limit rekursji interpretera).
    """
    try:
        return _Parser(text).parse()
    except RecursionError:
        raise ParseError("formula nested too deeply", text=text) from None
