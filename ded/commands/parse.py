"""Komenda: ded parse — postać kanoniczna, zmienne i drzewo formuł."""

from __future__ import annotations

import argparse

from rich.text import Text
from rich.tree import Tree

from ded._config import configure_logging
from ded.commands.solve import _show_parse_error, console
from deduction import (
    And,
    Expr,
    Implies,
    Not,
    Or,
    ParseError,
    Var,
    canonical,
    collect_variables,
    parse,
)

NODE_LABEL: dict[type, str] = {
    Not:     "~  (nie)",
    And:     "&  (i)",
    Or:      "|  (lub)",
    Implies: "-> (implikacja)",
}


def _build_tree(expr: Expr, node: Tree) -> None:
    if isinstance(expr, Var):
        node.add(Text(expr.name, style="cyan"))
        return
    branch = node.add(Text(NODE_LABEL[type(expr)], style="bold"))
    if isinstance(expr, Not):
        _build_tree(expr.operand, branch)
    else:
        _build_tree(expr.left, branch)
        _build_tree(expr.right, branch)


def run(args: argparse.Namespace) -> None:
    configure_logging(getattr(args, "verbose", False))
    failed = False
    for formula in args.formulas:
        try:
            expr = parse(formula)
        except ParseError as e:
            _show_parse_error(e)
            failed = True
            continue

        console.print(Text.assemble(("Formuła:    ", "bold"), formula))
        console.print(Text.assemble(("Kanoniczna: ", "bold"), (canonical(expr), "bold cyan")))
        console.print(Text.assemble(("Zmienne:    ", "bold"), ", ".join(collect_variables([expr]))))
        if not args.no_tree:
            root = Tree(Text("drzewo", style="dim"))
            _build_tree(expr, root)
            console.print(root)
        console.print()

    if failed:
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje formuły i pokazuje ich postać kanoniczną.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pierwszeństwo operatorów (od najsilniejszego): ~, &, |, ->.
& i | są lewostronnie łączne, -> prawostronnie.

Przykłady:
  ded parse '~P & Q | R -> S'
  ded parse 'A -> B -> C' --no-tree
        """,
    )
    p.add_argument(
        "formulas",
        nargs="+",
        metavar="FORMUŁA",
        help="Formuły do sparsowania.",
    )
    p.add_argument(
        "--no-tree",
        action="store_true",
        dest="no_tree",
        help="Nie rysuj drzewa wyrażenia.",
    )
    p.set_defaults(func=run)
