"""Komenda: ded table — tylko tablica prawdy i werdykt."""

from __future__ import annotations

import argparse

from ded.commands.solve import (
    add_input_arguments,
    build_truth_table,
    load_argument,
    show_counterexamples,
    show_truth_table,
    show_verdict,
)


def run(args: argparse.Namespace) -> None:
    argument = load_argument(args)
    report = build_truth_table(args, argument)
    show_truth_table(argument, report)
    show_verdict(argument, report)
    if args.counterexamples:
        show_counterexamples(report)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "table",
        help="Buduje tablicę prawdy argumentu i wyznacza werdykt.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przegląda wszystkie 2^k wartościowań k zmiennych. Koszt rośnie wykładniczo,
dlatego liczba zmiennych jest ograniczona (--max-vars, DED_MAX_VARIABLES).

Przykłady:
  ded table 'P | Q' '~P' -c 'Q'
  ded table 'P -> Q' -c 'Q -> P' --counterexamples
        """,
    )
    add_input_arguments(p)
    p.add_argument(
        "--counterexamples",
        action="store_true",
        help="Wypisz wartościowania, przy których przesłanki są prawdziwe, a wniosek fałszywy.",
    )
    p.set_defaults(func=run)
