"""Komenda: ded prove — tylko próba dowodu (dedukcja naturalna w przód)."""

from __future__ import annotations

import argparse

from rich       import box
from rich.table import Table
from rich.text  import Text

from ded.commands.solve import (
    add_input_arguments,
    build_proof,
    console,
    load_argument,
    show_proof,
)
from deduction import ProofRun


def _show_trace(run: ProofRun) -> None:
    """Wyświetla wszystkie fakty uruchomienia silnika (także te spoza dowodu)."""
    console.print(
        f"\n[bold]Przebieg silnika[/bold] — cel [cyan]{run.goal}[/cyan]: "
        f"{run.stop_reason}, {run.passes} przebiegów, {len(run.order)} faktów",
        highlight=False,
    )
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("#",       style="dim", justify="right", no_wrap=True)
    table.add_column("FAKT",    style="bold cyan", no_wrap=True)
    table.add_column("REGUŁA",  style="yellow", no_wrap=True)
    table.add_column("ŹRÓDŁA",  no_wrap=False)
    for fact in run.ordered_facts():
        sources = ", ".join(fact.derived_from) or "—"
        table.add_row(str(fact.sequence), Text(fact.key), Text(fact.justification), Text(sources))
    console.print(table)


def run(args: argparse.Namespace) -> None:
    argument = load_argument(args)
    proof = build_proof(args, argument)
    show_proof(proof)
    if args.trace and proof.run is not None:
        _show_trace(proof.run)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "prove",
        help="Szuka wyprowadzenia wniosku z przesłanek.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Reguły (zamknięty zbiór): Simplification, Modus Ponens, Modus Tollens,
Hypothetical Syllogism, Disjunctive Syllogism, Conjunction Introduction
(tylko dla wniosku-koniunkcji) oraz jeden poziom wprowadzenia implikacji.
Brak wyprowadzenia nie oznacza niepoprawności argumentu.

Przykłady:
  ded prove 'P -> Q' '~Q' -c '~P'
  ded prove -c 'P -> P'
  ded prove --example --trace
        """,
    )
    add_input_arguments(p)
    p.add_argument(
        "--trace",
        action="store_true",
        help="Pokaż wszystkie fakty wyprowadzone przez silnik wraz ze źródłami.",
    )
    p.set_defaults(func=run)
