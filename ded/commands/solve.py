"""Komenda: ded solve — tablica prawdy, werdykt i próba dowodu dla argumentu."""

from __future__ import annotations

import argparse
import pathlib

from rich         import box
from rich.panel   import Panel
from rich.table   import Table
from rich.text    import Text

from ded._config import configure_logging, get_console, get_settings
from deduction import (
    EXAMPLE_CONCLUSION,
    EXAMPLE_PREMISES,
    Argument,
    ParseError,
    ProofResult,
    TooManyVariablesError,
    TruthTableReport,
    Verdict,
    attempt_proof,
    check_argument,
    load_argument_json,
    parse_argument,
    read_premises,
)

console = get_console()

VERDICT_STYLE: dict[Verdict, str] = {
    Verdict.INCONSISTENT: "yellow",
    Verdict.VALID:        "green",
    Verdict.INVALID:      "red",
}


# ---------------------------------------------------------------------------
# Wejście
# ---------------------------------------------------------------------------

def _show_parse_error(e: ParseError) -> None:
    where = f" ({e.role})" if e.role else ""
    console.print(f"[red]Błąd parsowania{where}:[/red] {e.message}")
    if e.text:
        console.print(f"  {e.text}", markup=False, highlight=False)
        caret_at = e.position if e.position is not None else len(e.text)
        console.print("  " + " " * caret_at + "^", style="red", markup=False, highlight=False)


def _read_inputs(args: argparse.Namespace) -> tuple[list[str], str]:
    """Zbiera surowe przesłanki i wniosek z argumentów komendy."""
    explicit = bool(args.premises or args.conclusion or args.premises_file)
    if args.example and (explicit or args.file):
        console.print("[red]--example nie łączy się z innymi danymi wejściowymi.[/red]")
        raise SystemExit(1)
    if args.file and explicit:
        console.print("[red]--file nie łączy się z przesłankami ani z --conclusion.[/red]")
        raise SystemExit(1)

    if args.example:
        return list(EXAMPLE_PREMISES), EXAMPLE_CONCLUSION

    if args.file:
        path = pathlib.Path(args.file)
        if not path.exists():
            console.print(f"[red]Brak pliku argumentu:[/red] {path}")
            raise SystemExit(1)
        try:
            return load_argument_json(path)
        except ValueError as e:
            console.print(f"[red]Błąd wczytywania argumentu:[/red] {e}")
            raise SystemExit(1)

    premises: list[str] = list(args.premises or [])
    if args.premises_file:
        path = pathlib.Path(args.premises_file)
        if not path.exists():
            console.print(f"[red]Brak pliku przesłanek:[/red] {path}")
            raise SystemExit(1)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Błąd odczytu pliku przesłanek:[/red] {e}")
            raise SystemExit(1)
        premises.extend(read_premises(text))

    conclusion = (args.conclusion or "").strip()
    if not conclusion:
        console.print("[red]Podaj wniosek:[/red] --conclusion/-c, --file albo --example.")
        raise SystemExit(1)
    return premises, conclusion


def load_argument(args: argparse.Namespace) -> Argument:
    """Wejście komendy → sparsowany Argument (SystemExit(1) przy błędzie)."""
    configure_logging(getattr(args, "verbose", False))
    premises_raw, conclusion_raw = _read_inputs(args)
    try:
        argument = parse_argument(premises_raw, conclusion_raw)
    except ParseError as e:
        _show_parse_error(e)
        raise SystemExit(1)

    if not argument.premises:
        console.print("[yellow]Brak przesłanek — sprawdzam, czy wniosek jest tautologią.[/yellow]")
    return argument


def build_truth_table(args: argparse.Namespace, argument: Argument) -> TruthTableReport:
    limit = args.max_vars if args.max_vars is not None else get_settings().max_variables
    try:
        return check_argument(argument.premises, argument.conclusion, max_variables=limit)
    except TooManyVariablesError as e:
        console.print(f"[red]Za dużo zmiennych:[/red] {e}")
        console.print("[dim]Zwiększ limit przez --max-vars albo DED_MAX_VARIABLES.[/dim]")
        raise SystemExit(1)


def build_proof(args: argparse.Namespace, argument: Argument) -> ProofResult:
    max_passes = args.max_passes if args.max_passes is not None else get_settings().max_passes
    return attempt_proof(argument.premises, argument.conclusion, max_passes=max_passes)


# ---------------------------------------------------------------------------
# Wyświetlanie wyników
# ---------------------------------------------------------------------------

def _tf(value: bool) -> Text:
    return Text("T", style="green") if value else Text("F", style="red")


def show_truth_table(argument: Argument, report: TruthTableReport) -> None:
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    for var in report.variables:
        table.add_column(var, style="cyan", justify="center", no_wrap=True)
    for raw in argument.premises_raw:
        table.add_column(Text(raw), justify="center")
    table.add_column(Text(argument.conclusion_raw), style="bold", justify="center")

    for row in report.rows:
        cells = [_tf(row.assignment[v]) for v in report.variables]
        cells += [_tf(v) for v in row.premise_values]
        cells.append(_tf(row.conclusion_true))
        if row.is_counterexample:
            style = "on dark_red"
        elif row.premises_satisfied:
            style = "bold"
        else:
            style = "dim"
        table.add_row(*cells, style=style)

    console.print(table)
    console.print(
        f"  [dim]{len(report.variables)} zmiennych, {len(report.rows)} wierszy, "
        f"{report.satisfying_rows} spełnia przesłanki[/dim]"
    )


def show_verdict(argument: Argument, report: TruthTableReport) -> None:
    if report.verdict is Verdict.INCONSISTENT:
        text = "Przesłanki są sprzeczne (niespełnialne) — wynika z nich dowolny wniosek."
    elif report.verdict is Verdict.VALID:
        text = f'Wniosek "{argument.conclusion_raw}" jest POPRAWNY (potwierdza tablica prawdy).'
    else:
        text = f'Wniosek "{argument.conclusion_raw}" jest NIEPOPRAWNY (potwierdza tablica prawdy).'
    style = VERDICT_STYLE[report.verdict]
    console.print(Panel(
        Text(text, style=f"bold {style}"),
        title=f"Werdykt: {report.verdict}",
        border_style=style,
        expand=False,
    ))


def show_counterexamples(report: TruthTableReport) -> None:
    if not report.counterexamples:
        console.print("[dim]Brak kontrprzykładów.[/dim]")
        return
    console.print(f"\n[bold]Kontrprzykłady ({len(report.counterexamples)}):[/bold]")
    for row in report.counterexamples:
        assignment = ", ".join(
            f"{v}={'T' if row.assignment[v] else 'F'}" for v in report.variables
        )
        console.print(f"  [red]·[/red] {assignment}", highlight=False)


def show_proof(proof: ProofResult, report: TruthTableReport | None = None) -> None:
    if not proof.derived:
        if report is None:
            msg = "Nie znaleziono wyprowadzenia prostymi regułami; rozstrzyga tablica prawdy."
        elif report.is_valid:
            msg = ("Nie znaleziono wyprowadzenia prostymi regułami, "
                   "ale tablica prawdy potwierdza poprawność.")
        else:
            msg = "Nie znaleziono wyprowadzenia. Tablica prawdy pokazuje, że argument jest niepoprawny."
        console.print(f"\n[dim]{msg}[/dim]")
        return

    console.print(f"\n[bold]Dowód ({proof.method}):[/bold]")
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("#",            style="dim", justify="right", no_wrap=True)
    table.add_column("FORMUŁA",      style="bold cyan", no_wrap=True)
    table.add_column("UZASADNIENIE", no_wrap=False)
    for idx, step in enumerate(proof.steps, start=1):
        table.add_row(str(idx), Text(step.text), Text(step.justification))
    console.print(table)


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    argument = load_argument(args)
    report = build_truth_table(args, argument)

    if not args.no_table:
        show_truth_table(argument, report)
    show_verdict(argument, report)

    if not args.no_proof:
        show_proof(build_proof(args, argument), report)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_input_arguments(p: argparse.ArgumentParser) -> None:
    """Wspólne opcje wejścia dla solve / table / prove."""
    p.add_argument(
        "premises",
        nargs="*",
        metavar="PRZESŁANKA",
        help="Przesłanki, np. 'P -> Q' '~Q'.",
    )
    p.add_argument(
        "--conclusion", "-c",
        metavar="WNIOSEK",
        help="Wniosek argumentu, np. '~P'.",
    )
    p.add_argument(
        "--premises-file",
        metavar="PLIK",
        dest="premises_file",
        help="Plik tekstowy z przesłankami (po jednej w linii).",
    )
    p.add_argument(
        "--file", "-f",
        metavar="PLIK",
        help='Plik JSON z argumentem: {"premises": [...], "conclusion": "..."}. Wyklucza przesłanki i -c.',
    )
    p.add_argument(
        "--example",
        action="store_true",
        help="Użyj przykładowego argumentu: (P | Q) -> R, P, ~R ⊢ ~Q. Wyklucza pozostałe wejścia.",
    )
    p.add_argument(
        "--max-vars",
        type=int,
        dest="max_vars",
        metavar="N",
        help="Limit liczby zmiennych tablicy prawdy (domyślnie DED_MAX_VARIABLES=16).",
    )
    p.add_argument(
        "--max-passes",
        type=int,
        dest="max_passes",
        metavar="N",
        help="Limit przebiegów silnika dedukcji (domyślnie DED_MAX_PASSES=5000).",
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "solve",
        help="Sprawdza argument tablicą prawdy i szuka dowodu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje przesłanki i wniosek, buduje tablicę prawdy (werdykt: inconsistent /
valid / invalid) i szuka wyprowadzenia regułami dedukcji naturalnej
(bezpośrednio albo dowodem warunkowym dla wniosku A -> B).

Składnia formuł:  ~ (nie)  & (i)  | (lub)  -> (implikacja, prawostronnie łączna)

Przykłady:
  ded solve 'P -> Q' '~Q' -c '~P'
  ded solve --premises-file przeslanki.txt -c 'R'
  ded solve --file argument.json --no-table
  ded solve --example
        """,
    )
    add_input_arguments(p)
    p.add_argument(
        "--no-table",
        action="store_true",
        dest="no_table",
        help="Nie wyświetlaj tablicy prawdy (tylko werdykt).",
    )
    p.add_argument(
        "--no-proof",
        action="store_true",
        dest="no_proof",
        help="Nie szukaj dowodu.",
    )
    p.set_defaults(func=run)
