"""
ded — narzędzie CLI do sprawdzania argumentów logiki zdań.

Użycie:
  ded <komenda> [opcje]

Komendy:
  solve   Tablica prawdy, werdykt i próba dowodu.
  table   Tylko tablica prawdy i werdykt (opcjonalnie kontrprzykłady).
  prove   Tylko próba dowodu (opcjonalnie pełny przebieg silnika).
  parse   Postać kanoniczna, zmienne i drzewo formuł.

Zmienne środowiskowe (lub plik .env):
  DED_MAX_PASSES, DED_MAX_VARIABLES, DED_CONSOLE_WIDTH, DED_LOG_LEVEL
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# i znaki ramek rich były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from ded._config import get_settings
from ded.commands import parse as cmd_parse
from ded.commands import prove as cmd_prove
from ded.commands import solve as cmd_solve
from ded.commands import table as cmd_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ded",
        description="ded — poprawność argumentów i dedukcja naturalna w logice zdań.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="ded 0.1.0"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Loguj przebiegi silnika (poziom DEBUG).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_solve.add_parser(subparsers)
    cmd_table.add_parser(subparsers)
    cmd_prove.add_parser(subparsers)
    cmd_parse.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        get_settings()
    except ValueError as e:
        cmd_solve.console.print(f"[red]Błąd konfiguracji:[/red] {e}", highlight=False)
        raise SystemExit(1)
    args.func(args)


if __name__ == "__main__":
    main()
