"""
deduction/loader.py — wczytywanie argumentów z tekstu i z plików JSON.

Publiczne API:
  read_premises(text)          -> list[str]
  load_argument_json(path)     -> (premises, conclusion)
  EXAMPLE_PREMISES, EXAMPLE_CONCLUSION   przykładowy argument
"""

from __future__ import annotations

import json
import pathlib

EXAMPLE_PREMISES: tuple[str, ...] = ("(P | Q) -> R", "P", "~R")
EXAMPLE_CONCLUSION = "~Q"


def read_premises(text: str) -> list[str]:
    """Przesłanki po jednej w linii; linie przycięte, puste pominięte."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_argument_json(path: pathlib.Path) -> tuple[list[str], str]:
    """
    Wczytuje argument z pliku JSON.

    Oczekiwany format::

        {
            "premises":   ["P -> Q", "~Q"],
            "conclusion": "~P"
        }

    Returns:
        (premises, conclusion)

    Raises:
        ValueError gdy pliku nie da się odczytać, nie jest poprawnym JSON-em
                   albo brakuje pól.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Nie można odczytać {path.name}: {e}") from e
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Nieprawidłowy JSON w {path.name}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: oczekiwano obiektu JSON")

    premises = raw.get("premises", [])
    if not isinstance(premises, list) or not all(isinstance(p, str) for p in premises):
        raise ValueError(f"{path.name}: pole 'premises' musi być listą napisów")

    conclusion = raw.get("conclusion")
    if not isinstance(conclusion, str) or not conclusion.strip():
        raise ValueError(f"{path.name}: brak pola 'conclusion'")

    return premises, conclusion
