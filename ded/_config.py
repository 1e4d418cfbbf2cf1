"""Konfiguracja CLI — zmienne środowiskowe, opcjonalnie plik .env w katalogu projektu."""

from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

ROOT = pathlib.Path(__file__).resolve().parent.parent

load_dotenv(ROOT / ".env", override=False)

DEFAULT_CONSOLE_WIDTH = 160


@dataclass(frozen=True, slots=True)
class Settings:
    max_passes:    int
    max_variables: int
    console_width: int
    log_level:     str


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} musi być liczbą całkowitą, jest {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} nie może być ujemne, jest {value}")
    return value


def get_settings() -> Settings:
    """
    Odczytuje ustawienia ze środowiska.

    Raises:
        ValueError gdy któraś zmienna DED_* ma nieprawidłową wartość.
    """
    log_level = os.getenv("DED_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ValueError(f"DED_LOG_LEVEL: nieznany poziom logowania {log_level!r}")
    return Settings(
        max_passes    = _env_int("DED_MAX_PASSES",    "5000"),
        max_variables = _env_int("DED_MAX_VARIABLES", "16"),
        console_width = _env_int("DED_CONSOLE_WIDTH", str(DEFAULT_CONSOLE_WIDTH)),
        log_level     = log_level,
    )


def get_console() -> Console:
    # Konsola powstaje przy imporcie komend; błąd konfiguracji zgłasza main().
    try:
        width = get_settings().console_width
    except ValueError:
        width = DEFAULT_CONSOLE_WIDTH
    return Console(width=width)


def configure_logging(verbose: bool = False) -> None:
    """Podpina RichHandler pod logger 'deduction' (DEBUG przy --verbose)."""
    level = logging.DEBUG if verbose else get_settings().log_level
    logger = logging.getLogger("deduction")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, markup=False))
