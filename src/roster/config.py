"""
Konfiguration der Anwendung.

Werte kommen von der Kommandozeile (argparse).
Fehlt ein Wert, wird die Umgebungsvariable genutzt, danach der Standardwert.
- ROSTER_DATA_FILE: Standard-Datei für Laden/Speichern
- ROSTER_LOG_LEVEL: Log-Level (DEBUG, INFO, WARNING, ...)
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

DEFAULT_DATA_FILE = "roster.txt"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(slots=True)
class AppConfig:
    """Einstellungen für einen Programmlauf."""
    data_file: str = DEFAULT_DATA_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None


def _log_level(raw: str) -> str:
    """Prüft den Namen des Log-Levels."""
    name = raw.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise argparse.ArgumentTypeError(f"unknown log level: {raw}")
    return name


def build_parser(env: Mapping[str, str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Manage students, teachers and courses stored in a text file.",
    )
    parser.add_argument(
        "--file",
        dest="data_file",
        default=env.get("ROSTER_DATA_FILE", DEFAULT_DATA_FILE),
        help="default file for saving and loading (env: ROSTER_DATA_FILE)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=_log_level,
        default=env.get("ROSTER_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        help="logging level (env: ROSTER_LOG_LEVEL)",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="write log output to this file instead of stderr",
    )
    return parser


def parse_args(
    argv: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None
) -> AppConfig:
    """
    Liest die Konfiguration.
    argv=None bedeutet sys.argv, env=None bedeutet os.environ.
    """
    if env is None:
        env = os.environ
    ns = build_parser(env).parse_args(argv)
    return AppConfig(data_file=ns.data_file, log_level=ns.log_level, log_file=ns.log_file)
