"""
Entry point für die Roster-Anwendung.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .config import AppConfig, parse_args
from .controller import RosterController
from .persistence import TextRosterRepository
from .service import RosterService
from .session import RosterSession
from .view import ConsoleRosterView

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    """Logging einrichten. Ohne log_file geht die Ausgabe nach stderr."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=config.log_file,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Konfiguration lesen
    - Logging einrichten
    - Komponenten erstellen
    - Controller starten
    """
    config = parse_args(argv)
    configure_logging(config)

    try:
        # Bausteine der App erstellen.
        session = RosterSession()
        repo = TextRosterRepository()
        service = RosterService()
        view = ConsoleRosterView()
        controller = RosterController(session, repo, service, view, default_path=config.data_file)

        # App starten.
        controller.run()

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Ende der Eingabe.
        print("\nApplication terminated.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unexpected error")
        print(f"\nERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
