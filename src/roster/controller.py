"""
Controller layer

Der RosterController steuert die App. Er verbindet Sitzung, Repository, Service und View.

Aufgaben:
- Menü anzeigen und Eingaben verarbeiten
- Studenten, Lehrende und Kurse anlegen
- Laden/Speichern über das Repository
- Übersicht über RosterService und ConsoleRosterView
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from .config import DEFAULT_DATA_FILE
from .domain import Course, Entity, FormatError, Student, Teacher, UnknownTypeError, parse_int, parse_int_list
from .persistence import RosterRepository
from .service import RosterService
from .session import RosterSession
from .view import ConsoleRosterView

logger = logging.getLogger(__name__)


class InputError(ValueError):
    """Eingabe des Nutzers kann nicht gelesen werden."""


class RosterController:
    """
    Hauptcontroller.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Repository, Service und View
    - Nachfrage bei ungespeicherten Änderungen
    """

    def __init__(
        self,
        session: RosterSession,
        repo: RosterRepository,
        service: RosterService,
        view: ConsoleRosterView,
        default_path: str = DEFAULT_DATA_FILE
    ) -> None:
        """
        Erstellt den Controller.

        - session: Entities im Speicher
        - repo: Laden/Speichern
        - service: Auflösung der Verweise
        - view: Ein-/Ausgabe
        - default_path: Datei, wenn bei der Eingabe nichts angegeben wird
        """
        self._session = session
        self._repo = repo
        self._service = service
        self._view = view
        self._default_path = default_path
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.add_student,
            "2": self.add_teacher,
            "3": self.add_course,
            "4": self.save,
            "5": self.load,
            "6": self.show_data,
        }

    def run(self) -> None:
        """Menü-Schleife bis zur Auswahl 0."""
        while True:
            self._view.render_menu()
            choice = self._view.prompt("Choice: ").strip()

            if choice == "0":
                self._exit()
                break

            action = self._actions.get(choice)
            if action is None:
                self._view.show_message("Invalid choice. Please try again.")
                continue
            action()

    def add_student(self) -> None:
        """Legt einen Studenten an."""
        self._add(lambda: Student(
            id=self._prompt_int("Student ID: "),
            name=self._view.prompt("Student name: "),
            courses=self._prompt_ids("Course IDs (comma separated): "),
        ))

    def add_teacher(self) -> None:
        """Legt einen Lehrenden an."""
        self._add(lambda: Teacher(
            id=self._prompt_int("Teacher ID: "),
            name=self._view.prompt("Teacher name: "),
            experience=self._prompt_int("Teacher experience (years): "),
            courses=self._prompt_ids("Course IDs (comma separated): "),
        ))

    def add_course(self) -> None:
        """Legt einen Kurs an."""
        self._add(lambda: Course(
            id=self._prompt_int("Course ID: "),
            name=self._view.prompt("Course name: "),
            teacher_id=self._prompt_int("Teacher ID: "),
            students=self._prompt_ids("Student IDs (comma separated): "),
        ))

    def save(self) -> None:
        """
        Speichert alle Entities.
        """
        path = self._prompt_path("File name to save to")
        try:
            self._repo.save(path, self._session.records)
        except OSError as e:
            logger.warning("Saving to %s failed: %s", path, e)
            self._view.show_message(f"ERROR while saving: {e}")
            return

        self._session.mark_saved()
        self._view.show_message("Data saved successfully.")

    def load(self) -> None:
        """
        Lädt alle Entities und ersetzt die Sitzung.
        Bei einem Fehler bleibt die Sitzung unverändert.
        """
        path = self._prompt_path("File name to load from")
        try:
            records = self._repo.load(path)
        except (OSError, FormatError, UnknownTypeError, ValueError) as e:
            logger.warning("Loading from %s failed: %s", path, e)
            self._view.show_message(f"ERROR while loading: {e}")
            return

        self._session.replace_all(records)
        self._view.show_message(f"Data loaded successfully ({len(records)} records).")

    def show_data(self) -> None:
        """Zeigt die Übersicht."""
        overview = self._service.build_overview(self._session.records)
        self._view.render(overview)

    def _add(self, build: Callable[[], Entity]) -> None:
        """
        Fragt die Felder ab und hängt die Entity an.
        Bei ungültiger Eingabe wird nichts angelegt.
        """
        try:
            entity = build()
        except InputError as e:
            self._view.show_message(f"Invalid input: {e}")
            return

        self._session.add(entity)
        self._view.show_message(f"Added {entity.kind.value} {entity.id}.")

    def _prompt_int(self, frage: str) -> int:
        raw = self._view.prompt(frage)
        try:
            return parse_int(raw)
        except FormatError as e:
            raise InputError(str(e)) from None

    def _prompt_ids(self, frage: str) -> List[int]:
        """Komma-Liste von IDs. Leere Eingabe = leere Liste."""
        raw = self._view.prompt(frage)
        try:
            return parse_int_list(raw)
        except FormatError as e:
            raise InputError(str(e)) from None

    def _prompt_path(self, frage: str) -> str:
        raw = self._view.prompt(f"{frage} (empty = {self._default_path}): ").strip()
        return raw or self._default_path

    def _exit(self) -> None:
        """
        Beendet das Programm.
        Bei Änderungen wird gefragt, ob gespeichert werden soll.
        """
        if self._session.dirty:
            antwort = self._view.prompt("There are unsaved changes! Save now? (y/n): ").strip().lower()
            if antwort in ("y", "yes", "j", "ja"):
                self.save()

        self._view.show_message("Exiting.")
