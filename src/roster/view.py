"""
UI layer für die Console

Diese View zeigt die Übersicht in der Konsole.
- Text formatieren und ausgeben
- Eingaben und Menü anzeigen
"""

from __future__ import annotations

from typing import List, Sequence

from .domain import Entity
from .service import RosterOverview, RosterService

MENU_ENTRIES = [
    ("1", "Add student"),
    ("2", "Add teacher"),
    ("3", "Add course"),
    ("4", "Save data to file"),
    ("5", "Load data from file"),
    ("6", "Show all data"),
    ("0", "Exit"),
]


def _join(names: List[str]) -> str:
    return ", ".join(names)


def format_overview(overview: RosterOverview) -> str:
    """
    Baut die Übersicht als Text.
    Drei Abschnitte, getrennt durch eine Leerzeile.
    """
    lines: List[str] = ["Students:"]
    for s in overview.students:
        lines.append(f"ID: {s.id}, Name: {s.name}, Courses: {_join(s.course_names)}")

    lines.append("")
    lines.append("Teachers:")
    for t in overview.teachers:
        lines.append(
            f"ID: {t.id}, Name: {t.name}, Experience: {t.experience} years, "
            f"Courses: {_join(t.course_names)}"
        )

    lines.append("")
    lines.append("Courses:")
    for c in overview.courses:
        lines.append(
            f"ID: {c.id}, Name: {c.name}, Teacher: {c.teacher_name}, "
            f"Students: {_join(c.student_names)}"
        )

    return "\n".join(lines)


def render(records: Sequence[Entity]) -> str:
    """Gruppiert, löst auf und formatiert in einem Schritt."""
    return format_overview(RosterService().build_overview(records))


class ConsoleRosterView:
    """
    View für die Konsole.
    """

    def render(self, overview: RosterOverview) -> None:
        """
        Zeigt die komplette Übersicht.
        Es wird ein String gebaut und dann ausgegeben.
        """
        print(format_overview(overview))

    def render_menu(self) -> None:
        """Zeigt das Hauptmenü."""
        print()
        print("Menu:")
        for key, text in MENU_ENTRIES:
            print(f"{key}. {text}")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)
