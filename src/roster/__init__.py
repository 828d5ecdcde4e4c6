"""
roster package

Dieses Paket verwaltet Studenten, Lehrende und Kurse im Speicher
und speichert sie zeilenweise in einer Textdatei.

Schichtenarchitektur:
- domain.py: Entities, Textformat, Fehlerklassen
- factory.py: Typ-Kennung -> Entity
- persistence.py: Textdatei-Persistierung
- service.py: Gruppierung und Auflösung der ID-Verweise
- view.py: Text-Ausgabe
- session.py: Entities im Speicher
- controller.py: Menü-Orchestrierung
- config.py: Kommandozeile und Umgebungsvariablen
- main.py: Einstiegspunkt
"""

from .domain import Course, Entity, EntityKind, FormatError, Student, Teacher, UnknownTypeError
from .factory import create_entity
from .persistence import load, save
from .view import render

__all__ = [
    "Course",
    "Entity",
    "EntityKind",
    "FormatError",
    "Student",
    "Teacher",
    "UnknownTypeError",
    "create_entity",
    "load",
    "render",
    "save",
]
