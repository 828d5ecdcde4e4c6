"""
Domain beinhaltet die Entities + Fehlerklassen

Dieses Modul enthält nur das Datenmodell und das Textformat einer Entity.
Es enthält keine UI- oder Datei-Logik.

- Entities sind Dataclasses.
- Jede Entity kennt ihre Art (kind) und kann sich selbst kodieren/dekodieren.
- Verweise auf andere Entities laufen nur über die ID (int).
- Fehlende Ziele einer ID sind erlaubt. Sie werden erst bei der Anzeige aufgelöst.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Union


class FormatError(ValueError):
    """Kodierter Text ist fehlerhaft (Anzahl Felder, Trennzeichen, Zahl)."""


class UnknownTypeError(ValueError):
    """Typ-Kennung ist weder student, teacher noch course."""


class EntityKind(Enum):
    """Die drei Arten von Entities. Der Wert ist die Kennung in der Datei."""
    student = "student"
    teacher = "teacher"
    course = "course"


FIELD_SEPARATOR = "|"
KEY_SEPARATOR = ":"
LIST_SEPARATOR = ","

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _split_fields(data: str, expected: int) -> List[str]:
    """
    Zerlegt den kodierten Text in die Werte der Felder.
    - Trennung an '|'
    - Pro Feld: Trennung am ersten ':', der Schlüssel wird verworfen.
    """
    tokens = data.split(FIELD_SEPARATOR)
    if len(tokens) != expected:
        raise FormatError(
            f"expected {expected} fields, found {len(tokens)}: {data!r}"
        )

    values = []
    for token in tokens:
        key, sep, value = token.partition(KEY_SEPARATOR)
        if not sep:
            raise FormatError(f"field without '{KEY_SEPARATOR}': {token!r}")
        values.append(value)
    return values


def parse_int(raw: str) -> int:
    """
    Liest eine ganze Zahl (Basis 10).
    Nur ASCII-Ziffern mit optionalem Vorzeichen, kein '_'.
    """
    text = raw.strip()
    if not _INT_PATTERN.fullmatch(text):
        raise FormatError(f"not a whole number: {raw!r}")
    return int(text, 10)


def parse_int_list(raw: str) -> List[int]:
    """
    Liest eine Komma-Liste von IDs.
    Ein leerer Text ergibt eine leere Liste (kein Fehler).
    """
    if raw.strip() == "":
        return []
    return [parse_int(part) for part in raw.split(LIST_SEPARATOR)]


def _join_ints(values: List[int]) -> str:
    return LIST_SEPARATOR.join(str(v) for v in values)


@dataclass(slots=True)
class Student:
    """
    Ein Student.
    courses enthält Kurs-IDs, Duplikate und unbekannte IDs sind erlaubt.
    """
    kind: ClassVar[EntityKind] = EntityKind.student

    id: int
    name: str
    courses: List[int] = field(default_factory=list)

    def encode(self) -> str:
        """Kodiert als id:..|name:..|courses:.."""
        return f"id:{self.id}|name:{self.name}|courses:{_join_ints(self.courses)}"

    @classmethod
    def decode(cls, data: str) -> Student:
        """Baut einen Studenten aus dem kodierten Text."""
        id_raw, name, courses_raw = _split_fields(data, 3)
        return cls(
            id=parse_int(id_raw),
            name=name,
            courses=parse_int_list(courses_raw),
        )


@dataclass(slots=True)
class Teacher:
    """
    Ein Lehrender.
    experience sind Jahre Berufserfahrung. Der Wert wird nicht geprüft.
    """
    kind: ClassVar[EntityKind] = EntityKind.teacher

    id: int
    name: str
    experience: int = 0
    courses: List[int] = field(default_factory=list)

    def encode(self) -> str:
        """Kodiert als id:..|name:..|experience:..|courses:.."""
        return (
            f"id:{self.id}|name:{self.name}|experience:{self.experience}"
            f"|courses:{_join_ints(self.courses)}"
        )

    @classmethod
    def decode(cls, data: str) -> Teacher:
        """Baut einen Lehrenden aus dem kodierten Text."""
        id_raw, name, experience_raw, courses_raw = _split_fields(data, 4)
        return cls(
            id=parse_int(id_raw),
            name=name,
            experience=parse_int(experience_raw),
            courses=parse_int_list(courses_raw),
        )


@dataclass(slots=True)
class Course:
    """
    Ein Kurs mit genau einem Lehrenden (teacher_id) und einer Liste von Studenten-IDs.
    """
    kind: ClassVar[EntityKind] = EntityKind.course

    id: int
    name: str
    teacher_id: int
    students: List[int] = field(default_factory=list)

    def encode(self) -> str:
        """Kodiert als id:..|name:..|teacher_id:..|students:.."""
        return (
            f"id:{self.id}|name:{self.name}|teacher_id:{self.teacher_id}"
            f"|students:{_join_ints(self.students)}"
        )

    @classmethod
    def decode(cls, data: str) -> Course:
        """Baut einen Kurs aus dem kodierten Text."""
        id_raw, name, teacher_raw, students_raw = _split_fields(data, 4)
        return cls(
            id=parse_int(id_raw),
            name=name,
            teacher_id=parse_int(teacher_raw),
            students=parse_int_list(students_raw),
        )


Entity = Union[Student, Teacher, Course]
