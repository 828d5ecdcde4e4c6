"""
Factory für Entities

Ordnet die Typ-Kennung aus der Datei der passenden Entity-Klasse zu.
Wird nur beim Laden genutzt.
"""

from __future__ import annotations

from typing import Dict, Type

from .domain import Course, Entity, EntityKind, Student, Teacher, UnknownTypeError


_ENTITY_TYPES: Dict[str, Type[Entity]] = {
    EntityKind.student.value: Student,
    EntityKind.teacher.value: Teacher,
    EntityKind.course.value: Course,
}


def create_entity(type_tag: str, encoded_data: str) -> Entity:
    """
    Erstellt eine Entity aus Typ-Kennung und kodiertem Text.
    - Kennung ist case-sensitive (student, teacher, course).
    - Unbekannte Kennung -> UnknownTypeError, es wird nichts erzeugt.
    - FormatError aus decode wird durchgereicht.
    """
    entity_cls = _ENTITY_TYPES.get(type_tag)
    if entity_cls is None:
        raise UnknownTypeError(f"unknown type: {type_tag!r}")
    return entity_cls.decode(encoded_data)
