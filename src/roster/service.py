"""
Application/Use-Case layer

Der RosterService gruppiert die Entities nach Art und löst die ID-Verweise auf.
Er erzeugt eine RosterOverview als ViewModel für die ConsoleRosterView.
Die Entities selbst werden nicht verändert.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from .domain import Course, Entity, Student, Teacher


@dataclass(slots=True)
class StudentRow:
    """Ein Student mit aufgelösten Kursnamen."""
    id: int
    name: str
    course_names: List[str] = field(default_factory=list)


@dataclass(slots=True)
class TeacherRow:
    """Ein Lehrender mit aufgelösten Kursnamen."""
    id: int
    name: str
    experience: int
    course_names: List[str] = field(default_factory=list)


@dataclass(slots=True)
class CourseRow:
    """Ein Kurs mit aufgelöstem Lehrenden und Studentennamen."""
    id: int
    name: str
    teacher_name: str
    student_names: List[str] = field(default_factory=list)


@dataclass(slots=True)
class RosterOverview:
    """
    Datenobjekt für die View.
    Reihenfolge der Abschnitte ist fest: Studenten, Lehrende, Kurse.
    """
    students: List[StudentRow] = field(default_factory=list)
    teachers: List[TeacherRow] = field(default_factory=list)
    courses: List[CourseRow] = field(default_factory=list)


def placeholder(kind: str, entity_id: int) -> str:
    """Anzeigetext für eine ID ohne passende Entity."""
    return f"<unknown {kind} id {entity_id}>"


class RosterService:
    """
    Service für die Übersicht.
    Er baut pro Art eine Zuordnung ID -> Entity und löst damit die Verweise auf.
    """

    def build_overview(self, records: Sequence[Entity]) -> RosterOverview:
        """
        Baut die komplette RosterOverview.
        - Entities nach Art einsortieren
        - Verweise pro Abschnitt auflösen
        """
        students, teachers, courses = self._bucket(records)

        overview = RosterOverview()

        for s in students.values():
            overview.students.append(StudentRow(
                id=s.id,
                name=s.name,
                course_names=self._resolve_courses(s.courses, courses),
            ))

        for t in teachers.values():
            overview.teachers.append(TeacherRow(
                id=t.id,
                name=t.name,
                experience=t.experience,
                course_names=self._resolve_courses(t.courses, courses),
            ))

        for c in courses.values():
            teacher = teachers.get(c.teacher_id)
            overview.courses.append(CourseRow(
                id=c.id,
                name=c.name,
                teacher_name=teacher.name if teacher is not None else placeholder("teacher", c.teacher_id),
                student_names=[
                    students[sid].name if sid in students else placeholder("student", sid)
                    for sid in c.students
                ],
            ))

        return overview

    def _bucket(
        self, records: Iterable[Entity]
    ) -> Tuple[Dict[int, Student], Dict[int, Teacher], Dict[int, Course]]:
        """
        Sortiert die Entities nach Art.
        Bei doppelter ID gewinnt die spätere Entity, die Position bleibt die der ersten.
        """
        students: Dict[int, Student] = {}
        teachers: Dict[int, Teacher] = {}
        courses: Dict[int, Course] = {}

        for r in records:
            if isinstance(r, Student):
                students[r.id] = r
            elif isinstance(r, Teacher):
                teachers[r.id] = r
            elif isinstance(r, Course):
                courses[r.id] = r

        return students, teachers, courses

    def _resolve_courses(self, course_ids: List[int], courses: Dict[int, Course]) -> List[str]:
        """Kurs-IDs -> Kursnamen, unbekannte IDs als Platzhalter."""
        return [
            courses[cid].name if cid in courses else placeholder("course", cid)
            for cid in course_ids
        ]
