"""
Sitzung mit allen Entities im Speicher.

Die Sitzung besitzt die Liste der Entities. Sie wird einmal beim Start erzeugt
und an den Controller übergeben.
"""

from __future__ import annotations

from typing import Iterable, List

from .domain import Entity


class RosterSession:
    """
    Geordnete Sammlung aller Entities.
    - add: hängt eine Entity an
    - replace_all: ersetzt den kompletten Inhalt (nach dem Laden)
    - dirty: es gibt Änderungen seit dem letzten Laden/Speichern
    """

    def __init__(self, records: Iterable[Entity] = ()) -> None:
        self._records: List[Entity] = list(records)
        self.dirty: bool = False

    @property
    def records(self) -> List[Entity]:
        """Kopie der Entities in Einfüge-Reihenfolge."""
        return list(self._records)

    def add(self, entity: Entity) -> None:
        self._records.append(entity)
        self.dirty = True

    def replace_all(self, records: Iterable[Entity]) -> None:
        self._records = list(records)
        self.dirty = False

    def mark_saved(self) -> None:
        self.dirty = False

    def __len__(self) -> int:
        return len(self._records)
