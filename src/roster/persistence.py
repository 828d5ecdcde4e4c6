"""
Persistence layer (Textdatei)

Speicherung als Textdatei mit einer Zeile pro Entity:
    <typ> <kodierte felder>
z.B. "student id:5|name:Ann|courses:10"

- RosterRepository: Schnittstelle (load / save)
- FileStorage: Zeilenweises Lesen/Schreiben
- LineSerializer: Mapping zwischen Entity und Zeile
- TextRosterRepository: Datei-Repository

Fehler werden nicht abgefangen, sondern an den Aufrufer weitergegeben.
Das Laden ist alles-oder-nichts: die erste fehlerhafte Zeile bricht ab.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Protocol, Sequence

from .domain import Entity, FormatError, UnknownTypeError
from .factory import create_entity

logger = logging.getLogger(__name__)

TAG_SEPARATOR = " "


class RosterRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    """
    def load(self, path: str) -> List[Entity]:
        """Lädt alle Entities aus einer Datei."""
        ...

    def save(self, path: str, records: Sequence[Entity]) -> None:
        """Speichert alle Entities in eine Datei."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim Laden und Speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    - Zeilenende beim Schreiben: Plattform-Standard.
    """

    def lese_zeilen(self, pfad: str) -> Iterator[str]:
        """
        Liest eine Datei Zeile für Zeile (ohne Zeilenende).
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei sonstigen Leseproblemen
        """
        with open(pfad, "r", encoding="utf-8") as f:
            for line in f:
                yield line.rstrip("\r\n")

    def schreibe_zeilen(self, pfad: str, zeilen: Iterable[str]) -> None:
        """
        Schreibt Zeilen in eine Datei. Eine vorhandene Datei wird überschrieben.
        """
        with open(pfad, "w", encoding="utf-8") as f:
            for zeile in zeilen:
                f.write(zeile + "\n")


class LineSerializer:
    """
    Wandelt Entity <-> Zeile.
    - Typ-Kennung ist der Wert von entity.kind.
    - Trennung von Kennung und Feldern am ersten Leerzeichen.
    """

    def to_line(self, entity: Entity) -> str:
        """Macht aus einer Entity eine Zeile."""
        return f"{entity.kind.value}{TAG_SEPARATOR}{entity.encode()}"

    def from_line(self, line: str) -> Entity:
        """
        Baut eine Entity aus einer Zeile.
        Zeile ohne Leerzeichen -> FormatError.
        """
        tag, sep, rest = line.partition(TAG_SEPARATOR)
        if not sep:
            raise FormatError(f"line without type separator: {line!r}")
        return create_entity(tag, rest)


class TextRosterRepository:
    """
    Repository für Textdateien.
    - FileStorage für Datei-Zugriff
    - LineSerializer für Mapping
    """

    def __init__(
        self,
        storage: Optional[FileStorage] = None,
        serializer: Optional[LineSerializer] = None
    ) -> None:
        self._storage = storage or FileStorage()
        self._serializer = serializer or LineSerializer()

    def load(self, path: str) -> List[Entity]:
        """
        Lädt die Datei und baut die Entities in Datei-Reihenfolge.
        Bei einer fehlerhaften Zeile wird abgebrochen, die Zeilennummer steht in der Meldung.
        Kein gültiges UTF-8 -> FormatError.
        """
        records: List[Entity] = []
        try:
            for nummer, line in enumerate(self._storage.lese_zeilen(path), 1):
                try:
                    records.append(self._serializer.from_line(line))
                except (FormatError, UnknownTypeError) as e:
                    raise type(e)(f"{path}, line {nummer}: {e}") from e
        except UnicodeDecodeError as e:
            # Blockweise dekodiert, keine Zeilennummer.
            raise FormatError(f"{path}: not valid UTF-8 text ({e.reason})") from e

        logger.debug("Loaded %d records from %s", len(records), path)
        return records

    def save(self, path: str, records: Sequence[Entity]) -> None:
        """
        Serialisiert und schreibt in die Datei.
        """
        zeilen = [self._serializer.to_line(r) for r in records]
        self._storage.schreibe_zeilen(path, zeilen)
        logger.debug("Saved %d records to %s", len(zeilen), path)


_default_repository = TextRosterRepository()


def save(path: str, records: Sequence[Entity]) -> None:
    """Speichert die Entities mit dem Standard-Repository."""
    _default_repository.save(path, records)


def load(path: str) -> List[Entity]:
    """Lädt die Entities mit dem Standard-Repository."""
    return _default_repository.load(path)
