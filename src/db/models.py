from __future__ import annotations

from dataclasses import dataclass
import sqlite3


@dataclass(frozen=True)
class Binder:
    id: int
    number: int
    label: str

    @staticmethod
    def from_row(row: sqlite3.Row) -> "Binder":
        return Binder(
            id=int(row["id"]),
            number=int(row["number"]),
            label=row["label"] or "",
        )

    @property
    def title(self) -> str:
        return f"Binder {self.number:02d}"


@dataclass(frozen=True)
class Song:
    id: int
    title: str
    composer: str = ""
    link: str = ""

    @staticmethod
    def from_row(row: sqlite3.Row) -> "Song":
        # composer and link are nullable columns; the rest of the app only sees strings.
        return Song(
            id=int(row["id"]),
            title=row["title"] or "",
            composer=row["composer"] or "",
            link=row["link"] or "",
        )

    @property
    def display_title(self) -> str:
        """`Title - Composer`, or just the title when no composer is set."""
        if not self.composer.strip():
            return self.title
        return f"{self.title} - {self.composer}"
