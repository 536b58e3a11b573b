"""Catalog records written to the per-semester JSON files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SYLLABUS_FALLBACK_TITLE = "Syllabus / Resources"


@dataclass(slots=True)
class MaterialEntry:
    """One document inside a syllabus unit group."""

    title: str
    file: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "file": self.file, "description": self.description}


@dataclass(slots=True)
class PaperEntry:
    """One document in a flat exam-paper catalog; identity is ``file``."""

    subject: str
    title: str
    year: int | None
    file: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject": self.subject,
            "title": self.title,
            "year": self.year,
            "file": self.file,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaperEntry | None":
        """Build an entry from a previously written record, or ``None`` if it has no file."""

        file_value = data.get("file")
        if file_value is None or not str(file_value).strip():
            return None

        year = data.get("year")
        if isinstance(year, bool) or not isinstance(year, int):
            year = None

        return cls(
            subject=_as_text(data.get("subject")),
            title=_as_text(data.get("title")),
            year=year,
            file=str(file_value),
            description=_as_text(data.get("description")),
        )


@dataclass(slots=True)
class UnitGroup:
    unit: int
    category: str | None
    materials: list[MaterialEntry] = field(default_factory=list)

    @property
    def title(self) -> str:
        if self.unit == 0:
            return self.category or SYLLABUS_FALLBACK_TITLE
        if self.category:
            return f"{self.category}: Unit {self.unit}"
        return f"Unit {self.unit}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "unit": self.unit,
            "category": self.category,
            "title": self.title,
            "materials": [material.to_dict() for material in self.materials],
        }


@dataclass(slots=True)
class SubjectCatalog:
    subject: str
    units: list[UnitGroup] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"subject": self.subject, "units": [unit.to_dict() for unit in self.units]}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
