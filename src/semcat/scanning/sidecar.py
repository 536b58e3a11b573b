"""Optional per-document metadata overrides stored next to each document.

A sidecar for ``Sem4/Physics/Unit_1/Notes.pdf`` lives at
``Sem4/Physics/Unit_1/Notes.pdf.json`` and may carry any of ``title``,
``description``, ``year`` and ``subject``. Sidecars are hand-edited, so a
broken one never stops a run: it is reported and treated as absent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Any, Literal

SIDECAR_SUFFIX = ".json"

SidecarStatus = Literal["ok", "absent", "parse_error"]


@dataclass(frozen=True, slots=True)
class SidecarOverride:
    """Field overrides supplied by a sidecar; ``None`` means not supplied."""

    title: str | None = None
    description: str | None = None
    year: int | None = None
    subject: str | None = None

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "SidecarOverride":
        return cls(
            title=_text_field(data.get("title")),
            description=_text_field(data.get("description")),
            year=_year_field(data.get("year")),
            subject=_text_field(data.get("subject")),
        )


@dataclass(frozen=True, slots=True)
class SidecarResult:
    status: SidecarStatus
    path: Path
    override: SidecarOverride = field(default_factory=SidecarOverride)
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == "parse_error"


def _text_field(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _year_field(value: Any) -> int | None:
    # bool is an int subclass; true/false are not years
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value or None
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip()) or None
    return None


def sidecar_path_for(document_path: str | Path) -> Path:
    path = Path(document_path)
    return path.with_name(path.name + SIDECAR_SUFFIX)


def read_sidecar(document_path: str | Path) -> SidecarResult:
    """Load the sidecar for *document_path*, never raising on bad content."""

    path = sidecar_path_for(document_path)
    if not path.is_file():
        return SidecarResult(status="absent", path=path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        return SidecarResult(status="parse_error", path=path, error=str(exc))

    if not isinstance(data, dict):
        return SidecarResult(status="parse_error", path=path, error="sidecar is not a JSON object")

    return SidecarResult(status="ok", path=path, override=SidecarOverride.from_mapping(data))
