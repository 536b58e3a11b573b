"""Read, merge and write the per-semester catalog files."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import json
import os
import re
from pathlib import Path
import tempfile
from typing import Any, Iterable, Literal

from semcat.catalog.builder import sort_paper_entries
from semcat.catalog.models import PaperEntry

SYLLABUS_PREFIX = "syllabus_"
SEMESTER_PREFIX = "sem_"
CATALOG_SUFFIX = ".json"

# Only numbered semesters and the unknown sentinel are cleared when no longer
# scanned; other sem_*.json files in the output folder are left alone.
_STALE_SEMESTER_RE = re.compile(rf"{SEMESTER_PREFIX}(?:\d+|unknown)")

PriorStatus = Literal["ok", "absent", "parse_error"]


@dataclass(slots=True)
class PriorCatalogResult:
    """Previously written paper catalog for one semester."""

    status: PriorStatus
    path: Path
    entries: list[PaperEntry] = field(default_factory=list)
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == "parse_error"


def merge_paper_entries(fresh: Iterable[PaperEntry], prior: Iterable[PaperEntry]) -> list[PaperEntry]:
    """Keep hand edits from *prior* on top of freshly scanned entries.

    Entries are matched by ``file``. A prior ``title``, ``description``,
    ``year`` or ``subject`` wins whenever it is non-empty; entries that exist
    only in *prior* are dropped because their file is gone.
    """

    prior_by_file = {entry.file: entry for entry in prior}
    merged: list[PaperEntry] = []
    for entry in fresh:
        previous = prior_by_file.get(entry.file)
        if previous is None:
            merged.append(entry)
            continue
        merged.append(
            replace(
                entry,
                title=previous.title or entry.title,
                description=previous.description or entry.description,
                year=previous.year or entry.year,
                subject=previous.subject or entry.subject,
            )
        )
    return sort_paper_entries(merged)


def dump_catalog(payload: list[dict[str, Any]]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


class CatalogStore:
    """File layout of the catalog output directory."""

    def __init__(self, output_dir: str | Path) -> None:
        self._output_dir = Path(output_dir)

    def paper_catalog_path(self, semester: str) -> Path:
        return self._output_dir / f"{semester}{CATALOG_SUFFIX}"

    def syllabus_catalog_path(self, semester: str) -> Path:
        return self._output_dir / f"{SYLLABUS_PREFIX}{semester}{CATALOG_SUFFIX}"

    def existing_paper_semesters(self) -> set[str]:
        return {
            path.name[: -len(CATALOG_SUFFIX)]
            for path in self._catalog_files()
            if _STALE_SEMESTER_RE.fullmatch(path.name[: -len(CATALOG_SUFFIX)])
        }

    def existing_syllabus_semesters(self) -> set[str]:
        return {
            path.name[len(SYLLABUS_PREFIX) : -len(CATALOG_SUFFIX)]
            for path in self._catalog_files()
            if path.name.startswith(SYLLABUS_PREFIX)
            and _STALE_SEMESTER_RE.fullmatch(path.name[len(SYLLABUS_PREFIX) : -len(CATALOG_SUFFIX)])
        }

    def _catalog_files(self) -> list[Path]:
        if not self._output_dir.is_dir():
            return []
        return [path for path in self._output_dir.glob(f"*{CATALOG_SUFFIX}") if path.is_file()]

    def load_prior_papers(self, semester: str) -> PriorCatalogResult:
        """Load the last written paper catalog, degrading to empty on any problem."""

        path = self.paper_catalog_path(semester)
        if not path.is_file():
            return PriorCatalogResult(status="absent", path=path)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            return PriorCatalogResult(status="parse_error", path=path, error=str(exc))

        if not isinstance(data, list):
            return PriorCatalogResult(status="parse_error", path=path, error="catalog is not a JSON array")

        entries: list[PaperEntry] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            entry = PaperEntry.from_dict(item)
            if entry is not None:
                entries.append(entry)
        return PriorCatalogResult(status="ok", path=path, entries=entries)

    def write_catalog(self, path: Path, payload: list[dict[str, Any]]) -> None:
        """Replace *path* with *payload* in one step so readers never see a partial file."""

        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(dump_catalog(payload))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
