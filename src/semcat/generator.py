"""One-shot catalog generation run over the document tree."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Any

from semcat.catalog.builder import ScannedDocument, build_paper_catalogs, build_syllabus_catalogs
from semcat.catalog.store import CatalogStore, merge_paper_entries
from semcat.classify.classifier import classify_path
from semcat.config import CatalogMode, CatalogSettings
from semcat.scanning.sidecar import read_sidecar
from semcat.scanning.walker import DiscoveredDocument, collect_documents, ensure_output_dir


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SemesterReport:
    semester: str
    path: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"semester": self.semester, "path": self.path, "count": self.count}


@dataclass(slots=True)
class CatalogRunReport:
    mode: str
    scanned: int = 0
    included: int = 0
    skipped: int = 0
    sidecar_errors: int = 0
    prior_catalog_errors: int = 0
    duration_ms: int = 0
    semesters: list[SemesterReport] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode,
            "scanned": self.scanned,
            "included": self.included,
            "skipped": self.skipped,
            "sidecar_errors": self.sidecar_errors,
            "prior_catalog_errors": self.prior_catalog_errors,
            "duration_ms": self.duration_ms,
            "semesters": [report.to_dict() for report in self.semesters],
        }


class CatalogGenerator:
    """Walks the input tree, classifies documents and rewrites the catalogs."""

    def __init__(self, settings: CatalogSettings, store: CatalogStore | None = None) -> None:
        self._settings = settings
        self._store = store or CatalogStore(settings.output_dir)

    def run(self) -> CatalogRunReport:
        started = time.perf_counter()
        settings = self._settings
        report = CatalogRunReport(mode=settings.mode.value)

        files = collect_documents(settings.input_dir, root_dir=settings.root_dir, extension=settings.extension)
        ensure_output_dir(settings.output_dir)
        report.scanned = len(files)

        documents = self._scan(files, report)
        report.included = len(documents)
        report.skipped = report.scanned - report.included

        if settings.mode is CatalogMode.SYLLABUS:
            self._write_syllabus(documents, report)
        else:
            self._write_papers(documents, report)

        report.duration_ms = int((time.perf_counter() - started) * 1000)
        return report

    def _scan(self, files: list[DiscoveredDocument], report: CatalogRunReport) -> list[ScannedDocument]:
        settings = self._settings
        documents: list[ScannedDocument] = []
        for discovered in files:
            relative_path = discovered.relative_path
            classification = classify_path(relative_path, mode=settings.mode, extension=settings.extension)
            if classification is None:
                LOGGER.debug("Skipping %s for %s catalogs", relative_path, settings.mode.value)
                continue

            sidecar = read_sidecar(discovered.path)
            if sidecar.is_error:
                report.sidecar_errors += 1
                LOGGER.warning("Ignoring unreadable sidecar %s: %s", sidecar.path, sidecar.error)
            documents.append(ScannedDocument(classification=classification, override=sidecar.override))
        return documents

    def _write_papers(self, documents: list[ScannedDocument], report: CatalogRunReport) -> None:
        catalogs = build_paper_catalogs(documents)
        semesters = set(catalogs) | self._store.existing_paper_semesters()

        for semester in sorted(semesters):
            prior = self._store.load_prior_papers(semester)
            if prior.is_error:
                report.prior_catalog_errors += 1
                LOGGER.warning("Discarding unreadable catalog %s: %s", prior.path, prior.error)

            merged = merge_paper_entries(catalogs.get(semester, []), prior.entries)
            path = self._store.paper_catalog_path(semester)
            self._store.write_catalog(path, [entry.to_dict() for entry in merged])
            LOGGER.info("Wrote %s %d entries", path, len(merged))
            report.semesters.append(SemesterReport(semester=semester, path=str(path), count=len(merged)))

    def _write_syllabus(self, documents: list[ScannedDocument], report: CatalogRunReport) -> None:
        catalogs = build_syllabus_catalogs(documents)
        semesters = set(catalogs) | self._store.existing_syllabus_semesters()

        for semester in sorted(semesters):
            subjects = catalogs.get(semester, [])
            path = self._store.syllabus_catalog_path(semester)
            self._store.write_catalog(path, [subject.to_dict() for subject in subjects])
            LOGGER.info("Wrote %s with %d subjects", path, len(subjects))
            report.semesters.append(SemesterReport(semester=semester, path=str(path), count=len(subjects)))
