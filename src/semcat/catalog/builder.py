"""Aggregate classified documents into per-semester catalogs."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from semcat.catalog.models import MaterialEntry, PaperEntry, SubjectCatalog, UnitGroup
from semcat.classify.classifier import PathClassification
from semcat.scanning.sidecar import SidecarOverride


@dataclass(frozen=True, slots=True)
class ScannedDocument:
    """A classified document together with its (possibly empty) sidecar override."""

    classification: PathClassification
    override: SidecarOverride = field(default_factory=SidecarOverride)


def build_paper_entry(document: ScannedDocument) -> PaperEntry:
    guess = document.classification
    side = document.override
    return PaperEntry(
        subject=side.subject or guess.subject,
        title=side.title or guess.title,
        year=side.year or guess.year,
        file=guess.file,
        description=side.description or "",
    )


def build_material_entry(document: ScannedDocument) -> MaterialEntry:
    guess = document.classification
    side = document.override
    return MaterialEntry(
        title=side.title or guess.title,
        file=guess.file,
        description=side.description or "",
    )


def paper_sort_key(entry: PaperEntry) -> tuple[int, str]:
    return (-(entry.year or 0), entry.title)


def sort_paper_entries(entries: Iterable[PaperEntry]) -> list[PaperEntry]:
    """Newest year first, then title; entries without a year sort as year 0."""

    return sorted(entries, key=paper_sort_key)


def unit_sort_key(group: UnitGroup) -> tuple[bool, str, int]:
    # uncategorized groups first, then by category name, then unit number
    return (group.category is not None, group.category or "", group.unit)


def build_paper_catalogs(documents: Iterable[ScannedDocument]) -> dict[str, list[PaperEntry]]:
    grouped: dict[str, list[PaperEntry]] = defaultdict(list)
    for document in documents:
        grouped[document.classification.semester].append(build_paper_entry(document))
    return {semester: sort_paper_entries(entries) for semester, entries in grouped.items()}


def build_syllabus_catalogs(documents: Iterable[ScannedDocument]) -> dict[str, list[SubjectCatalog]]:
    tree: dict[str, dict[str, dict[tuple[str | None, int], UnitGroup]]] = defaultdict(lambda: defaultdict(dict))

    for document in documents:
        guess = document.classification
        unit = guess.unit if guess.unit is not None else 0
        key = (guess.category, unit)
        groups = tree[guess.semester][guess.subject]
        group = groups.get(key)
        if group is None:
            group = UnitGroup(unit=unit, category=guess.category)
            groups[key] = group
        group.materials.append(build_material_entry(document))

    catalogs: dict[str, list[SubjectCatalog]] = {}
    for semester, subjects in tree.items():
        subject_list: list[SubjectCatalog] = []
        for subject in sorted(subjects):
            units = sorted(subjects[subject].values(), key=unit_sort_key)
            for group in units:
                group.materials.sort(key=lambda material: material.title)
            subject_list.append(SubjectCatalog(subject=subject, units=units))
        catalogs[semester] = subject_list
    return catalogs
