"""Infer semester, subject, category and unit from a document's folder path.

Expected layout below the input folder::

    <Sem folder>/<Subject>/[<Category> ...]/[<Unit folder>/...]/<file>

Folder names are free-form, so every rule is positional and deterministic:
the first semester-looking folder anchors the path, the folder right after it
is the subject, and the first unit-looking folder after the subject (at any
depth) fixes the unit. Whatever lies between subject and unit is the category.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from semcat.classify import patterns
from semcat.config import CatalogMode

UNKNOWN_SUBJECT = "Unknown"
CATEGORY_JOINER = " / "


@dataclass(frozen=True, slots=True)
class PathClassification:
    """Everything that can be guessed about one document from its path alone."""

    file: str
    semester: str
    subject: str
    category: str | None
    unit: int | None
    title: str
    year: int | None
    in_papers: bool


def split_segments(relative_path: str) -> tuple[str, ...]:
    return tuple(part for part in PurePosixPath(relative_path).parts if part not in ("", "/", "."))


def _locate_semester(folders: tuple[str, ...]) -> tuple[str, int | None]:
    for index, segment in enumerate(folders):
        key = patterns.match_semester(segment)
        if key is not None:
            return key, index

    if len(folders) >= 2:
        return patterns.fallback_semester(folders[1]), 1
    return patterns.UNKNOWN_SEMESTER, None


def _join_category(segments: tuple[str, ...]) -> str | None:
    labels = [patterns.folder_label(segment) for segment in segments]
    joined = CATEGORY_JOINER.join(label for label in labels if label)
    return joined or None


def analyze_path(relative_path: str, *, extension: str) -> PathClassification:
    """Classify a root-relative document path without applying any mode filter."""

    segments = split_segments(relative_path)
    if not segments:
        raise ValueError("Document path cannot be empty")

    filename = segments[-1]
    folders = segments[:-1]

    semester, sem_index = _locate_semester(folders)

    subject_index = sem_index + 1 if sem_index is not None else None
    if subject_index is not None and subject_index < len(folders):
        subject = patterns.folder_label(folders[subject_index]) or UNKNOWN_SUBJECT
        below_subject = folders[subject_index + 1 :]
    else:
        subject = UNKNOWN_SUBJECT
        below_subject = ()

    unit: int | None = None
    category_segments = below_subject
    for index, segment in enumerate(below_subject):
        number = patterns.match_unit(segment)
        if number is not None:
            unit = number
            category_segments = below_subject[:index]
            break

    return PathClassification(
        file="/".join(segments),
        semester=semester,
        subject=subject,
        category=_join_category(category_segments),
        unit=unit,
        title=patterns.clean_title(filename, extension),
        year=patterns.guess_year(filename),
        in_papers=bool(below_subject) and patterns.is_papers_folder(below_subject[0]),
    )


def classify_path(relative_path: str, *, mode: CatalogMode, extension: str) -> PathClassification | None:
    """Classify *relative_path* for *mode*, or return ``None`` if the mode excludes it.

    Paper catalogs only take files filed under a ``Papers`` folder directly
    below the subject; syllabus catalogs take everything else.
    """

    result = analyze_path(relative_path, extension=extension)
    if mode is CatalogMode.PAPERS:
        return result if result.in_papers else None
    if result.in_papers:
        return None
    return result
