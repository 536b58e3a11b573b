"""Segment and filename patterns used to classify document paths.

Each helper handles exactly one piece of the folder naming grammar:

- semester folders: ``Sem4``, ``sem_4``, ``SEM-4``  -> ``sem_4``
- unit folders:     ``Unit_3``, ``U3``, ``unit 03`` -> ``3``
- year tokens:      ``midterm_2023.pdf``            -> ``2023``
- titles:           ``Mechanics_Notes-2021.pdf``    -> ``Mechanics Notes``
"""

from __future__ import annotations

import re

UNKNOWN_SEMESTER = "sem_unknown"
PAPERS_FOLDER = "papers"

_SEMESTER_RE = re.compile(r"^sem[\s._-]*(\d+)", re.IGNORECASE)
_UNIT_RE = re.compile(r"^(?:unit|u)[\s._-]*(\d+)", re.IGNORECASE)

# A year token must not touch other letters or digits: "exam_2023" and
# "2023-24" count, "v20231" and "abc2023" do not.
_YEAR_RE = re.compile(r"(?<![0-9A-Za-z])(?:19|20)\d{2}(?![0-9A-Za-z])")

_SEPARATOR_RE = re.compile(r"[_\-]+")
_STRAY_DOT_RE = re.compile(r"(?<!\d)\.+|\.+(?!\d)")
_WHITESPACE_RE = re.compile(r"\s+")


def match_semester(segment: str) -> str | None:
    """Return the canonical ``sem_<n>`` key if *segment* names a semester folder."""

    match = _SEMESTER_RE.match(segment.strip())
    if match is None:
        return None
    return f"sem_{match.group(1)}"


def fallback_semester(segment: str | None) -> str:
    if segment is None or not segment.strip():
        return UNKNOWN_SEMESTER
    return "sem_" + _WHITESPACE_RE.sub("_", segment.strip()).lower()


def match_unit(segment: str) -> int | None:
    """Return the unit number if *segment* names a unit folder."""

    match = _UNIT_RE.match(segment.strip())
    if match is None:
        return None
    return int(match.group(1))


def is_papers_folder(segment: str | None) -> bool:
    return segment is not None and segment.strip().lower() == PAPERS_FOLDER


def folder_label(segment: str) -> str:
    return segment.replace("_", " ").strip()


def strip_extension(filename: str, extension: str) -> str:
    if extension and filename.lower().endswith(extension.lower()):
        return filename[: len(filename) - len(extension)]
    return filename


def guess_year(filename: str) -> int | None:
    match = _YEAR_RE.search(filename)
    return int(match.group(0)) if match else None


def clean_title(filename: str, extension: str) -> str:
    """Turn a document filename into a readable title guess."""

    stem = strip_extension(filename, extension)
    text = _YEAR_RE.sub(" ", stem)
    text = _SEPARATOR_RE.sub(" ", text)
    text = _STRAY_DOT_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    return text or filename
