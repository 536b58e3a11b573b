"""Recursive discovery of document files under the input tree."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path, PurePosixPath


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CatalogError(Exception):
    """Base error for fatal catalog generation failures."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


class RootNotFound(CatalogError):
    """Raised when the document tree to scan does not exist."""


class InputOutsideRoot(CatalogError):
    """Raised when the document tree does not live below the site root."""


@dataclass(frozen=True, slots=True)
class DiscoveredDocument:
    path: Path
    relative_path: str


def _has_extension(path: Path, extension: str) -> bool:
    return path.name.lower().endswith(extension.lower())


def to_relative_posix(path: Path, root_dir: Path) -> str:
    """Express *path* relative to *root_dir* with forward slashes.

    Links are not followed, so a symlinked document keeps the location it has
    inside the tree. Raises ``ValueError`` when *path* is not below *root_dir*.
    """

    relative = Path(os.path.abspath(path)).relative_to(os.path.abspath(root_dir))
    return str(PurePosixPath(*relative.parts))


def collect_documents(input_dir: str | Path, *, root_dir: str | Path, extension: str) -> list[DiscoveredDocument]:
    """Return every document below *input_dir*, ordered by its root-relative path."""

    target = Path(input_dir)
    if not target.is_dir():
        raise RootNotFound(target, "Document folder not found")

    root = Path(root_dir)
    try:
        to_relative_posix(target, root)
    except ValueError:
        raise InputOutsideRoot(target, f"Document folder is not inside root {root}") from None

    documents = sorted(
        (
            DiscoveredDocument(path=path, relative_path=to_relative_posix(path, root))
            for path in target.rglob("*")
            if path.is_file() and _has_extension(path, extension)
        ),
        key=lambda document: document.relative_path,
    )
    LOGGER.debug("Found %d %s files under %s", len(documents), extension, target)
    return documents


def ensure_output_dir(output_dir: str | Path) -> Path:
    path = Path(output_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path
