"""Runtime configuration for catalog generation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import os
from pathlib import Path
from typing import Mapping


DEFAULT_ROOT_DIR = "."
DEFAULT_INPUT_DIR = "pdfs"
DEFAULT_OUTPUT_DIR = "data"
DEFAULT_EXTENSION = ".pdf"


class CatalogMode(str, Enum):
    PAPERS = "papers"
    SYLLABUS = "syllabus"


def _normalize_extension(raw_value: str) -> str:
    value = raw_value.strip().lower()
    if not value or value == ".":
        raise ValueError("SEMCAT_EXTENSION cannot be empty")
    return value if value.startswith(".") else f".{value}"


def _parse_mode(raw_value: str) -> CatalogMode:
    value = raw_value.strip().lower()
    try:
        return CatalogMode(value)
    except ValueError:
        allowed = ", ".join(mode.value for mode in CatalogMode)
        raise ValueError(f"SEMCAT_MODE must be one of: {allowed}") from None


def _resolve_under(root_dir: Path, raw_value: str) -> Path:
    path = Path(raw_value)
    return path if path.is_absolute() else root_dir / path


@dataclass(frozen=True, slots=True)
class CatalogSettings:
    """Validated settings for one generator run."""

    root_dir: Path
    input_dir: Path
    output_dir: Path
    extension: str = DEFAULT_EXTENSION
    mode: CatalogMode = CatalogMode.PAPERS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CatalogSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        root_raw = source.get("SEMCAT_ROOT_DIR", DEFAULT_ROOT_DIR).strip()
        input_raw = source.get("SEMCAT_INPUT_DIR", DEFAULT_INPUT_DIR).strip()
        output_raw = source.get("SEMCAT_OUTPUT_DIR", DEFAULT_OUTPUT_DIR).strip()
        extension_raw = source.get("SEMCAT_EXTENSION", DEFAULT_EXTENSION)
        mode_raw = source.get("SEMCAT_MODE", CatalogMode.PAPERS.value)

        if not root_raw:
            raise ValueError("SEMCAT_ROOT_DIR cannot be empty")
        if not input_raw:
            raise ValueError("SEMCAT_INPUT_DIR cannot be empty")
        if not output_raw:
            raise ValueError("SEMCAT_OUTPUT_DIR cannot be empty")

        root_dir = Path(root_raw)
        return cls(
            root_dir=root_dir,
            input_dir=_resolve_under(root_dir, input_raw),
            output_dir=_resolve_under(root_dir, output_raw),
            extension=_normalize_extension(extension_raw),
            mode=_parse_mode(mode_raw),
        )

    def with_overrides(
        self,
        *,
        root_dir: str | Path | None = None,
        input_dir: str | Path | None = None,
        output_dir: str | Path | None = None,
        extension: str | None = None,
        mode: CatalogMode | None = None,
    ) -> "CatalogSettings":
        """Return a copy with command-line values applied on top of the environment."""

        new_root = Path(root_dir) if root_dir is not None else self.root_dir
        changes: dict[str, object] = {"root_dir": new_root}

        if input_dir is not None:
            changes["input_dir"] = _resolve_under(new_root, str(input_dir))
        elif root_dir is not None:
            changes["input_dir"] = _rebase(self.input_dir, self.root_dir, new_root)

        if output_dir is not None:
            changes["output_dir"] = _resolve_under(new_root, str(output_dir))
        elif root_dir is not None:
            changes["output_dir"] = _rebase(self.output_dir, self.root_dir, new_root)

        if extension is not None:
            changes["extension"] = _normalize_extension(extension)
        if mode is not None:
            changes["mode"] = mode

        return replace(self, **changes)


def _rebase(path: Path, old_root: Path, new_root: Path) -> Path:
    try:
        return new_root / path.relative_to(old_root)
    except ValueError:
        return path
