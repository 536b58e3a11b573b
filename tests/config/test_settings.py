from __future__ import annotations

from pathlib import Path

import pytest

from semcat.config import CatalogMode, CatalogSettings


def test_settings_defaults_resolve_under_root() -> None:
    settings = CatalogSettings.from_env({})

    assert settings.root_dir == Path(".")
    assert settings.input_dir == Path("pdfs")
    assert settings.output_dir == Path("data")
    assert settings.extension == ".pdf"
    assert settings.mode is CatalogMode.PAPERS


def test_settings_load_from_env() -> None:
    settings = CatalogSettings.from_env(
        {
            "SEMCAT_ROOT_DIR": "/srv/site",
            "SEMCAT_INPUT_DIR": "docs",
            "SEMCAT_OUTPUT_DIR": "/tmp/catalogs",
            "SEMCAT_EXTENSION": "PDF",
            "SEMCAT_MODE": "Syllabus",
        }
    )

    assert settings.root_dir == Path("/srv/site")
    assert settings.input_dir == Path("/srv/site/docs")
    assert settings.output_dir == Path("/tmp/catalogs")
    assert settings.extension == ".pdf"
    assert settings.mode is CatalogMode.SYLLABUS


def test_settings_reject_empty_and_unknown_values() -> None:
    with pytest.raises(ValueError, match="SEMCAT_INPUT_DIR"):
        CatalogSettings.from_env({"SEMCAT_INPUT_DIR": "  "})

    with pytest.raises(ValueError, match="SEMCAT_EXTENSION"):
        CatalogSettings.from_env({"SEMCAT_EXTENSION": "."})

    with pytest.raises(ValueError, match="SEMCAT_MODE"):
        CatalogSettings.from_env({"SEMCAT_MODE": "slides"})


def test_overrides_rebase_default_folders_on_new_root(tmp_path: Path) -> None:
    settings = CatalogSettings.from_env({}).with_overrides(root_dir=tmp_path, mode=CatalogMode.SYLLABUS)

    assert settings.root_dir == tmp_path
    assert settings.input_dir == tmp_path / "pdfs"
    assert settings.output_dir == tmp_path / "data"
    assert settings.mode is CatalogMode.SYLLABUS


def test_overrides_keep_explicit_folders(tmp_path: Path) -> None:
    settings = CatalogSettings.from_env({}).with_overrides(
        root_dir=tmp_path,
        input_dir="library",
        output_dir=tmp_path / "out",
        extension="docx",
    )

    assert settings.input_dir == tmp_path / "library"
    assert settings.output_dir == tmp_path / "out"
    assert settings.extension == ".docx"
    assert settings.mode is CatalogMode.PAPERS
