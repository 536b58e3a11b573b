from __future__ import annotations

import json
from pathlib import Path

from semcat.catalog.models import PaperEntry
from semcat.catalog.store import CatalogStore, merge_paper_entries


def _entry(file: str, *, title: str = "t", year: int | None = None, subject: str = "S", description: str = "") -> PaperEntry:
    return PaperEntry(subject=subject, title=title, year=year, file=file, description=description)


def test_catalog_paths() -> None:
    store = CatalogStore(Path("data"))

    assert store.paper_catalog_path("sem_4") == Path("data/sem_4.json")
    assert store.syllabus_catalog_path("sem_4") == Path("data/syllabus_sem_4.json")


def test_merge_keeps_truthy_prior_fields_by_file() -> None:
    fresh = [
        _entry("a.pdf", title="midterm", year=2023, subject="Chemistry"),
        _entry("b.pdf", title="final", year=None, subject="Chemistry"),
    ]
    prior = [
        _entry("a.pdf", title="Midterm (edited)", year=None, subject="", description="Answer key"),
        _entry("b.pdf", title="", year=2019, subject="Organic"),
        _entry("gone.pdf", title="Deleted paper", year=2030),
    ]

    merged = merge_paper_entries(fresh, prior)

    assert [entry.to_dict() for entry in merged] == [
        {"subject": "Chemistry", "title": "Midterm (edited)", "year": 2023, "file": "a.pdf", "description": "Answer key"},
        {"subject": "Organic", "title": "final", "year": 2019, "file": "b.pdf", "description": ""},
    ]


def test_merge_without_prior_only_sorts() -> None:
    merged = merge_paper_entries([_entry("a.pdf", title="b"), _entry("b.pdf", title="a")], [])

    assert [entry.title for entry in merged] == ["a", "b"]


def test_load_prior_absent_and_valid(tmp_path: Path) -> None:
    store = CatalogStore(tmp_path)

    assert store.load_prior_papers("sem_1").status == "absent"

    (tmp_path / "sem_1.json").write_text(
        json.dumps(
            [
                {"subject": "Maths", "title": "Algebra", "year": 2020, "file": "pdfs/a.pdf", "description": "x"},
                {"title": "no file"},
                "junk",
                {"file": "pdfs/b.pdf", "year": "2021"},
            ]
        ),
        encoding="utf-8",
    )

    result = store.load_prior_papers("sem_1")

    assert result.status == "ok"
    assert [entry.file for entry in result.entries] == ["pdfs/a.pdf", "pdfs/b.pdf"]
    assert result.entries[1].year is None
    assert result.entries[1].title == ""


def test_load_prior_parse_errors_degrade_to_empty(tmp_path: Path) -> None:
    store = CatalogStore(tmp_path)
    (tmp_path / "sem_1.json").write_text("[{broken", encoding="utf-8")
    (tmp_path / "sem_2.json").write_text('{"file": "a.pdf"}', encoding="utf-8")

    broken = store.load_prior_papers("sem_1")
    not_a_list = store.load_prior_papers("sem_2")

    assert broken.is_error and broken.entries == []
    assert not_a_list.is_error and not_a_list.error == "catalog is not a JSON array"


def test_existing_semesters_are_discovered_per_mode(tmp_path: Path) -> None:
    for name in [
        "sem_1.json",
        "sem_12.json",
        "sem_unknown.json",
        "sem_schedule.json",
        "syllabus_sem_3.json",
        "syllabus_sem_notes.json",
        "index.json",
        "sem_4.txt",
    ]:
        (tmp_path / name).write_text("[]", encoding="utf-8")

    store = CatalogStore(tmp_path)

    assert store.existing_paper_semesters() == {"sem_1", "sem_12", "sem_unknown"}
    assert store.existing_syllabus_semesters() == {"sem_3"}
    assert CatalogStore(tmp_path / "missing").existing_paper_semesters() == set()


def test_write_catalog_replaces_file_with_pretty_json(tmp_path: Path) -> None:
    store = CatalogStore(tmp_path / "data")
    path = store.paper_catalog_path("sem_1")

    store.write_catalog(path, [{"title": "Ünit", "year": None}])
    store.write_catalog(path, [{"title": "Kinematik", "year": 2020}])

    assert path.read_text(encoding="utf-8") == '[\n  {\n    "title": "Kinematik",\n    "year": 2020\n  }\n]\n'
    assert [p.name for p in path.parent.iterdir()] == ["sem_1.json"]


def test_write_empty_catalog(tmp_path: Path) -> None:
    store = CatalogStore(tmp_path)
    path = store.syllabus_catalog_path("sem_9")

    store.write_catalog(path, [])

    assert path.read_text(encoding="utf-8") == "[]\n"
