"""Catalog records, aggregation and persistence."""

from .builder import ScannedDocument, build_paper_catalogs, build_syllabus_catalogs
from .models import MaterialEntry, PaperEntry, SubjectCatalog, UnitGroup
from .store import CatalogStore, PriorCatalogResult, merge_paper_entries

__all__ = [
    "CatalogStore",
    "MaterialEntry",
    "PaperEntry",
    "PriorCatalogResult",
    "ScannedDocument",
    "SubjectCatalog",
    "UnitGroup",
    "build_paper_catalogs",
    "build_syllabus_catalogs",
    "merge_paper_entries",
]
