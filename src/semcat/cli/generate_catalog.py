"""CLI entrypoint for regenerating semester catalogs from the document tree."""

from __future__ import annotations

import argparse
import json
import logging

from dotenv import load_dotenv

from semcat.config import CatalogMode, CatalogSettings
from semcat.generator import CatalogGenerator
from semcat.scanning.walker import CatalogError


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build per-semester paper or syllabus catalogs from a PDF tree")
    parser.add_argument(
        "--syllabus",
        action="store_true",
        help="Build syllabus_<sem>.json subject/unit catalogs instead of <sem>.json paper catalogs",
    )
    parser.add_argument("--root-dir", default=None, help="Site root; catalog file paths are relative to it")
    parser.add_argument("--input-dir", default=None, help="Document folder (default: <root>/pdfs)")
    parser.add_argument("--output-dir", default=None, help="Catalog folder (default: <root>/data)")
    parser.add_argument("--extension", default=None, help="Document extension to collect (default: .pdf)")
    parser.add_argument("--verbose", action="store_true", help="Log skipped files and other details")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        settings = CatalogSettings.from_env().with_overrides(
            root_dir=args.root_dir,
            input_dir=args.input_dir,
            output_dir=args.output_dir,
            extension=args.extension,
            mode=CatalogMode.SYLLABUS if args.syllabus else None,
        )
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 2

    LOGGER.info("Running in %s mode over %s", settings.mode.value, settings.input_dir)
    try:
        report = CatalogGenerator(settings).run()
    except CatalogError as exc:
        LOGGER.error("%s", exc)
        return 2

    print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
