"""
Command-line front end: resume file → portfolio JSON (+ optional site).

    resume2portfolio resume.pdf --html site.html --zip site.zip
"""
from __future__ import annotations
import argparse, json, logging, mimetypes, sys
from pathlib import Path
from typing import List, Optional

from . import config
from .extractor import DOCX_MIME, is_supported
from .generator_rule import export_site, portfolio_to_html
from .pipeline import parse_resume

logger = logging.getLogger(__name__)

mimetypes.add_type(DOCX_MIME, ".docx")


def _log_level(name: str) -> int:
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.INFO


def guess_mime(path: Path) -> str:
    mime, _ = mimetypes.guess_type(path.name)
    return mime or "application/octet-stream"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="resume2portfolio",
        description="Parse a PDF/DOCX/TXT resume into a portfolio record.",
    )
    p.add_argument("file", type=Path, help="resume to parse")
    p.add_argument("--mime", help="declared MIME type (default: guessed from extension)")
    p.add_argument("--ai", action="store_true", help="request AI refinement when a provider is configured")
    p.add_argument("--html", type=Path, help="write a self-contained HTML page here")
    p.add_argument("--zip", type=Path, help="write the static site ZIP here")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=_log_level(config.LOG_LEVEL),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    mime = args.mime or guess_mime(args.file)
    if not is_supported(mime):
        logger.warning("%s looks like %s; the parser will reject it", args.file.name, mime)

    refiner = None
    if args.ai:
        from .refiner import LLMRefiner
        refiner = LLMRefiner()

    result = parse_resume(args.file.read_bytes(), mime, use_ai=args.ai, refiner=refiner)
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    if not result.success:
        return 1

    if args.html:
        args.html.write_text(portfolio_to_html(result.data, inline=True), encoding="utf-8")
        logger.info("wrote %s", args.html)
    if args.zip:
        args.zip.write_bytes(export_site(result.data))
        logger.info("wrote %s", args.zip)
    return 0


if __name__ == "__main__":
    sys.exit(main())
