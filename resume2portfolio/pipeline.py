"""
Resume parsing pipeline:
  1. extract text from the uploaded bytes
  2. detect sections with rules
  3. normalise to the portfolio schema
  4. optionally refine (only with use_ai and a configured provider)
"""
from __future__ import annotations
import logging
from typing import BinaryIO

from . import config
from .cleaner import normalise_portfolio
from .errors import InsufficientContentError, ParseError
from .extractor import extract_text
from .parser_rule import detect_sections
from .refiner import IdentityRefiner, Refiner
from .rules import DEFAULT_RULES, DetectionRules
from .schema_portfolio import (
    DetectedSections,
    ParseMetadata,
    ParseResult,
    SectionsFound,
)

logger = logging.getLogger(__name__)


def sections_found(detected: DetectedSections) -> SectionsFound:
    return SectionsFound(
        has_name=bool(detected.name),
        has_contact=bool(detected.contact.email or detected.contact.phone),
        has_skills=len(detected.skills) > 0,
        has_experience=len(detected.experience) > 0,
        has_projects=len(detected.projects) > 0,
        has_education=len(detected.education) > 0,
    )


def parse_resume(
    source: bytes | BinaryIO,
    mime_type: str,
    use_ai: bool = False,
    refiner: Refiner | None = None,
    rules: DetectionRules = DEFAULT_RULES,
) -> ParseResult:
    """Parse resume bytes into a ParseResult; parse failures never raise."""
    try:
        logger.info("Step 1/3: extracting text (%s)", mime_type)
        text = extract_text(source, mime_type)
        if not text or len(text) < config.MIN_TEXT_LENGTH:
            raise InsufficientContentError(len(text or ""), config.MIN_TEXT_LENGTH)

        logger.info("Step 2/3: detecting sections")
        detected = detect_sections(text, rules)

        logger.info("Step 3/3: normalising to portfolio schema")
        record = normalise_portfolio(detected, rules)

        if use_ai and config.ai_credentials_configured():
            refiner = refiner or IdentityRefiner()
            logger.info("Refining with %s", type(refiner).__name__)
            record = refiner.refine(record)
        elif use_ai:
            logger.info("AI refinement requested but no provider is configured; skipping")
    except ParseError as exc:
        logger.warning("Resume parsing failed: %s", exc.message)
        return ParseResult(success=False, error=exc.message, error_type=type(exc).__name__)

    logger.info("Resume parsing completed (%d chars)", len(text))
    return ParseResult(
        success=True,
        data=record,
        metadata=ParseMetadata(text_length=len(text), sections_found=sections_found(detected)),
    )
