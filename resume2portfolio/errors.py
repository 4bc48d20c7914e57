"""
Error taxonomy for the parsing pipeline.

Only extraction and the length floor can fail; detection and
normalisation always produce a record.
"""
from typing import Optional, Dict, Any


class ParseError(Exception):
    """Base exception for a failed resume parse"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnsupportedFormatError(ParseError):
    """Declared MIME type has no extractor"""

    def __init__(self, mime_type: str):
        super().__init__(f"Unsupported file type: {mime_type}", details={"mime_type": mime_type})


class ExtractionError(ParseError):
    """Decoder could not turn the document bytes into text"""

    def __init__(self, fmt: str, cause: Exception):
        super().__init__(
            f"Failed to extract text from {fmt.upper()}: {cause}",
            details={"format": fmt, "cause": type(cause).__name__},
        )


class InsufficientContentError(ParseError):
    """Normalised text is shorter than the minimum floor"""

    def __init__(self, length: int, minimum: int):
        super().__init__(
            "Extracted text is too short. Please ensure the resume has readable content.",
            details={"length": length, "minimum": minimum},
        )
