"""Errors raised by the import front-ends (document text extraction and the AI service)."""


class ExtractionError(Exception):
    """Base class; ``message`` is safe to show to the user."""
    message = "Recipe extraction failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class NoTextExtractedError(ExtractionError):
    message = "No text could be extracted from the document"


class ExtractionUnavailableError(ExtractionError):
    message = "The extraction service is unavailable or returned no content"


class InvalidExtractionResponseError(ExtractionError):
    message = "The extraction service did not return valid structured data"


__all__ = [
    "ExtractionError", "NoTextExtractedError",
    "ExtractionUnavailableError", "InvalidExtractionResponseError",
]
