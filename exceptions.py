"""Error taxonomy for extraction and analysis failures."""


class LegalEaseError(Exception):
    """Base class for every failure surfaced to the caller."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidInput(LegalEaseError):
    """Raised when image data or its MIME type is missing or unusable."""

    status_code = 400


class ExtractionFailed(LegalEaseError):
    """Raised when the AI service fails during OCR."""

    status_code = 502


class EmptyExtraction(LegalEaseError):
    """Raised when OCR succeeded but produced no text."""

    status_code = 422


class EmptyDocument(LegalEaseError):
    """Raised when an analysis is requested without document text."""

    status_code = 400


class MissingQuery(LegalEaseError):
    """Raised when a question analysis has no question."""

    status_code = 400


class MalformedAIResponse(LegalEaseError):
    """Raised when the risk-score response cannot be parsed."""

    status_code = 502


class AnalysisFailed(LegalEaseError):
    """Raised when the AI service fails during analysis or translation."""

    status_code = 502


class AIServiceError(LegalEaseError):
    """Raised by the AI client when the provider call fails."""

    status_code = 502
