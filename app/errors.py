from typing import Optional, Dict, Any


class ScraperError(Exception):
    """Base exception for every failure the scrape pipeline reports."""

    error_code = "ScraperError"
    status_code = 500
    default_message = "Failed to scrape article"

    def __init__(self, details: Optional[str] = None, message: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details or self.message
        super().__init__(self.details)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class InvalidInputError(ScraperError):
    error_code = "InvalidInput"
    status_code = 400
    default_message = "Invalid URL"


class ConfigurationMissingError(ScraperError):
    error_code = "ConfigurationMissing"
    status_code = 500
    default_message = "Server configuration is incomplete"


class ExtractionError(ScraperError):
    """The extractor answered, but with no article or no content."""

    error_code = "ExtractionFailure"
    status_code = 422
    default_message = "Could not extract article content"


class ExtractionTransportError(ScraperError):
    """The extractor itself failed (network, HTTP status, parser crash)."""

    error_code = "ExtractionTransportFailure"
    status_code = 502
    default_message = "Failed to fetch article"


class MetadataStoreError(ScraperError):
    error_code = "MetadataStoreFailure"
    status_code = 500
    default_message = "Failed to save summary"


class DocumentStoreError(ScraperError):
    error_code = "DocumentStoreFailure"
    status_code = 500
    default_message = "Failed to save full article"
