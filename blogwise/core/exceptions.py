"""Custom exception classes for the application."""

from typing import Any


class BlogwiseError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# External API Errors
class ExternalAPIError(BlogwiseError):
    """Error calling external API."""

    def __init__(self, api_name: str, message: str) -> None:
        self.api_name = api_name
        super().__init__(f"{api_name} API error: {message}")


class RateLimitExceededError(ExternalAPIError):
    """Rate limit exceeded for external API."""

    def __init__(self, api_name: str) -> None:
        super().__init__(api_name, "Rate limit exceeded")


class APIKeyMissingError(ExternalAPIError):
    """API key not configured."""

    def __init__(self, api_name: str) -> None:
        super().__init__(api_name, "API key not configured")


# Collaborator Errors
class SignalUnavailableError(BlogwiseError):
    """No trend signal source produced candidates."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"Trend signal '{source}' unavailable: {message}")


class EstimationError(BlogwiseError):
    """Keyword metrics could not be estimated."""

    def __init__(self, keyword: str, message: str) -> None:
        self.keyword = keyword
        super().__init__(f"Estimation failed for '{keyword}': {message}")


class GenerationError(BlogwiseError):
    """The text-generation provider failed for one item."""

    def __init__(self, keyword: str, message: str) -> None:
        self.keyword = keyword
        super().__init__(f"Generation failed for '{keyword}': {message}")


class ContentStoreError(BlogwiseError):
    """Reading from or writing to the content store failed."""

    pass
