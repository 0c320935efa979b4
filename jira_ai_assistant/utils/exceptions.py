"""Custom exceptions for the Jira AI Assistant application."""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class CustomException(Exception):
    """Base custom exception class.

    Attributes:
        message: The error message
        status_code: HTTP status code
        headers: Optional HTTP headers
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers: Optional[Dict[str, str]] = None
    ) -> None:
        """Initialize the custom exception.

        Args:
            message: Human readable error message
            status_code: HTTP status code
            headers: Optional HTTP headers
        """
        self.message = message
        self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)

    def to_http_exception(self) -> HTTPException:
        """Convert the exception into a FastAPI HTTPException.

        Returns:
            HTTPException carrying the same status code and message
        """
        return HTTPException(
            status_code=self.status_code,
            detail={"error": self.message},
            headers=self.headers,
        )


class QueryValidationError(CustomException):
    """Raised when a free-text query is missing or empty."""

    def __init__(self, message: str = "Query parameter is required and must be a non-empty string"):
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class IssueTrackerError(CustomException):
    """Raised when the issue tracker cannot be reached or answers with an error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.details = details or {}
        super().__init__(
            f"Failed to fetch JIRA issues: {message}",
            status_code=status.HTTP_502_BAD_GATEWAY,
        )


class LLMConfigurationError(CustomException):
    """Raised when no generative model can be built from the current settings."""

    def __init__(self, message: str = "Gemini API token is not configured"):
        super().__init__(message, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
