from typing import Optional


class SummaryServiceError(Exception):
    """Base class for errors raised by the summary service."""


class ValidationError(SummaryServiceError):
    """A required request field is missing or empty. Always client-caused."""


class UpstreamError(SummaryServiceError):
    """The generative-text provider failed or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DeliveryError(SummaryServiceError):
    """The SMTP transport refused or failed to submit the message."""
