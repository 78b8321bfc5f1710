"""
Domain errors for the synthetic bank.

The API layer maps each error to a status code and the
standard failure envelope. ContentProviderError never
leaves the content provider layer.
"""


class SyntheticBankError(Exception):
    """Base exception for all synthetic bank failures."""

    status_code = 500


class NotFoundError(SyntheticBankError):
    """Raised when an account or transaction id is unknown."""

    status_code = 404


class InvalidInputError(SyntheticBankError):
    """Raised when required fields are missing or malformed."""

    status_code = 400


class ContentProviderError(SyntheticBankError):
    """Raised by the AI-backed provider before it falls back."""


class GenerationError(SyntheticBankError):
    """Raised when bulk generation fails unexpectedly."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.details = details
