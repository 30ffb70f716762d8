"""
Errors raised by the translation gateway.

ValidationError subclasses are raised before any cache or network work.
TranslationError subclasses come out of the executor; all but
Misconfigured are turned into fallbacks by the gateway.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base class for translation gateway errors."""
    pass


# =============================================================================
# Validation
# =============================================================================


class ValidationError(GatewayError):
    """Request rejected before any cache or network interaction."""

    reason = "invalid_request"


class UnsupportedLanguage(ValidationError):
    reason = "unsupported_language"

    def __init__(self, code: str, role: str = "target"):
        self.code = code
        self.role = role
        super().__init__(f"Unsupported {role} language: {code}")


class InputTooLarge(ValidationError):
    reason = "input_too_large"

    def __init__(self, length: int, limit: int, index: int | None = None):
        self.length = length
        self.limit = limit
        self.index = index
        where = f"Text at index {index}" if index is not None else "Text"
        super().__init__(f"{where} is {length} characters, maximum is {limit}")


class BatchTooLarge(ValidationError):
    reason = "batch_too_large"

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Batch size {size} exceeds maximum of {limit} texts")


# =============================================================================
# Upstream / execution
# =============================================================================


class TranslationError(GatewayError):
    """The executor could not produce a translation."""

    code = "translation_error"


class Misconfigured(TranslationError):
    """Credentials or endpoint configuration missing. Never retried."""

    code = "misconfigured"


class ModelUnavailable(TranslationError):
    """Model still loading after the retry budget was spent."""

    code = "model_unavailable"

    def __init__(self, model_id: str, attempts: int):
        self.model_id = model_id
        self.attempts = attempts
        super().__init__(f"Model {model_id} still loading after {attempts} attempts")


class UpstreamError(TranslationError):
    code = "upstream_error"

    def __init__(self, status_code: int | None, message: str = ""):
        self.status_code = status_code
        self.message = message
        status = status_code if status_code is not None else "no response"
        super().__init__(f"Upstream error ({status}): {message or 'Unknown error'}")


class UnexpectedResponseShape(TranslationError):
    code = "unexpected_response_shape"


class ModelLoading(Exception):
    """
    Upstream answered 503 while the model warms up.

    Internal retry signal; callers only ever see ModelUnavailable.
    """

    def __init__(self, estimated_time: float):
        self.estimated_time = estimated_time
        super().__init__(f"Model loading, estimated {estimated_time}s")
