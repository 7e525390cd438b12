class LLMError(RuntimeError):
    pass


class LLMQuotaError(LLMError):
    """Raised when the provider reports that the usage limit is exhausted."""


class LLMTransportError(LLMError):
    """Raised on network failures, timeouts and provider 5xx responses."""


class LLMValidationError(LLMError):
    """Raised when the model output cannot be validated against the requested schema."""
