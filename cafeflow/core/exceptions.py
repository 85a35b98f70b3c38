"""Exceptions shared by helpers and the core."""


class HelperError(Exception):
    """Uniform failure of a protected helper operation.

    Carries the service and operation that failed; the original exception is
    available as `cause` (and as `__cause__` when raised by the executor).
    Failures are not classified further: network, auth and parse errors all
    surface as `HelperError`, and retrying is left to the caller.
    """

    def __init__(
        self,
        service_name: str = 'unknown',
        operation: str = 'unknown',
        cause: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        self.service_name = service_name
        self.operation = operation
        self.cause = cause
        super().__init__(message or f'Failed to execute {service_name}.{operation}')

    @classmethod
    def from_message(cls, message: str, cause: BaseException | None = None) -> 'HelperError':
        """Create an error that is not tied to a specific service call."""
        return cls(cause=cause, message=message)


class LLMNotConfiguredError(HelperError):
    """Raised when an LLM call is attempted with neither GEMINI_API_KEY nor GROQ_API_KEY set."""

    def __init__(self, service_name: str = 'llm', operation: str = 'complete') -> None:
        super().__init__(
            service_name,
            operation,
            message='No LLM provider configured. Set GEMINI_API_KEY or GROQ_API_KEY.',
        )
