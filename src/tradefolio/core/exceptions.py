"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class QuoteProviderNotConfiguredError(AppError):
    """Raised when a quote provider is called without its access credential."""

    def __init__(self, provider: str):
        super().__init__(
            f"Quote provider '{provider}' has no access credential configured",
            code="QUOTE_PROVIDER_NOT_CONFIGURED",
        )


class QuoteFetchError(AppError):
    """Raised when an upstream quote request fails (network, timeout, bad payload)."""

    def __init__(self, symbol: str, reason: str):
        self.symbol = symbol
        super().__init__(f"Quote fetch failed for {symbol}: {reason}", code="QUOTE_FETCH_ERROR")
