class CarbonRegionsError(Exception):
    """Base exception for carbonregions."""

    pass


class ConfigurationError(CarbonRegionsError):
    """Raised when a required setting or credential is missing or invalid."""

    pass


class ParseError(CarbonRegionsError):
    """Raised when coordinate text or a provider response cannot be parsed."""

    pass


class TransportError(CarbonRegionsError):
    """Raised when a remote endpoint cannot be reached."""

    pass


class ProviderError(CarbonRegionsError):
    """Raised when a provider answers with an unexpected status code."""

    def __init__(self, provider: str, status_code: int = None, reason: str = None):
        self.provider = provider
        self.status_code = status_code
        self.reason = reason
        if reason is None:
            reason = f"expected 200 response got {status_code}"
        super().__init__(f"{provider}: {reason}")
