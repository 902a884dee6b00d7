class ProviderError(Exception):
    """The provider answered with a non-2xx status; ``detail`` is the raw body."""

    def __init__(self, status_code: int, detail: str = "", reason: str = ""):
        self.status_code = status_code
        self.detail = detail
        self.reason = reason
        super().__init__(f"Provider returned {status_code}: {reason or detail[:150]}")


class ProviderUnavailable(Exception):
    """No usable answer: the provider was unreachable or replied with a body that is not JSON."""
