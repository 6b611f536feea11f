"""Custom exceptions for the transaction monitor."""


class MonitorError(Exception):
    """Base exception for all monitor errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or "MONITOR_ERROR"
        super().__init__(self.message)


class ConfigurationMissingError(MonitorError):
    """Raised when a required configuration value is absent or empty."""

    def __init__(self, currency_code: str) -> None:
        self.currency_code = currency_code.upper()
        super().__init__(
            f"{self.currency_code} Address list cannot be found in the environment",
            "CONFIGURATION_MISSING",
        )


class FetchFailedError(MonitorError):
    """Raised when the explorer cannot supply transactions for an address."""

    def __init__(self, address: str, cause: str) -> None:
        self.address = address
        self.cause = cause
        super().__init__(
            f"Failed to fetch transactions for {address}: {cause}", "FETCH_FAILED"
        )


class ForwardFailedError(MonitorError):
    """Raised when the webhook does not accept a forwarded transaction."""

    def __init__(self, tx_id: str, status: int | str) -> None:
        self.tx_id = tx_id
        self.status = status
        super().__init__(f"Error {status} while updating", "FORWARD_FAILED")


class BalanceLookupError(MonitorError):
    """Raised when the balance service lookup fails."""

    def __init__(self, address: str, cause: str) -> None:
        self.address = address
        self.cause = cause
        super().__init__(
            f"Balance lookup failed for {address or '<unset>'}: {cause}",
            "BALANCE_LOOKUP_FAILED",
        )
