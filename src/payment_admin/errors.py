from typing import Any, Optional


class PaymentAdminError(Exception):
    """Base exception for the payment admin layer."""


class InvalidArgument(PaymentAdminError, ValueError):
    """Raised when a required model argument is missing."""

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f"Argument '{name}' is required.")


class MissingResourceError(PaymentAdminError, KeyError):
    """Raised when a localization resource cannot be found for any locale."""

    def __init__(self, key: str, locale: str):
        self.key = key
        self.locale = locale
        super().__init__(f"No resource '{key}' for locale '{locale}'")

    def __str__(self) -> str:
        return self.args[0]


def require(value: Any, name: str) -> Any:
    if value is None:
        raise InvalidArgument(name)
    return value
