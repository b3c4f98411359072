"""Custom exceptions for tririsk."""


class TriRiskError(Exception):
    """Base exception for application-level errors."""


class ConfigError(TriRiskError):
    """Raised when configuration cannot be loaded or validated."""


class TransportError(TriRiskError):
    """Raised by a transport when the vendor cannot be reached."""


class ValidationError(TriRiskError, ValueError):
    """Raised when a caller passes an identifier that can never be scored.

    This signals a programming error on the caller's side and is the only
    failure allowed to escape a scoring service.
    """


class InvalidEmailError(ValidationError):
    """Email address failed format validation."""


class InvalidIpAddressError(ValidationError):
    """IP address is neither IPv4 nor IPv6."""


class InvalidPhoneNumberError(ValidationError):
    """Phone number or its country code failed format validation."""
