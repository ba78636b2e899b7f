"""
Errors raised by the term-string codec.

Every error is a synchronous parse failure caused by malformed input.
The offending input is kept on the exception as ``value``.
"""


class TermStringError(ValueError):
    """Base class for term-string parse errors."""

    def __init__(self, message: str, value: str = ""):
        super().__init__(message)
        self.value = value


class MalformedLiteralError(TermStringError):
    """Literal lacks its quote pair or has an unrecognized suffix."""
    pass


class InvalidDirectionError(TermStringError):
    """Base direction marker is neither ``ltr`` nor ``rtl``."""
    pass


class UnbalancedTagError(TermStringError):
    """Angle brackets inside a quoted term do not match."""
    pass


class QuadArityError(TermStringError):
    """Quoted term does not hold exactly 3 or 4 top-level terms."""
    pass


class UnsupportedCapabilityError(TermStringError):
    """The term factory cannot construct the requested term type."""
    pass


class NestingDepthError(TermStringError):
    """Quoted terms are nested deeper than the configured limit."""
    pass


class ConfigValidationError(Exception):
    """Configuration validation error."""
    pass
