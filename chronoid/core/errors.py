"""Identifier errors with context for tracking."""

from chronoid.utils.timestamp import format_timestamp


class IdError(Exception):
    """Base error with timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class InvalidRadix(IdError):
    """Radix outside 2..36."""

    def __init__(self, radix, **kwargs):
        context = kwargs.pop("context", {})
        context["radix"] = radix
        super().__init__(f"radix must be between 2 and 36, got {radix}", context=context, **kwargs)
        self.radix = radix


class UnknownScheme(IdError):
    """No identifier scheme registered under that name."""

    def __init__(self, scheme, **kwargs):
        context = kwargs.pop("context", {})
        context["scheme"] = scheme
        super().__init__(f"unknown id scheme: {scheme!r}", context=context, **kwargs)
        self.scheme = scheme


class ArithmeticUnderflow(IdError):
    """Parsed time field rebases to a negative timestamp."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)


class MalformedIdentifier(IdError):
    """Identifier cannot be parsed."""

    def __init__(self, message, identifier=None, **kwargs):
        context = kwargs.pop("context", {})
        if identifier is not None:
            context["identifier"] = identifier
        super().__init__(message, context=context, **kwargs)
        self.identifier = identifier


class MalformedTimeField(MalformedIdentifier):
    """Time portion has the wrong length or characters outside the alphabet."""


class ExternalDecodeFailure(MalformedIdentifier):
    """The ULID library refused to decode the identifier."""


class TimeOutOfRange(IdError):
    """Parsed time is valid but lies past what datetime can represent (year 9999)."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
