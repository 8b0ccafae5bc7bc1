"""Identifier errors with tracking IDs."""

from pksuid.utils.timestamp import format_timestamp
from pksuid.utils.ksuid import generate_ksuid


class PKSUIDError(ValueError):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.message = message
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {self.message}"


class TooShortError(PKSUIDError):
    """Binary input under 20 bytes or text input under 27 characters."""

    def __init__(self, message, length=None, **kwargs):
        context = kwargs.pop("context", {})
        if length is not None:
            context["length"] = length
        super().__init__(message, context=context, **kwargs)


class TooLongError(PKSUIDError):
    """Binary input over 36 bytes."""

    def __init__(self, message, length=None, **kwargs):
        context = kwargs.pop("context", {})
        if length is not None:
            context["length"] = length
        super().__init__(message, context=context, **kwargs)


class PrefixTooLongError(PKSUIDError):
    """Prefix does not fit the 16 byte prefix region."""

    def __init__(self, message, prefix=None, **kwargs):
        context = kwargs.pop("context", {})
        if prefix is not None:
            context["prefix"] = prefix
        super().__init__(message, context=context, **kwargs)


class MalformedIDError(PKSUIDError):
    """The trailing 27 characters are not an encoded KSUID."""

    def __init__(self, message, encoded=None, **kwargs):
        context = kwargs.pop("context", {})
        if encoded is not None:
            context["encoded"] = encoded
        super().__init__(message, context=context, **kwargs)


class UnsupportedScalarTypeError(PKSUIDError):
    def __init__(self, message, type_name=None, **kwargs):
        context = kwargs.pop("context", {})
        if type_name:
            context["type"] = type_name
        super().__init__(message, context=context, **kwargs)
