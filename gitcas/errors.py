"""Exceptions raised while reading, decoding and writing objects."""


class ObjectError(Exception):
    """Base class for every failure surfaced by the object store."""


class InvalidDigestError(ObjectError):
    pass


class ObjectNotFoundError(ObjectError):
    pass


class CorruptStreamError(ObjectError):
    pass


class MalformedRecordError(ObjectError):
    pass


class InvalidSizeError(ObjectError):
    pass


class UnrecognizedTypeError(ObjectError):
    pass


class InvalidModeError(ObjectError):
    pass


class UnrecognizedModeError(ObjectError):
    pass


class InvalidNameError(ObjectError):
    pass


class EmptyNameError(ObjectError):
    pass


class TruncatedDigestError(ObjectError):
    pass


class InvalidEncodingError(ObjectError):
    pass


class NotATreeError(ObjectError):
    pass


class DigestMismatchError(ObjectError):
    """Stored record does not hash to the digest it was looked up by."""
