"""Custom exceptions for mdbook-private."""


class MdbookPrivateError(Exception):
    """Base exception for mdbook-private operations."""


class ConfigurationError(MdbookPrivateError):
    """A ``[preprocessor.private]`` value has the wrong type."""


class ProtocolError(MdbookPrivateError):
    """The preprocessor input sent by mdbook could not be decoded."""


class BookStructureError(MdbookPrivateError):
    """The chapter tree violates a numbering invariant."""
