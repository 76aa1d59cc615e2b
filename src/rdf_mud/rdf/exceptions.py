"""Errors raised by the RDF datastore."""


class RDFStoreError(Exception):
    """Base class for datastore failures."""


class ParseError(RDFStoreError):
    """Input text could not be decoded. The store is left untouched."""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.line = line


class SerializationError(RDFStoreError):
    """The encoder failed to render the store."""
