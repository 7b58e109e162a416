"""Exceptions raised by biblija."""


class BiblijaError(Exception):
    """Base class for biblija errors."""


class SourceError(BiblijaError):
    """A source document could not be read at all."""
