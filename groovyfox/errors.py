"""Exception types raised by groovyfox components."""


class GroovyFoxError(Exception):
    """Base class for all groovyfox errors."""


class CatalogError(GroovyFoxError):
    """Reference data is malformed or inconsistent."""


class RecognizerError(GroovyFoxError):
    """The intent recognizer could not classify a message."""


class TranscriptStoreError(GroovyFoxError):
    """A transcript could not be read from or written to the store."""
