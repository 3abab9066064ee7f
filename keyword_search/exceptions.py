"""
Exceptions raised while building a keyword index.

Query-time problems never raise: an unknown keyword is simply a keyword
with no occurrences.
"""


class SearchEngineError(Exception):
    """Base class for keyword search errors."""


class DocumentNotFoundError(SearchEngineError, FileNotFoundError):
    """A document, manifest or noise-word file could not be read."""

    def __init__(self, path, reason: str = None):
        self.path = str(path)
        self.reason = reason
        message = f"Could not read {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class DuplicateDocumentError(SearchEngineError, ValueError):
    """A document was merged into an index that already holds it."""

    def __init__(self, document: str):
        self.document = document
        super().__init__(f"Document already indexed: {document}")
