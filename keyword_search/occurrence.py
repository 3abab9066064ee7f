"""
Occurrence record: how many times a keyword appears in one document.
"""


class Occurrence:
    """A (document, frequency) pair for a single keyword."""

    __slots__ = ("document", "frequency")

    def __init__(self, document: str, frequency: int = 1):
        """
        Initialize with a document name and frequency.

        Args:
            document: Name of the document the keyword occurs in.
            frequency: Number of times the keyword occurs in the document.
        """
        if frequency < 1:
            raise ValueError(f"Frequency must be positive, got {frequency}")
        self.document = document
        self.frequency = frequency

    def increment(self) -> None:
        """Count one more occurrence while scanning the document."""
        self.frequency += 1

    def __eq__(self, other):
        if not isinstance(other, Occurrence):
            return NotImplemented
        return self.document == other.document and self.frequency == other.frequency

    def __repr__(self):
        return f"({self.document},{self.frequency})"
