"""
Keyword extraction from documents.

This module turns raw document text into a mapping from keyword to its
occurrence in that document, and reads the plain-text word lists (document
manifests and noise words) the index is built from.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

from .exceptions import DocumentNotFoundError
from .occurrence import Occurrence

logger = logging.getLogger(__name__)


class KeywordExtractor:
    """Normalizes words into keywords and counts them per document."""

    def __init__(self, config, noise_words: Optional[Iterable[str]] = None):
        """
        Initialize with configuration and an optional noise-word set.

        Args:
            config: Configuration object.
            noise_words: Words never treated as keywords.
        """
        self.config = config
        self.noise_words: Set[str] = set()
        if noise_words:
            self.set_noise_words(noise_words)

    def set_noise_words(self, noise_words: Iterable[str]) -> None:
        """Replace the noise-word set. Noise words are matched case-insensitively."""
        self.noise_words = {w.lower() for w in noise_words}

    def _read_text(self, path) -> str:
        try:
            with open(path, "r", encoding=self.config.ENCODING, errors="ignore") as f:
                return f.read()
        except OSError as e:
            raise DocumentNotFoundError(path, e.strerror) from e

    def read_word_list(self, path) -> List[str]:
        """
        Read a whitespace-separated word list, one entry per line.

        Args:
            path: Path to the file.

        Returns:
            Words in file order.

        Raises:
            DocumentNotFoundError: If the file cannot be read.
        """
        return self._read_text(path).split()

    def read_manifest(self, path) -> List[str]:
        """Read the list of document names to index."""
        return self.read_word_list(path)

    def load_noise_words(self, path) -> Set[str]:
        """Read noise words from a file and use them for extraction."""
        words = self.read_word_list(path)
        self.set_noise_words(words)
        logger.debug("Loaded %d noise words from %s", len(self.noise_words), path)
        return set(self.noise_words)

    def get_keyword(self, word: str) -> Optional[str]:
        """
        Normalize a word into a keyword.

        Trailing non-alphabetic characters are stripped and the word is
        lowercased. What remains must be non-empty, entirely alphabetic and
        not a noise word. Leading or interior punctuation is not stripped,
        so such words fail the alphabetic test.

        Args:
            word: Candidate word.

        Returns:
            The keyword, or None if the word is not a keyword.
        """
        end = len(word)
        while end > 0 and not word[end - 1].isalpha():
            end -= 1
        keyword = word[:end]
        if self.config.LOWERCASE:
            keyword = keyword.lower()

        if not keyword or not keyword.isalpha():
            return None
        if keyword in self.noise_words:
            return None
        return keyword

    def extract_keywords(self, document: str, text: str) -> Dict[str, Occurrence]:
        """
        Count the keywords of a document's text.

        Args:
            document: Document name recorded in each occurrence.
            text: Raw document text.

        Returns:
            Dictionary mapping keyword to its occurrence in the document.
        """
        keywords: Dict[str, Occurrence] = {}
        for word in text.split():
            keyword = self.get_keyword(word)
            if keyword is None:
                continue
            occurrence = keywords.get(keyword)
            if occurrence is None:
                keywords[keyword] = Occurrence(document, 1)
            else:
                occurrence.increment()
        return keywords

    def load_keywords(self, document: str, path=None) -> Dict[str, Occurrence]:
        """
        Read a document from disk and count its keywords.

        Args:
            document: Document name.
            path: Location of the document. Defaults to the name itself.

        Returns:
            Dictionary mapping keyword to its occurrence in the document.

        Raises:
            DocumentNotFoundError: If the document cannot be read.
        """
        if path is None:
            path = Path(document)
        text = self._read_text(path)
        keywords = self.extract_keywords(document, text)
        logger.debug("Extracted %d keywords from %s", len(keywords), document)
        return keywords
