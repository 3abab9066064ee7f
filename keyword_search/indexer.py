"""
Keyword index construction.

This module builds a KeywordIndex from a sequence of documents in a single
batch pass: each document is scanned for keywords and merged in the order
supplied.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from .extractor import KeywordExtractor
from .keyword_index import KeywordIndex

logger = logging.getLogger(__name__)


class Indexer:
    """Builds keyword indexes from documents on disk."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self.extractor = KeywordExtractor(config)

    def build_index(self, documents: Iterable[str], noise_words: Iterable[str],
                    base_dir: Optional[Path] = None) -> KeywordIndex:
        """
        Build an index over the given documents.

        Documents are merged in the order given, which decides where equal
        frequencies land in each keyword's list. If any document cannot be
        read the whole build fails; no partial index is returned.

        Args:
            documents: Document names, usually file paths.
            noise_words: Words excluded from indexing.
            base_dir: Directory relative document names are resolved
                against. Document names themselves are kept as given.

        Returns:
            The built index.

        Raises:
            DocumentNotFoundError: If a document cannot be read.
            DuplicateDocumentError: If a document is listed twice.
        """
        self.extractor.set_noise_words(noise_words)
        index = KeywordIndex()

        count = 0
        for document in documents:
            path = Path(document)
            if base_dir is not None and not path.is_absolute():
                path = Path(base_dir) / path
            keywords = self.extractor.load_keywords(document, path)
            index.merge(keywords, document=document)
            count += 1
            if self.config.VERBOSE:
                logger.info("Indexed %s (%d keywords)", document, len(keywords))

        logger.info("Built keyword index: %d keywords across %d documents", len(index), count)
        return index

    def make_index(self, docs_file, noise_words_file) -> KeywordIndex:
        """
        Build an index from a document manifest and a noise-word file.

        Both files hold whitespace-separated names, one per line. Relative
        document names are resolved against the manifest's directory.

        Args:
            docs_file: Path to the manifest of document names.
            noise_words_file: Path to the noise-word list.

        Returns:
            The built index.

        Raises:
            DocumentNotFoundError: If either file or any listed document
                cannot be read.
        """
        noise_words = self.extractor.load_noise_words(noise_words_file)
        documents = self.extractor.read_manifest(docs_file)
        logger.info("Indexing %d documents listed in %s", len(documents), docs_file)
        return self.build_index(documents, noise_words, base_dir=Path(docs_file).parent)
