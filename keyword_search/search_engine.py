"""
Main KeywordSearchEngine class that ties indexing and querying together.

This module contains the KeywordSearchEngine class, which builds a keyword
index from a document manifest and answers "kw1 or kw2" queries against it.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .autocorrect import AutoCorrect
from .extractor import KeywordExtractor
from .indexer import Indexer
from .keyword_index import KeywordIndex
from .occurrence import Occurrence
from .query import QueryEngine
from .utils import ResultFormatter
import config

logger = logging.getLogger(__name__)

_OR_SPLIT = re.compile(r"\s+or\s+|\s+", re.IGNORECASE)


class KeywordSearchEngine:
    """
    Search engine over a static document collection.

    The index is built once, in a single batch pass, and is read-only
    afterwards. Each build replaces the previous index with a new one.
    """

    def __init__(self, config_dict: Optional[Dict] = None):
        """
        Initialize the KeywordSearchEngine.

        Args:
            config_dict: Optional configuration dictionary overriding the
                defaults in the config module.
        """
        self.config = self._load_config(config_dict)

        self.indexer = Indexer(self.config)
        self.extractor = KeywordExtractor(self.config)
        self.auto_correct = AutoCorrect(self.config)
        self.result_formatter = ResultFormatter(self.config)

        self.index: Optional[KeywordIndex] = None
        self.query_engine: Optional[QueryEngine] = None
        self.by_len_index: Dict[int, List[str]] = {}

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from the config module, overridden by config_dict."""
        if config_dict:
            class Config:
                def __init__(self, overrides):
                    for key in dir(config):
                        if key.isupper():
                            setattr(self, key, getattr(config, key))
                    for key, value in overrides.items():
                        setattr(self, key, value)
            return Config(config_dict)
        return config

    def _use_index(self, index: KeywordIndex, noise_words: Iterable[str]) -> KeywordIndex:
        self.index = index
        self.query_engine = QueryEngine(index, self.config)
        self.extractor.set_noise_words(noise_words)
        self.by_len_index = self.auto_correct.build_len_index(index.keywords())
        return index

    def make_index(self, docs_file=None, noise_words_file=None) -> KeywordIndex:
        """
        Build the index from a document manifest and a noise-word file.

        Args:
            docs_file: Manifest of document names. Defaults to config.DOCS_FILE.
            noise_words_file: Noise-word list. Defaults to config.NOISE_WORDS_FILE.

        Returns:
            The built index.

        Raises:
            DocumentNotFoundError: If any input file cannot be read. The
                previous index, if any, is kept.
        """
        if docs_file is None:
            docs_file = self.config.DOCS_FILE
        if noise_words_file is None:
            noise_words_file = self.config.NOISE_WORDS_FILE

        index = self.indexer.make_index(docs_file, noise_words_file)
        return self._use_index(index, self.indexer.extractor.noise_words)

    def build_index(self, documents: Iterable[str], noise_words: Iterable[str] = ()) -> KeywordIndex:
        """
        Build the index from document paths and noise words.

        Args:
            documents: Document paths, indexed in this order.
            noise_words: Words excluded from indexing.

        Returns:
            The built index.
        """
        noise_words = set(noise_words)
        index = self.indexer.build_index(documents, noise_words)
        return self._use_index(index, noise_words)

    def _require_index(self) -> QueryEngine:
        if self.query_engine is None:
            raise RuntimeError("Index not built. Call make_index() or build_index() first.")
        return self.query_engine

    def top5search(self, kw1: str, kw2: str) -> Optional[List[str]]:
        """
        Documents containing kw1 or kw2, best first.

        Keywords are used exactly as given; see search() for free text.

        Returns:
            Up to TOP_K_RESULTS document names, or None if nothing matched.
        """
        return self._require_index().top_matches(kw1, kw2)

    def parse_query(self, query: str) -> List[str]:
        """
        Turn a query string into two keywords.

        Accepts "kw1 kw2" or "kw1 or kw2". Words that do not normalize to a
        keyword become empty strings, which match nothing. A single word is
        paired with an empty keyword; words after the second are ignored.
        """
        words = [w for w in _OR_SPLIT.split(query.strip()) if w]
        if len(words) > 2:
            logger.warning("Only two keywords are supported; ignoring %s", words[2:])
        words = (words + ["", ""])[:2]
        return [self.extractor.get_keyword(w) or "" for w in words]

    def search(self, query: str) -> Tuple[List[str], List[Occurrence]]:
        """
        Search for documents matching a free-text "kw1 or kw2" query.

        Args:
            query: Query string.

        Returns:
            Tuple of (keywords, ranked occurrences). The keywords are the
            ones actually searched for, after normalization and correction.
        """
        engine = self._require_index()
        keywords = self.parse_query(query)

        if self.config.AUTO_CORRECT_ENABLED:
            keywords, changes = self.auto_correct.autocorrect_query_words(
                keywords, self.index, self.by_len_index
            )
            if changes:
                logger.info("Query corrections: %s", changes)

        return keywords, engine.top_occurrences(keywords[0], keywords[1])

    def interactive_search(self) -> None:
        """
        Start an interactive search session.

        Type 'exit' or 'quit' to end the session.
        """
        self._require_index()

        print("\n=== Interactive Search ===")
        print("Enter two keywords, e.g. 'cat or dog'. Type 'exit' or 'quit' to quit.")

        while True:
            try:
                query = input("Search: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nExiting.")
                break

            if not query:
                continue
            if query.lower() in ('exit', 'quit'):
                print("Goodbye!")
                break

            keywords, ranked = self.search(query)
            self.result_formatter.print_results_table(ranked, keywords)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the built index.

        Returns:
            Dictionary containing various statistics.
        """
        if self.index is None:
            return {"error": "Index not built"}
        stats = self.index.summarize()
        stats["noise_words"] = len(self.extractor.noise_words)
        return stats
