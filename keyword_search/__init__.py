"""
Keyword Search Engine

An in-memory keyword index over a static document collection, answering
"kw1 or kw2" queries with the top documents ranked by keyword frequency.

Main components:
- KeywordSearchEngine: Main search engine class
- KeywordExtractor: Keyword normalization and per-document counting
- KeywordIndex: Keyword -> ranked occurrence lists
- Indexer: Batch index construction from documents on disk
- QueryEngine: Top-5 OR queries over two keywords
- AutoCorrect: Query keyword correction using Levenshtein distance
"""

from .occurrence import Occurrence
from .ranked_list import insert_last_occurrence, is_ranked
from .keyword_index import KeywordIndex
from .extractor import KeywordExtractor
from .indexer import Indexer
from .query import QueryEngine
from .autocorrect import AutoCorrect
from .utils import ResultFormatter
from .exceptions import SearchEngineError, DocumentNotFoundError, DuplicateDocumentError
from .search_engine import KeywordSearchEngine

__version__ = "1.0.0"

__all__ = [
    "KeywordSearchEngine",
    "KeywordExtractor",
    "KeywordIndex",
    "Indexer",
    "QueryEngine",
    "AutoCorrect",
    "ResultFormatter",
    "Occurrence",
    "insert_last_occurrence",
    "is_ranked",
    "SearchEngineError",
    "DocumentNotFoundError",
    "DuplicateDocumentError",
]
