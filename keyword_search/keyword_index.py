"""
Global keyword index.

Maps each keyword to its ranked occurrence list. The index only grows:
documents are merged one at a time and never removed.
"""

import logging
from typing import Dict, Iterator, List, Optional, Set, Any

from .exceptions import DuplicateDocumentError
from .occurrence import Occurrence
from .ranked_list import insert_last_occurrence, is_ranked

logger = logging.getLogger(__name__)


class KeywordIndex:
    """Keyword -> occurrences in descending frequency order."""

    def __init__(self):
        """Create an empty index."""
        self._index: Dict[str, List[Occurrence]] = {}
        self._documents: Set[str] = set()

    @property
    def documents(self) -> Set[str]:
        """Names of all documents merged so far."""
        return set(self._documents)

    def merge(self, keywords: Dict[str, Occurrence], document: Optional[str] = None) -> None:
        """
        Merge one document's keywords into the index.

        Each occurrence is appended to its keyword's list and moved into its
        ranked position. The order in which keywords are merged does not
        matter since each keyword's list is independent.

        Re-indexing is rejected: merging a document that is already in the
        index raises DuplicateDocumentError and leaves the index unchanged.

        Args:
            keywords: Keyword -> occurrence for a single document.
            document: Name of the document. Required to record a document
                that has no keywords; otherwise taken from the occurrences.

        Raises:
            DuplicateDocumentError: If the document was merged before.
            ValueError: If the occurrences name more than one document, or a
                document other than the one given.
        """
        names = {occ.document for occ in keywords.values()}
        if document is not None:
            names.add(document)
        if len(names) > 1:
            raise ValueError(f"Cannot merge occurrences from different documents: {sorted(names)}")
        if not names:
            return

        name = names.pop()
        if name in self._documents:
            raise DuplicateDocumentError(name)

        for keyword, occurrence in keywords.items():
            occurrences = self._index.get(keyword)
            if occurrences is None:
                self._index[keyword] = [occurrence]
            else:
                occurrences.append(occurrence)
                insert_last_occurrence(occurrences)

        self._documents.add(name)
        logger.debug("Merged %d keywords from %s", len(keywords), name)

    def get_occurrences(self, keyword: Any) -> List[Occurrence]:
        """
        Get the ranked occurrence list for a keyword.

        Unknown, empty or non-string keywords have no occurrences.
        """
        if not isinstance(keyword, str):
            return []
        return self._index.get(keyword, [])

    def keywords(self) -> List[str]:
        return list(self._index)

    def document_frequency(self, keyword: str) -> int:
        """Number of documents containing the keyword."""
        return len(self.get_occurrences(keyword))

    def collection_frequency(self, keyword: str) -> int:
        """Total occurrences of the keyword across all documents."""
        return sum(occ.frequency for occ in self.get_occurrences(keyword))

    def check_invariants(self) -> bool:
        """Return True if every list is ranked and names each document once."""
        for occurrences in self._index.values():
            if not is_ranked(occurrences):
                return False
            if len({occ.document for occ in occurrences}) != len(occurrences):
                return False
        return True

    def summarize(self) -> Dict[str, Any]:
        """
        Compute and log summary statistics of the index.

        Returns:
            Dictionary of statistics.
        """
        num_keywords = len(self._index)
        lengths = sorted(len(occs) for occs in self._index.values())
        total = sum(lengths)

        stats = {
            "documents": len(self._documents),
            "keywords": num_keywords,
            "occurrences": total,
            "avg_occurrences_per_keyword": round(total / num_keywords, 2) if num_keywords else 0.0,
        }
        if lengths:
            stats["min_list_length"] = lengths[0]
            stats["max_list_length"] = lengths[-1]
            stats["median_list_length"] = lengths[len(lengths) // 2]

        logger.info(
            "Index: %d keywords, %d occurrences across %d documents",
            num_keywords, total, len(self._documents),
        )
        return stats

    def __contains__(self, keyword) -> bool:
        return isinstance(keyword, str) and keyword in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)
