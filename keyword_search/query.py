"""
Two-keyword OR queries over a keyword index.

This module ranks the documents containing either of two keywords by
merging the keywords' ranked occurrence lists.
"""

from typing import List, Optional

from .keyword_index import KeywordIndex
from .occurrence import Occurrence


class QueryEngine:
    """Answers "kw1 or kw2" queries against a built index."""

    def __init__(self, index: KeywordIndex, config):
        """Initialize with an index and configuration."""
        self.index = index
        self.config = config

    def top_occurrences(self, kw1: str, kw2: str, limit: int = None) -> List[Occurrence]:
        """
        Rank the documents containing kw1 or kw2.

        Both occurrence lists are already in descending frequency order, so
        they are merged as in the merge step of merge sort. When the heads
        have equal frequency the kw1 head goes first. A document is ranked
        by the first occurrence of it the merge reaches; its occurrence in
        the other list is skipped. Keywords are looked up as given.

        Args:
            kw1: First keyword.
            kw2: Second keyword.
            limit: Maximum number of documents. Defaults to TOP_K_RESULTS.

        Returns:
            Up to limit occurrences, one per document, in rank order.
        """
        if limit is None:
            limit = self.config.TOP_K_RESULTS

        first = self.index.get_occurrences(kw1)
        second = self.index.get_occurrences(kw2)

        ranked = []
        seen = set()
        i = j = 0
        while len(ranked) < limit and (i < len(first) or j < len(second)):
            if j >= len(second) or (i < len(first) and first[i].frequency >= second[j].frequency):
                occurrence = first[i]
                i += 1
            else:
                occurrence = second[j]
                j += 1

            if occurrence.document in seen:
                continue
            seen.add(occurrence.document)
            ranked.append(occurrence)

        return ranked

    def top_matches(self, kw1: str, kw2: str) -> Optional[List[str]]:
        """
        Names of the top documents containing kw1 or kw2.

        Args:
            kw1: First keyword.
            kw2: Second keyword.

        Returns:
            Up to TOP_K_RESULTS document names in descending frequency
            order, or None if neither keyword occurs anywhere.
        """
        ranked = self.top_occurrences(kw1, kw2)
        if not ranked:
            return None
        return [occ.document for occ in ranked]
