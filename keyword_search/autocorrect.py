"""
Auto-correction of query keywords.

Query keywords missing from the index are replaced by the closest indexed
keyword, using Levenshtein distance and keyword frequency.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple
from collections import defaultdict
from rapidfuzz.distance import Levenshtein

from .keyword_index import KeywordIndex

logger = logging.getLogger(__name__)


class AutoCorrect:
    """Suggests indexed keywords for misspelled query keywords."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def build_len_index(self, keywords: Iterable[str]) -> Dict[int, List[str]]:
        """
        Group keywords by length for candidate lookup.

        Args:
            keywords: Indexed keywords.

        Returns:
            Dictionary mapping keyword length to keywords of that length,
            each bucket sorted for deterministic suggestions.
        """
        index = defaultdict(list)
        for w in keywords:
            index[len(w)].append(w)
        for bucket in index.values():
            bucket.sort()
        return dict(index)

    def _candidate_words(self, word: str, by_len_index: Dict[int, List[str]],
                         max_len_diff: int) -> List[str]:
        L = len(word)
        candidates = []
        for dL in range(-max_len_diff, max_len_diff + 1):
            candidates.extend(by_len_index.get(L + dL, ()))
        return candidates

    def suggest_correction(self, word: str, index: KeywordIndex, by_len_index: Dict[int, List[str]],
                           max_dist: int = None) -> Tuple[Optional[str], Optional[int]]:
        """
        Suggest the closest indexed keyword for a word.

        Ties on distance go to the keyword with the higher collection
        frequency, then to the alphabetically first.

        Args:
            word: Keyword to correct.
            index: Index whose keywords are the vocabulary.
            by_len_index: Length index built from the index's keywords.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (best_keyword, distance) or (None, None) if none is
            within max_dist.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        best_word, best_dist, best_freq = None, None, -1
        for cand in self._candidate_words(word, by_len_index, max_dist):
            dist = Levenshtein.distance(word, cand, score_cutoff=max_dist)
            if dist > max_dist:
                continue
            freq = index.collection_frequency(cand)
            if (best_dist is None) or (dist < best_dist) or (dist == best_dist and freq > best_freq):
                best_word, best_dist, best_freq = cand, dist, freq
            if best_dist == 0:
                break

        return best_word, best_dist

    def autocorrect_query_words(self, words: List[str], index: KeywordIndex,
                                by_len_index: Dict[int, List[str]],
                                max_dist: int = None) -> Tuple[List[str], List[Tuple[str, str]]]:
        """
        Correct the query keywords that are not in the index.

        Empty keywords (words that did not normalize) are left alone.

        Args:
            words: Normalized query keywords.
            index: Index to correct against.
            by_len_index: Length index built from the index's keywords.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (corrected_words, changes) where changes lists
            (original, corrected) pairs.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        corrected = []
        changes = []
        for w in words:
            if not w or w in index or len(w) < self.config.MIN_WORD_LENGTH:
                corrected.append(w)
                continue

            suggestion, _dist = self.suggest_correction(w, index, by_len_index, max_dist=max_dist)
            if suggestion is not None and suggestion != w:
                corrected.append(suggestion)
                changes.append((w, suggestion))
                logger.debug("Corrected query keyword %r to %r", w, suggestion)
            else:
                corrected.append(w)

        return corrected, changes
