"""
Ranked occurrence lists.

A keyword's occurrences are kept in non-increasing order of frequency.
New occurrences are appended and then moved into place with a binary
search over the already-sorted prefix.
"""

from typing import List, Optional

from .occurrence import Occurrence


def is_ranked(occurrences: List[Occurrence]) -> bool:
    """Return True if frequencies never increase along the list."""
    return all(
        occurrences[i].frequency >= occurrences[i + 1].frequency
        for i in range(len(occurrences) - 1)
    )


def insert_last_occurrence(occurrences: List[Occurrence]) -> Optional[List[int]]:
    """
    Move the last occurrence of the list into its ranked position.

    Elements 0..n-2 must already be in descending frequency order. The last
    element is removed, its position is found by binary search over the
    remaining prefix, and it is inserted back at that position.

    Ties: as soon as the search compares against an element with the same
    frequency, the new occurrence goes immediately before that element.
    Within a run of equal frequencies this is wherever the search first
    lands, not necessarily the start of the run. For example inserting
    (d,5) into [(a,5), (b,5), (c,5)] first compares against index 1 and
    yields [(a,5), (d,5), (b,5), (c,5)].

    Args:
        occurrences: List whose last element is not yet positioned.

    Returns:
        Midpoint indexes examined by the search, in order, or None if the
        list has a single element.
    """
    if len(occurrences) <= 1:
        return None

    new = occurrences.pop()
    midpoints = []
    lo, hi = 0, len(occurrences) - 1
    position = None

    while lo <= hi:
        mid = (lo + hi) // 2
        midpoints.append(mid)
        mid_freq = occurrences[mid].frequency
        if new.frequency > mid_freq:
            hi = mid - 1
        elif new.frequency < mid_freq:
            lo = mid + 1
        else:
            position = mid
            break

    if position is None:
        position = lo
    occurrences.insert(position, new)

    assert is_ranked(occurrences), f"occurrence list out of order: {occurrences}"
    return midpoints
