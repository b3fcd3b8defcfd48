"""
Span filtering utilities for mention matching.
"""

from typing import List, Tuple, TypeVar

S = TypeVar("S", bound=Tuple[int, int, str])


def filter_spans(spans: List[S]) -> List[S]:
    """
    Filter overlapping spans, keeping the longest.

    When spans overlap, the longest span is kept and shorter
    overlapping spans are discarded.

    Args:
        spans: List of (start, end, label) tuples over the same text

    Returns:
        Filtered list of non-overlapping spans, sorted by start position
    """
    if not spans:
        return []

    # Sort by length (descending) then by start position
    sorted_spans = sorted(spans, key=lambda s: (-(s[1] - s[0]), s[0]))

    result = []
    taken: List[Tuple[int, int]] = []

    for span in sorted_spans:
        start, end = span[0], span[1]
        if all(end <= t_start or start >= t_end for t_start, t_end in taken):
            result.append(span)
            taken.append((start, end))

    # Sort by start position for final result
    return sorted(result, key=lambda s: s[0])
