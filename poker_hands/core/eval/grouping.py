"""
Rank multiplicity grouping.
"""

from collections import Counter
from typing import Dict, List, Sequence


def group_by_count(values: Sequence[int]) -> Dict[int, List[int]]:
    """
    Group ranks by how many times each one occurs.

    Ranks inside a bucket keep their first-encounter order; callers that
    need high/low must compare numerically.

    Args:
        values: card ranks, duplicates allowed

    Returns:
        Dict[int, List[int]]: occurrence count -> distinct ranks with that count

    Examples:
        >>> group_by_count([9, 9, 5, 5, 3])
        {2: [9, 5], 1: [3]}
    """
    groups: Dict[int, List[int]] = {}
    for value, count in Counter(values).items():
        groups.setdefault(count, []).append(value)
    return groups
