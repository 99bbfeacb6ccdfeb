#===============================================================================
#  Desktop_App_Launcher | matching.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Fuzzy filtering for the picker. Kept free of Qt so it can be reused and
#  tested without a display.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple


def _subsequence(term: str, text: str) -> bool:
    it = iter(text)
    return all(ch in it for ch in term)


def _score(query: str, candidate: str) -> Optional[Tuple[int, int]]:
    """Return a sort key for a match (lower is better) or None."""
    text = candidate.lower()
    scattered = 0
    first_hit = len(text)
    for term in query.lower().split():
        pos = text.find(term)
        if pos >= 0:
            first_hit = min(first_hit, pos)
        elif _subsequence(term, text):
            scattered += 1
        else:
            return None
    return scattered, first_hit


def fuzzy_match(query: str, candidate: str) -> bool:
    """Every whitespace-separated term must appear in order (case-insensitive)."""
    return _score(query, candidate) is not None


def filter_candidates(query: str, names: Iterable[str]) -> List[str]:
    """Filter and rank names for a query.

    Empty query keeps the input order. Otherwise names where every term is a
    plain substring rank before scattered matches, earlier hits first; ties
    keep input order.
    """
    names = list(names)
    if not query.strip():
        return names

    scored = []
    for idx, name in enumerate(names):
        s = _score(query, name)
        if s is not None:
            scored.append((s, idx, name))
    scored.sort()
    return [name for _s, _idx, name in scored]
