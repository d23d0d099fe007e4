"""Fuzzy label matching and ranking for the search overlay.

Scores fall in [0, 1] and are tiered so that a better class of match always
outranks a worse one:

- empty query: 1.0 for every label
- exact match (case-insensitive): 1.0
- prefix match: 0.95
- substring match: (0.8, 0.9], earlier positions score higher
- ordered subsequence match: at most 0.8
- anything else: 0.0
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")

DEFAULT_MIN_SCORE = 0.1

EXACT_SCORE = 1.0
PREFIX_SCORE = 0.95
SUBSTRING_CEILING = 0.9
SUBSTRING_SPREAD = 0.1
SUBSEQUENCE_SCALE = 0.8


@dataclass(frozen=True)
class FuzzyMatch(Generic[T]):
    """A candidate paired with its score. `item` is the caller's own object."""

    item: T
    score: float


def score(query: str, label: str) -> float:
    """Score how well `query` matches `label`."""
    q = (query or "").lower()
    t = (label or "").lower()

    if not q:
        return 1.0
    if not t:
        return 0.0

    if t == q:
        return EXACT_SCORE
    if t.startswith(q):
        return PREFIX_SCORE

    pos = t.find(q)
    if pos > 0:
        return SUBSTRING_CEILING - (pos / len(t)) * SUBSTRING_SPREAD

    return _subsequence_score(q, t)


def _subsequence_score(q: str, t: str) -> float:
    """Greedy left-to-right subsequence scan. Both inputs are lower-cased."""
    matched = 0
    run = 0
    longest_run = 0

    for ch in t:
        if matched >= len(q):
            break
        if ch == q[matched]:
            matched += 1
            run += 1
            longest_run = max(longest_run, run)
        else:
            run = 0

    if matched < len(q):
        return 0.0

    match_ratio = matched / len(q)
    consecutive_bonus = longest_run / len(q)
    length_penalty = min(1.0, len(q) / len(t))

    return (match_ratio * 0.4 + consecutive_bonus * 0.4 + length_penalty * 0.2) * SUBSEQUENCE_SCALE


def search(
    items: Iterable[T],
    query: str,
    label_of: Callable[[T], str],
    min_score: float = DEFAULT_MIN_SCORE,
) -> list[FuzzyMatch[T]]:
    """Rank `items` against `query`, best first.

    Items scoring below `min_score` are dropped. Ties keep their input order.
    A blank (empty or whitespace-only) query returns every item with score 1
    in input order.
    """
    if not (query or "").strip():
        return [FuzzyMatch(item, 1.0) for item in items]

    scored = [FuzzyMatch(item, score(query, label_of(item))) for item in items]
    kept = [m for m in scored if m.score >= min_score]
    # list.sort is stable, so equal scores keep their original order.
    kept.sort(key=lambda m: m.score, reverse=True)
    return kept
