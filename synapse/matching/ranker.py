"""
Filtering and ordering of scored results.

Ordering contract: descending score, and equal scores keep their input
order. ``sorted`` is stable, including with ``reverse=True``, so the
tie-break is exactly the order items were produced in.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar


class Scored(Protocol):
    score: int


T = TypeVar("T", bound=Scored)


def rank(items: Iterable[T]) -> list[T]:
    """Drop items scoring 0 or less and sort the rest by descending score."""
    return sorted(
        (item for item in items if item.score > 0),
        key=lambda item: item.score,
        reverse=True,
    )


def merge_feed(people: Sequence[T], projects: Sequence[T], articles: Sequence[T]) -> list[T]:
    """Concatenate the three feed branches (people, projects, articles) and rank them."""
    return rank([*people, *projects, *articles])


__all__ = ["rank", "merge_feed"]
