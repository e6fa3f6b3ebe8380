"""Name search with highlight spans, used to filter the tweak hierarchy."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")

Span = Tuple[int, int]


@dataclass(frozen=True)
class SearchMatch(Generic[T]):
    element: T
    highlights: List[Span]


def _fold(text: str) -> Tuple[str, List[int]]:
    """Casefold and strip diacritics, keeping a map from folded to original offsets."""
    folded: List[str] = []
    offsets: List[int] = []
    for index, char in enumerate(text):
        for piece in unicodedata.normalize("NFKD", char):
            if unicodedata.combining(piece):
                continue
            for lowered in piece.casefold():
                folded.append(lowered)
                offsets.append(index)
    return "".join(folded), offsets


def find_span(text: str, query: str) -> Optional[Span]:
    """First case- and diacritic-insensitive occurrence of ``query`` in ``text``."""
    folded_text, offsets = _fold(text)
    folded_query, _ = _fold(query)
    if not folded_query:
        return None
    start = folded_text.find(folded_query)
    if start < 0:
        return None
    end = start + len(folded_query) - 1
    return offsets[start], offsets[end] + 1


def search(
    items: Iterable[T],
    query: str,
    key: Callable[[T], str] = str,
    by_words: bool = True,
) -> List[SearchMatch[T]]:
    """
    Keep items whose text contains the query.

    An empty query keeps everything without highlights. With ``by_words``
    every whitespace-separated word must occur; each match carries one span
    per word.
    """
    if not query.strip():
        return [SearchMatch(element=item, highlights=[]) for item in items]
    words = query.split() if by_words else [query]
    matches: List[SearchMatch[T]] = []
    for item in items:
        source = key(item)
        spans = [find_span(source, word) for word in words]
        if all(span is not None for span in spans):
            matches.append(SearchMatch(element=item, highlights=spans))
    return matches
