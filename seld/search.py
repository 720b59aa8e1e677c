"""
seld/search.py

Query functions over a loaded DictionaryIndex.

search_entries ranks matches in three tiers, exact > prefix > substring, all
compared case-insensitively.  Each distinct word appears once, represented by
its first entry in index order.  Instead of scanning the index once per tier,
every entry is classified in a single pass and the tier buckets are
concatenated; within a bucket, index order is kept.
"""

from __future__ import annotations
from typing import Iterable, List

from .index import DictionaryIndex
from .schemas import IndexEntry

EXACT, PREFIX, SUBSTRING = 0, 1, 2


def _tier(lowered_word: str, q: str):
    if lowered_word == q:
        return EXACT
    if lowered_word.startswith(q):
        return PREFIX
    if q in lowered_word:
        return SUBSTRING
    return None


def search_entries(index: DictionaryIndex, query: str, limit: int) -> List[IndexEntry]:
    if not query or limit <= 0:
        return []

    q = query.lower()
    buckets: List[List[IndexEntry]] = [[], [], []]
    seen = set()

    for entry, lw in zip(index.entries, index.lowered):
        tier = _tier(lw, q)
        if tier is None or entry.word in seen:
            continue
        seen.add(entry.word)
        buckets[tier].append(entry)
        # exact matches alone fill the limit: nothing later can outrank them
        if len(buckets[EXACT]) >= limit:
            break

    results = buckets[EXACT] + buckets[PREFIX] + buckets[SUBSTRING]
    return results[:limit]


def exact_match(index: DictionaryIndex, word: str) -> bool:
    # case-sensitive, unlike search_entries
    return word in index.words


def find_existing_words(index: DictionaryIndex, words: Iterable[str]) -> List[str]:
    """Subset of `words` present in the index, in input order (duplicates kept)."""
    known = index.words
    return [w for w in words if w in known]


def list_entries(index: DictionaryIndex, limit: int) -> List[IndexEntry]:
    """First `limit` distinct words in index order."""
    if limit <= 0:
        return []
    unique = {}
    for entry in index.entries:
        if entry.word not in unique:
            unique[entry.word] = entry
            if len(unique) >= limit:
                break
    return list(unique.values())
