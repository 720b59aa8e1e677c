from __future__ import annotations
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .schemas import IndexEntry

HOMOGRAPH_SEPARATOR = '<hr class="homograph-separator" />'

class DictionaryIndex:
    """
    Decoded index entries plus the data buffer they point into.

    Entries are kept as a sequence, not a word -> entry map: the same spelling
    may occur several times (homographs), each with its own byte range.
    Immutable once built; safe to share between concurrent queries.
    """

    def __init__(self, entries: Sequence[IndexEntry], data: bytes):
        self.entries: Tuple[IndexEntry, ...] = tuple(entries)
        self.data = bytes(data)
        # lower-cased words, aligned with self.entries
        self.lowered: Tuple[str, ...] = tuple(e.word.lower() for e in self.entries)
        self._words: Optional[FrozenSet[str]] = None

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def words(self) -> FrozenSet[str]:
        # materialized on first use, then reused by every membership test
        if self._words is None:
            self._words = frozenset(e.word for e in self.entries)
        return self._words

    def entries_for(self, word: str) -> List[IndexEntry]:
        return [e for e in self.entries if e.word == word]

    def read_range(self, offset: int, size: int) -> str:
        """Decode data[offset:offset+size] as UTF-8; out-of-range reads give ''."""
        if offset < 0 or size < 0 or offset + size > len(self.data):
            return ''
        return self.data[offset:offset + size].decode('utf-8', errors='replace')

    def definition(self, word: str) -> Optional[str]:
        """
        Definition text for `word`, or None if the word is absent.
        Homographs are joined in index order with HOMOGRAPH_SEPARATOR.
        """
        matches = self.entries_for(word)
        if not matches:
            return None
        parts = [self.read_range(e.offset, e.size) for e in matches]
        if len(parts) == 1:
            return parts[0]
        return HOMOGRAPH_SEPARATOR.join(parts)
