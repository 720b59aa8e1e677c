from __future__ import annotations
from typing import Iterable, List, Optional

from . import config
from .index import DictionaryIndex
from .managers.loader import DictionaryLoadError, IndexLoader, Source
from .schemas import IndexEntry, IndexStatus
from .search import exact_match, find_existing_words, list_entries, search_entries
from .sources import file_source

# Dictionary lookup service backed by a StarDict-style .idx/.dict pair.
# Every query waits for the (memoized) load first.  If loading failed, queries
# answer as if the dictionary were empty; only load() itself raises.

class DictionaryService:
    def __init__(self, source: Source):
        self.loader = IndexLoader(source)

    async def load(self) -> DictionaryIndex:
        return await self.loader.load()

    async def _index(self) -> Optional[DictionaryIndex]:
        try:
            return await self.loader.load()
        except DictionaryLoadError:
            return None

    @property
    def status(self) -> IndexStatus:
        index = self.loader.index
        error = self.loader.last_error
        return IndexStatus(
            status=self.loader.status,
            entries=len(index) if index is not None else 0,
            lastError=str(error) if error is not None else None,
        )

    async def exact_match(self, word: str) -> bool:
        index = await self._index()
        if index is None:
            return False
        return exact_match(index, word)

    async def find_existing_words(self, words: Iterable[str]) -> List[str]:
        index = await self._index()
        if index is None:
            return []
        return find_existing_words(index, words)

    async def search(self, query: str, limit: int = config.SEARCH_LIMIT) -> List[IndexEntry]:
        index = await self._index()
        if index is None:
            return []
        return search_entries(index, query, limit)

    async def get_definition(self, word: str) -> Optional[str]:
        index = await self._index()
        if index is None:
            return None
        return index.definition(word)

    async def get_list(self, limit: int = config.LIST_LIMIT) -> List[IndexEntry]:
        index = await self._index()
        if index is None:
            return []
        return list_entries(index, limit)

# Singleton instance
service = DictionaryService(file_source(config.INDEX_PATH, config.DICT_PATH))
