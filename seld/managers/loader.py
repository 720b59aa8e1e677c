from __future__ import annotations
import asyncio
import logging
from typing import Awaitable, Callable, Optional, Tuple

from ..codec import decode_index
from ..index import DictionaryIndex
from ..schemas import LoadStatus

logger = logging.getLogger(__name__)

# Host-supplied acquisition: resolves to (index bytes, data bytes)
Source = Callable[[], Awaitable[Tuple[bytes, bytes]]]

class DictionaryLoadError(RuntimeError):
    """The index could not be acquired or decoded."""

class IndexLoader:
    """
    Single-flight, memoized loader for a DictionaryIndex.

    idle -> loading (one shared task) -> loaded
                                      -> idle again on failure, so the next
                                         call retries
    """

    def __init__(self, source: Source):
        self.source = source
        self.index: Optional[DictionaryIndex] = None
        self.last_error: Optional[BaseException] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def status(self) -> LoadStatus:
        if self.index is not None:
            return 'loaded'
        if self._task is not None and not self._task.done():
            return 'loading'
        return 'idle'

    async def load(self) -> DictionaryIndex:
        if self.index is not None:
            return self.index
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run())
        # shield: a cancelled caller must not cancel the attempt other callers share
        return await asyncio.shield(self._task)

    async def _run(self) -> DictionaryIndex:
        try:
            idx_bytes, dict_bytes = await self.source()
            index = DictionaryIndex(decode_index(idx_bytes), dict_bytes)
        except Exception as exc:
            self._task = None
            self.last_error = exc
            logger.error('Failed to load dictionary: %s', exc, exc_info=True)
            raise DictionaryLoadError(str(exc) or type(exc).__name__) from exc
        self.index = index
        self.last_error = None
        logger.info('Dictionary loaded. Words count: %d', len(index))
        return index

    def reset(self) -> bool:
        """
        Drop a loaded index so the next load() acquires and decodes again.
        An in-flight attempt is left alone; returns False in that case.
        """
        if self.status == 'loading':
            return False
        self._task = None
        self.index = None
        return True
