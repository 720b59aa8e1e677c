from __future__ import annotations
import asyncio
from pathlib import Path
from typing import Tuple

from .managers.loader import Source

def file_source(index_path, data_path) -> Source:
    """Read the .idx and .dict files from disk, off the event loop."""
    index_path, data_path = Path(index_path), Path(data_path)

    async def acquire() -> Tuple[bytes, bytes]:
        idx = await asyncio.to_thread(index_path.read_bytes)
        data = await asyncio.to_thread(data_path.read_bytes)
        return idx, data

    return acquire

def bytes_source(index: bytes, data: bytes) -> Source:
    """Serve buffers that are already in memory."""
    async def acquire() -> Tuple[bytes, bytes]:
        return index, data

    return acquire
