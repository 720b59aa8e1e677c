"""
seld/codec.py

Decoder for the StarDict-style index file.

The index is a flat run of records with no header and no padding:

    <word bytes, UTF-8> 0x00 <uint32 offset, big-endian> <uint32 size, big-endian>

Records are returned in the order they appear in the buffer; that order is
never assumed to be alphabetical.  A trailing record that is cut short (no
terminator, or fewer than 8 bytes after it) is dropped and everything decoded
before it is kept.
"""

from __future__ import annotations
import struct
from typing import List

from .schemas import IndexEntry

RANGE = struct.Struct('>II')  # offset, size


def decode_index(buffer) -> List[IndexEntry]:
    """Decode an index buffer into entries, in scan order.

    Accepts any bytes-like object.  Raises TypeError for anything else.
    """
    raw = buffer if isinstance(buffer, bytes) else memoryview(buffer).tobytes()
    end = len(raw)
    entries: List[IndexEntry] = []

    pos = 0
    while pos < end:
        nul = raw.find(b'\x00', pos)
        if nul < 0:
            break  # no terminator: trailing garbage
        if nul + 1 + RANGE.size > end:
            break  # truncated offset/size pair
        word = raw[pos:nul].decode('utf-8', errors='replace')
        offset, size = RANGE.unpack_from(raw, nul + 1)
        entries.append(IndexEntry(word=word, offset=offset, size=size))
        pos = nul + 1 + RANGE.size

    return entries


def encode_index(entries) -> bytes:
    """Inverse of decode_index; used to build index files from (word, offset, size) triples."""
    out = bytearray()
    for e in entries:
        if isinstance(e, IndexEntry):
            word, offset, size = e.word, e.offset, e.size
        else:
            word, offset, size = e
        if '\x00' in word:
            raise ValueError(f"Word may not contain a NUL byte: {word!r}")
        out += word.encode('utf-8')
        out.append(0)
        out += RANGE.pack(offset, size)
    return bytes(out)
