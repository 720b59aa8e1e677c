# tests/conftest.py
import struct

import pytest

from seld.dictionary import DictionaryService
from seld.sources import bytes_source


def pack_dictionary(records):
    """
    Build an (.idx, .dict) byte pair from (word, definition) records.
    Definitions are laid out back-to-back in record order.
    """
    idx = bytearray()
    data = bytearray()
    for word, text in records:
        payload = text.encode("utf-8")
        idx += word.encode("utf-8") + b"\x00" + struct.pack(">II", len(data), len(payload))
        data += payload
    return bytes(idx), bytes(data)


@pytest.fixture
def build_dictionary():
    return pack_dictionary


@pytest.fixture
def make_service():
    def _make(records):
        return DictionaryService(bytes_source(*pack_dictionary(records)))
    return _make


@pytest.fixture
def sample_records():
    return [
        ("scatter", "<b>scatter</b> to throw about"),
        ("bank", "<i>n.</i> side of a river"),
        ("catalog", "a list of items"),
        ("cat", "a small domesticated feline"),
        ("bank", "<i>n.</i> place that keeps money"),
        ("Cat", "a proper name"),
        ("ගස", "tree"),
    ]
