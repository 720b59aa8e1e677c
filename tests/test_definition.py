# tests/test_definition.py
from seld.codec import decode_index, encode_index
from seld.index import DictionaryIndex, HOMOGRAPH_SEPARATOR


def test_single_entry_returned_as_is(build_dictionary):
    idx, data = build_dictionary([("cat", "<b>cat</b> a feline")])
    index = DictionaryIndex(decode_index(idx), data)
    assert index.definition("cat") == "<b>cat</b> a feline"


def test_homographs_joined_in_index_order():
    # payload "B" sits before "A" in the data file; index order decides
    data = b"BA"
    idx = encode_index([("bank", 1, 1), ("bank", 0, 1)])
    index = DictionaryIndex(decode_index(idx), data)
    assert index.definition("bank") == "A" + HOMOGRAPH_SEPARATOR + "B"


def test_separator_is_not_definition_text(build_dictionary, sample_records):
    idx, data = build_dictionary(sample_records)
    index = DictionaryIndex(decode_index(idx), data)
    merged = index.definition("bank")
    assert merged.split(HOMOGRAPH_SEPARATOR) == [
        "<i>n.</i> side of a river",
        "<i>n.</i> place that keeps money",
    ]
    assert HOMOGRAPH_SEPARATOR not in index.definition("cat")


def test_missing_word_is_none(build_dictionary):
    idx, data = build_dictionary([("cat", "feline")])
    index = DictionaryIndex(decode_index(idx), data)
    assert index.definition("dog") is None
    assert index.definition("Cat") is None


def test_out_of_range_entry_reads_empty():
    idx = encode_index([("ghost", 10, 5)])
    index = DictionaryIndex(decode_index(idx), b"short")
    assert index.definition("ghost") == ""


def test_out_of_range_homograph_does_not_stop_merge():
    idx = encode_index([("bank", 0, 1), ("bank", 3, 100), ("bank", 1, 1)])
    index = DictionaryIndex(decode_index(idx), b"AB")
    assert index.definition("bank") == HOMOGRAPH_SEPARATOR.join(["A", "", "B"])


def test_read_range_bounds():
    index = DictionaryIndex([], b"hello")
    assert index.read_range(0, 5) == "hello"
    assert index.read_range(5, 0) == ""
    assert index.read_range(4, 2) == ""
    assert index.read_range(-1, 2) == ""


def test_utf8_payload(build_dictionary):
    idx, data = build_dictionary([("ගස", "<p>ගස් - tree</p>")])
    index = DictionaryIndex(decode_index(idx), data)
    assert index.definition("ගස") == "<p>ගස් - tree</p>"
