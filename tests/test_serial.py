import pytest

from bounceengine.errors import OutOfBoundsError
from bounceengine.serial import (
    QWORD_SIZE,
    Table,
    create_string,
    create_table,
    dword_to_int,
    int_to_xword,
    parse_string,
    parse_table,
    qword_to_int,
    word_to_int,
)

SAMPLE = b"\xbe\xef\xbe\xef\xbe\xef\xaa\xbb\xcc\xdd\xee\xff"


def test_qword_reads_first_eight_bytes():
    assert qword_to_int(SAMPLE) == 0xBEEFBEEFBEEFAABB


def test_dword_reads_first_four_bytes():
    assert dword_to_int(SAMPLE) == 0xBEEFBEEF


def test_word_reads_first_two_bytes():
    assert word_to_int(SAMPLE) == 0xBEEF


def test_short_inputs():
    assert word_to_int(b"") == 0
    assert word_to_int(b"\x07") == 7
    assert dword_to_int(b"\x07") == 7
    assert qword_to_int(b"") == 0


def test_int_to_xword_packs_characters():
    assert int_to_xword((ord("A") << 8) + ord("B"), 2) == b"AB"


@pytest.mark.parametrize("n", [0, 1, 255, 256, 65535, 2**40 + 17, 2**64 - 1])
def test_qword_round_trip(n):
    assert qword_to_int(int_to_xword(n, 8)) == n


@pytest.mark.parametrize("n", [0, 300, 70000, 2**33 + 5])
def test_word_truncates_to_low_bytes(n):
    assert word_to_int(int_to_xword(n, 2)) == n & 0xFFFF
    assert len(int_to_xword(n, 2)) == 2


def test_table_round_trip():
    elements = [b"this", b"is", b"element"]
    raw = create_table(elements)
    table = parse_table(raw)
    assert table.size == len(raw)
    assert table.count_elements() == len(elements)
    assert [table.element(i) for i in range(len(elements))] == elements
    assert table.data == b"".join(elements)


def test_table_element_out_of_bounds():
    table = parse_table(create_table([b"a", b"b"]))
    with pytest.raises(OutOfBoundsError):
        table.element(2)


def test_table_with_serialized_strings_keeps_nul_bytes():
    elements = [create_string(b"hello"), create_string(b"world!")]
    table = parse_table(create_table(elements))
    assert [parse_string(table.element(i)) for i in range(2)] == [b"hello", b"world!"]


def test_empty_table_round_trip():
    table = parse_table(create_table([]))
    assert table.count_elements() == 0
    assert table.data == b""


def test_table_accepts_text_elements():
    table = parse_table(create_table(["is", "text"]))
    assert table.element(1) == "text".encode("utf-8")


def test_describe_mentions_header_and_size():
    table = parse_table(create_table([b"this", b"is"]))
    text = table.describe()
    assert f"Size:{table.size}" in text
    assert f"Header size: {table.header_size}" in text
    assert text.endswith("thisis")


def test_parse_table_rejects_truncated_buffer():
    raw = create_table([b"this", b"is"])
    with pytest.raises(ValueError):
        parse_table(raw[:-1])
    with pytest.raises(ValueError):
        parse_table(raw[:5])


def test_table_is_frozen_value():
    table = parse_table(create_table([b"x"]))
    assert table == Table(table.size, table.header_size, table.indexes, table.data)


def test_string_round_trip():
    assert parse_string(create_string("I eat pastas")) == b"I eat pastas"


def test_parse_string_with_shorter_declared_length():
    body = create_string(b"I eat pastas")[QWORD_SIZE:]
    buffer = bytes([0, 0, 0, 0, 0, 0, 0, 0xA]) + body
    assert parse_string(buffer) == body[:0xA]


def test_parse_string_rejects_zero_length():
    with pytest.raises(ValueError):
        parse_string(create_string(b""))


def test_parse_string_rejects_oversized_length():
    with pytest.raises(ValueError):
        parse_string(int_to_xword(1000, 8) + b"abc")