import pytest

from trafficmon.text_utils import (
    count_one_bits,
    get_json_value_simple,
    get_number_bit,
    int_to_string,
    is_color_similar,
    normalize_font_name,
    set_number_bit,
    string_format,
    string_normalize,
    string_similar_degree,
    string_split,
    string_transform,
    transparent_color_convert,
)
from trafficmon.variant import Variant


def test_normalize_strips_blanks_and_controls():
    assert string_normalize("  hello \r\n") == "hello"
    assert string_normalize("\x00\t a b \x1f") == "a b"


def test_normalize_all_blank_becomes_empty():
    assert string_normalize(" \t\r\n ") == ""


def test_normalize_unchanged_when_clean():
    assert string_normalize("clean") == "clean"


def test_split_trims_and_skips_empty():
    assert string_split("a, b,,c ", ",") == ["a", "b", "c"]


def test_split_raw_matches_plain_split():
    text = " x;;y ;z"
    assert string_split(text, ";", skip_empty=False, trim=False) == text.split(";")


def test_split_with_string_separator():
    assert string_split("one::two:: three", "::") == ["one", "two", "three"]


def test_split_empty_separator_rejected():
    with pytest.raises(ValueError):
        string_split("abc", "")


def test_transform_ascii_only():
    assert string_transform("abcXYZ", True) == "abcXYZ".upper()
    assert string_transform("abcXYZ", False) == "abcXYZ".lower()
    assert string_transform("é", True) == "é"


def test_transform_round_trip():
    text = "Mixed Case 123"
    assert string_transform(string_transform(text, True), False) == text.lower()


def test_similarity_identical_and_empty():
    assert string_similar_degree("adapter", "adapter") == 1.0
    assert string_similar_degree("", "adapter") == 0.0
    assert string_similar_degree("adapter", "") == 0.0


def test_similarity_known_value():
    assert string_similar_degree("kitten", "sitting") == pytest.approx(4 / 7)


@pytest.mark.parametrize("a,b", [("Intel Ethernet", "Intel(R) Ethernet"), ("wifi", "lan"), ("abc", "cba")])
def test_similarity_symmetric_and_bounded(a, b):
    degree = string_similar_degree(a, b)
    assert 0.0 <= degree <= 1.0
    assert degree == pytest.approx(string_similar_degree(b, a))


def test_int_to_string_plain():
    for n in (0, 7, -15, 1234567):
        assert int_to_string(n) == str(n)


def test_int_to_string_separated():
    assert int_to_string(1234567, thousand_separation=True) == "1,234,567"


def test_int_to_string_separation_round_trip():
    for n in (1, 12, 123, 1234, 99999999):
        assert int(int_to_string(n, thousand_separation=True).replace(",", "")) == n


def test_int_to_string_negative_groups_sign():
    assert int_to_string(-123, thousand_separation=True) == "-,123"


def test_int_to_string_unsigned():
    assert int_to_string(-1, is_unsigned=True) == str(2**64 - 1)


def test_string_format_replaces_placeholders():
    result = string_format("<%1%>-<%2%>", "x", 5)
    assert result == "x-" + Variant(5).to_string()


def test_string_format_leaves_unmatched_placeholder():
    assert string_format("<%2%>", "a") == "<%2%>"


def test_json_value_lookup():
    text = '{"ip": "1.2.3.4", "location": "Somewhere"}'
    assert get_json_value_simple(text, "ip") == "1.2.3.4"
    assert get_json_value_simple(text, "location") == "Somewhere"


def test_json_numeric_and_missing():
    assert get_json_value_simple('{"n": 42}', "n") == "42"
    assert get_json_value_simple('{"n": 42}', "missing") == ""
    assert get_json_value_simple('{"n"}', "n") == ""


def test_count_one_bits_powers_of_two():
    for k in range(32):
        assert count_one_bits(1 << k) == 1
    assert count_one_bits(0) == 0


def test_bit_set_get_round_trip():
    num = 0
    for bit in (0, 5, 31):
        num = set_number_bit(num, bit, True)
        assert get_number_bit(num, bit)
    cleared = set_number_bit(num, 5, False)
    assert not get_number_bit(cleared, 5)
    assert get_number_bit(cleared, 31)
    assert count_one_bits(num) == count_one_bits(cleared) + 1


def test_color_similarity():
    assert is_color_similar(0x00112233, 0x00112233)
    assert not is_color_similar(0x00000000, 0x00FFFFFF)
    assert is_color_similar(0x00101010, 0x00202020) == is_color_similar(0x00202020, 0x00101010)


def test_transparent_color_zero_kept():
    assert transparent_color_convert(0) == 0


def test_transparent_color_changes_blue_when_equal_to_red():
    color = 0x00403020  # r=0x20, g=0x30, b=0x40 differ
    assert transparent_color_convert(color) == color
    equal = 0x00D3D2D3  # r == b
    converted = transparent_color_convert(equal)
    assert converted & 0xFFFF == equal & 0xFFFF
    assert abs(((converted >> 16) & 0xFF) - ((equal >> 16) & 0xFF)) == 1


def test_transparent_color_white_blue_decrements():
    converted = transparent_color_convert(0x00FFFFFF)
    assert (converted >> 16) & 0xFF < 0xFF
    assert converted & 0xFF == 0xFF


def test_normalize_font_name_with_weight():
    assert normalize_font_name("Segoe UI Semilight") == ("Segoe UI", 350)
    _, bold = normalize_font_name("Segoe UI Bold")
    _, light = normalize_font_name("Segoe UI Light")
    assert light < 350 < bold


def test_normalize_font_name_without_weight():
    assert normalize_font_name("Segoe UI") == ("Segoe UI", None)
    assert normalize_font_name("Arial") == ("Arial", None)


def test_normalize_font_name_truncates():
    name, weight = normalize_font_name("A" * 40 + " Bold")
    assert weight is not None
    assert len(name) <= 31
    assert set(name) == {"A"}