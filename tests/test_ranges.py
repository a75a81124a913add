import pytest

from media_server.modules.assets import (
    ByteRange,
    MalformedRangeError,
    RangeNotSatisfiableError,
    parse_range_header,
)


def test_parse_range_basic():
    assert parse_range_header("bytes=0-1023", 2048) == ByteRange(0, 1023)


def test_parse_range_open_end_defaults_to_last_byte():
    assert parse_range_header("bytes=900-", 1000) == ByteRange(900, 999)


def test_parse_range_suffix():
    assert parse_range_header("bytes=-200", 1000) == ByteRange(800, 999)


def test_parse_range_suffix_longer_than_content_covers_whole_file():
    assert parse_range_header("bytes=-5000", 1000) == ByteRange(0, 999)


def test_parse_range_single_byte():
    byte_range = parse_range_header("bytes=999-999", 1000)
    assert byte_range.length == 1


def test_parse_range_tolerates_case_and_whitespace():
    assert parse_range_header("  Bytes = 10 - 19 ", 100) == ByteRange(10, 19)


def test_parse_range_uses_first_of_multiple_ranges():
    assert parse_range_header("bytes=0-9, 20-29", 100) == ByteRange(0, 9)


@pytest.mark.parametrize(
    "header",
    ["nope", "bytes 0-10", "items=0-10", "bytes=abc-10", "bytes=0-x", "bytes=5", "bytes=-", "bytes=1.5-3"],
)
def test_parse_range_malformed(header):
    with pytest.raises(MalformedRangeError):
        parse_range_header(header, 1000)


@pytest.mark.parametrize(
    "header",
    ["bytes=1500-1999", "bytes=0-1000", "bytes=1000-", "bytes=500-100", "bytes=-0"],
)
def test_parse_range_not_satisfiable(header):
    with pytest.raises(RangeNotSatisfiableError) as excinfo:
        parse_range_header(header, 1000)
    assert excinfo.value.size == 1000


def test_parse_range_empty_file_never_satisfiable():
    with pytest.raises(RangeNotSatisfiableError):
        parse_range_header("bytes=0-", 0)
    with pytest.raises(RangeNotSatisfiableError):
        parse_range_header("bytes=-10", 0)


def test_byte_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        ByteRange(10, 5)
