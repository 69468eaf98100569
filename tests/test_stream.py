import time

import pytest

from wiringcore.stream import BytesStream, LookaheadMode, Stream


def make(data):
    stream = BytesStream(data)
    stream.set_timeout(0)
    return stream


def rest(stream):
    return str(stream.read_string())


def test_stream_is_abstract():
    with pytest.raises(TypeError):
        Stream()


def test_default_and_set_timeout():
    stream = BytesStream(b"")
    assert stream.timeout == 1000
    stream.set_timeout(5)
    assert stream.timeout == 5
    with pytest.raises(ValueError):
        stream.set_timeout(-1)


def test_read_and_peek():
    stream = make(b"ab")
    assert stream.available() == 2
    assert stream.peek() == ord("a")
    assert stream.available() == 2
    assert stream.read() == ord("a")
    assert stream.read() == ord("b")
    assert stream.read() == -1
    assert stream.peek() == -1


def test_written_bytes_become_readable():
    stream = make(b"")
    assert stream.print(42) == 2
    assert stream.println("x") == 3
    assert rest(stream) == "42x\r\n"


def test_find_consumes_through_target():
    stream = make("hello world!")
    assert stream.find("world") is True
    assert rest(stream) == "!"


def test_find_missing_consumes_everything():
    stream = make("hello")
    assert stream.find("xyz") is False
    assert stream.available() == 0


def test_find_single_byte_target():
    stream = make("abc")
    assert stream.find(ord("b")) is True
    assert rest(stream) == "c"


def test_find_multi_walks_back_on_partial_match():
    stream = make("11112")
    assert stream.find_multi(["1112"]) == 0
    assert stream.available() == 0


def test_find_multi_returns_first_found_index():
    stream = make("zzbbaa")
    assert stream.find_multi(["aa", "bb"]) == 1
    assert rest(stream) == "aa"


def test_find_multi_empty_target_matches_immediately():
    stream = make("abc")
    assert stream.find_multi(["x", ""]) == 1
    assert stream.available() == 3


def test_find_until_stops_at_terminator():
    stream = make("xxERRyyOK")
    assert stream.find_until("OK", "ERR") is False
    assert rest(stream) == "yyOK"


def test_find_until_finds_target_first():
    stream = make("OK ERR")
    assert stream.find_until("OK", "ERR") is True
    assert rest(stream) == " ERR"


def test_parse_int_skips_leading_garbage():
    stream = make("abc-123def")
    assert stream.parse_int() == -123
    assert rest(stream) == "def"


def test_parse_int_skip_none_leaves_stream_untouched():
    stream = make("a12")
    assert stream.parse_int(LookaheadMode.SKIP_NONE) == 0
    assert stream.available() == 3


def test_parse_int_skip_whitespace():
    assert make(" \t\r\n42").parse_int(LookaheadMode.SKIP_WHITESPACE) == 42
    stream = make("x42")
    assert stream.parse_int(LookaheadMode.SKIP_WHITESPACE) == 0
    assert rest(stream) == "x42"


def test_parse_int_with_ignore_char():
    stream = make("1,234;")
    assert stream.parse_int(ignore=",") == 1234
    assert rest(stream) == ";"


def test_parse_int_empty_returns_zero():
    assert make("").parse_int() == 0


def test_parse_float_values():
    assert make("3.5x").parse_float() == pytest.approx(3.5)
    assert make("-.25").parse_float() == pytest.approx(-0.25)


def test_parse_float_stops_at_second_dot():
    stream = make("1.2.3")
    assert stream.parse_float() == pytest.approx(1.2)
    assert rest(stream) == ".3"


def test_parse_float_integer_value():
    stream = make("abc 17 ")
    assert stream.parse_float() == 17.0
    assert rest(stream) == " "


def test_read_bytes():
    stream = make(b"abcdef")
    assert stream.read_bytes(3) == b"abc"
    assert stream.read_bytes(10) == b"def"
    assert stream.read_bytes(1) == b""


def test_read_bytes_until_consumes_terminator():
    stream = make(b"ab,cd")
    assert stream.read_bytes_until(",", 10) == b"ab"
    assert rest(stream) == "cd"


def test_read_bytes_until_limits_length():
    stream = make(b"abcdef")
    assert stream.read_bytes_until(",", 0) == b""
    assert stream.read_bytes_until(",", 4) == b"abcd"
    assert rest(stream) == "ef"


def test_read_string_until():
    stream = make("line1\nline2")
    assert stream.read_string_until("\n") == "line1"
    assert stream.read_string_until("\n") == "line2"
    assert len(stream.read_string_until("\n")) == 0


def test_timeout_waits_before_giving_up():
    stream = BytesStream(b"")
    stream.set_timeout(30)
    started = time.monotonic()
    assert stream.read_bytes(1) == b""
    assert time.monotonic() - started >= 0.025


def test_invalid_ignore_char():
    with pytest.raises(ValueError):
        make("12").parse_int(ignore="ab")