# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : test_line_scanner.py
#   file_relpath : tests/scanner/test_line_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Tests for `LineScanner`: line-bounded tokenization and end-of-input state."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest
from hypothesis import given
from hypothesis import strategies as st

from boundsquare.diagnostic import DiagnosticLog
from boundsquare.scanner import (
    EndOfInputError,
    InputMismatchError,
    LineExhaustedError,
    LineScanner,
    TokenFormatError,
)
from boundsquare.scanner.checkers import is_int_char
from tests.conftest import make_scanner
from tests.strategies_boundsquare import LINE_ENDINGS, tokens

if TYPE_CHECKING:
    from pathlib import Path


class FailingStream(io.StringIO):
    """In-memory stream that raises `OSError` once ``fail_at`` characters were read."""

    def __init__(self, text: str, fail_at: int) -> None:
        super().__init__(text, newline="")
        self.fail_at = fail_at
        self.reads = 0

    def read(self, size: int | None = -1) -> str:
        if self.reads >= self.fail_at:
            raise OSError("device unplugged")
        self.reads += 1
        return super().read(size)


class CountingStream(io.StringIO):
    """In-memory stream that counts `close` calls."""

    def __init__(self, text: str) -> None:
        super().__init__(text, newline="")
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


def read_lines(scanner: LineScanner) -> list[list[str]]:
    lines: list[list[str]] = []
    while scanner.has_next_line():
        lines.append(list(scanner.iter_line_tokens()))
        scanner.go_to_next_line()
    return lines


def test_tokens_stay_within_their_line() -> None:
    scanner = make_scanner("a b\nc")

    assert scanner.has_next_in_line()
    assert scanner.next_in_line() == "a"
    assert scanner.next_in_line() == "b"
    assert not scanner.has_next_in_line()
    assert scanner.at_end_of_line

    scanner.go_to_next_line()
    assert scanner.next_in_line() == "c"


def test_next_in_line_after_exhausted_line_raises() -> None:
    scanner = make_scanner("1 2\n3\n")
    assert scanner.next_in_line() == "1"
    assert scanner.next_in_line() == "2"

    with pytest.raises(LineExhaustedError, match="reading in ended line"):
        scanner.next_in_line()

    # Still exhausted until the caller moves on
    with pytest.raises(LineExhaustedError):
        scanner.next_in_line()

    scanner.go_to_next_line()
    assert scanner.next_in_line() == "3"


def test_next_in_line_after_end_of_input_raises() -> None:
    scanner = make_scanner("x")
    assert scanner.next_in_line() == "x"
    assert not scanner.has_next_line()

    with pytest.raises(EndOfInputError, match="end of input"):
        scanner.next_in_line()


def test_empty_input_is_end_of_input() -> None:
    scanner = make_scanner("")
    assert scanner.has_next_line()
    assert not scanner.has_next_in_line()
    assert not scanner.has_next_line()
    with pytest.raises(EndOfInputError):
        scanner.next_in_line()


def test_has_next_in_line_does_not_consume() -> None:
    scanner = make_scanner("tok\n")
    assert scanner.has_next_in_line()
    assert scanner.has_next_in_line()
    assert scanner.next_in_line() == "tok"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1 2\n3\n", [["1", "2"], ["3"], []]),
        ("1 2\r\n3\r\n", [["1", "2"], ["3"], []]),
        ("1 2\r3\r4", [["1", "2"], ["3"], ["4"]]),
        ("1\r\r\n2", [["1"], [], ["2"]]),
        ("a\n\nb", [["a"], [], ["b"]]),
        ("  7\t 8  \n9", [["7", "8"], ["9"]]),
        ("5\r", [["5"], []]),
    ],
)
def test_line_terminators(text: str, expected: list[list[str]]) -> None:
    assert read_lines(make_scanner(text)) == expected


def test_unconsumed_tokens_carry_over_to_next_line() -> None:
    scanner = make_scanner("1 2 3\n4\n")
    assert scanner.next_in_line() == "1"
    scanner.go_to_next_line()
    # Clearing end-of-line does not skip what is left of the line
    assert scanner.next_in_line() == "2"


def test_custom_checker_splits_on_non_token_characters() -> None:
    scanner = make_scanner("1,2;;0x1f\n-4", is_int_char)
    assert list(scanner.iter_line_tokens()) == ["1", "2", "0x1f"]
    scanner.go_to_next_line()
    assert scanner.next_int_in_line() == -4


def test_delimiter_is_pushed_back_before_line_terminator() -> None:
    scanner = make_scanner("12,\n34", is_int_char)
    assert scanner.next_in_line() == "12"
    assert not scanner.has_next_in_line()
    assert scanner.at_end_of_line
    scanner.go_to_next_line()
    assert scanner.next_in_line() == "34"


def test_hex_literal_parses_as_unsigned() -> None:
    scanner = make_scanner("0x1F 0XfF 0xFFFFFFFF 31\n")
    assert scanner.has_next_int_in_line()
    assert scanner.next_int_in_line() == 31
    assert scanner.next_int_in_line() == 255
    assert scanner.next_int_in_line() == -1
    assert scanner.next_int_in_line() == 31


def test_format_error_leaves_token_buffered() -> None:
    scanner = make_scanner("0x100000000 abc\n")
    assert not scanner.has_next_int_in_line()
    assert scanner.has_next_in_line()

    with pytest.raises(TokenFormatError) as exc_info:
        scanner.next_int_in_line()
    assert exc_info.value.token == "0x100000000"
    assert isinstance(exc_info.value, ValueError)

    assert scanner.next_in_line() == "0x100000000"
    assert not scanner.has_next_int_in_line()
    assert scanner.next_in_line() == "abc"


def test_next_int_on_empty_token_is_format_error() -> None:
    scanner = make_scanner("1\n2")
    assert scanner.next_int_in_line() == 1

    # Exhausted line: the empty token does not parse
    with pytest.raises(TokenFormatError) as exc_info:
        scanner.next_int_in_line()
    assert exc_info.value.token == ""
    assert isinstance(exc_info.value, ValueError)
    assert not isinstance(exc_info.value, InputMismatchError)

    scanner.go_to_next_line()
    assert scanner.next_int_in_line() == 2

    # Exhausted stream: same fault
    with pytest.raises(TokenFormatError, match="For input string: ''"):
        scanner.next_int_in_line()
    assert not scanner.has_next_line()


def test_non_ascii_digits_parse_in_scanner() -> None:
    scanner = make_scanner("\u0661\u0662 \uff17 0x\uff26\uff46\n")
    assert [scanner.next_int_in_line() for _ in range(3)] == [12, 7, 255]


def test_end_of_file_closes_stream() -> None:
    stream = CountingStream("1\n")
    scanner = LineScanner(stream)
    assert scanner.next_in_line() == "1"
    assert not scanner.has_next_in_line()
    assert not scanner.closed

    scanner.go_to_next_line()
    assert not scanner.has_next_in_line()
    assert scanner.at_end_of_file
    assert scanner.closed
    assert stream.close_calls == 1

    scanner.close()
    assert stream.close_calls == 1


def test_context_manager_closes_stream() -> None:
    stream = CountingStream("1 2 3\n")
    with LineScanner(stream) as scanner:
        assert scanner.next_in_line() == "1"
    assert scanner.closed
    assert stream.close_calls == 1


def test_io_error_degrades_to_end_of_file() -> None:
    diagnostics = DiagnosticLog()
    # "1 2\n3" is five characters; the sixth read fails
    scanner = LineScanner(FailingStream("1 2\n3 4\n", fail_at=5), diagnostics=diagnostics)

    assert read_lines_until_error(scanner) == [["1", "2"]]
    assert scanner.at_end_of_file
    assert not scanner.has_next_line()
    assert scanner.closed
    assert diagnostics.has_error()
    assert "device unplugged" in diagnostics.items[0].message

    with pytest.raises(EndOfInputError):
        scanner.next_in_line()


def read_lines_until_error(scanner: LineScanner) -> list[list[str]]:
    lines: list[list[str]] = []
    while scanner.has_next_line():
        line = list(scanner.iter_line_tokens())
        if line:
            lines.append(line)
        scanner.go_to_next_line()
    return lines


def test_from_path_keeps_crlf(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_bytes(b"2\r\n0 0 1\r\n")

    with LineScanner.from_path(path) as scanner:
        assert scanner.next_int_in_line() == 2
        assert not scanner.has_next_in_line()
        scanner.go_to_next_line()
        assert [scanner.next_int_in_line() for _ in range(3)] == [0, 0, 1]


def test_from_path_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        LineScanner.from_path(tmp_path / "missing.txt")


@given(
    lines=st.lists(st.lists(tokens, max_size=5), min_size=1, max_size=5),
    line_ending=st.sampled_from(LINE_ENDINGS),
    separator=st.sampled_from([" ", "\t", "  ", " \t "]),
)
def test_tokens_round_trip(lines: list[list[str]], line_ending: str, separator: str) -> None:
    text = line_ending.join(separator.join(line) for line in lines)
    assert read_lines(make_scanner(text)) == lines
