# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : line_scanner.py
#   file_relpath : src/boundsquare/scanner/line_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

r"""Line-bounded token scanner.

`LineScanner` reads a text stream one character at a time and hands out
tokens that never cross a line boundary. Once the tokens of a line are used
up, token reads fail with `LineExhaustedError` (integer reads with
`TokenFormatError`, as the empty token does not parse) until the caller moves
on with `LineScanner.go_to_next_line`. This makes "exactly three values on this line"
style input formats easy to consume.

Implementation details:
  * A line terminator is ``\n``, or ``\r`` optionally followed by ``\n``. The
    character after ``\r`` is peeked and pushed back if it is not ``\n``; a
    one-character pushback buffer is all the lookahead needed.
  * The character that ends a token is pushed back as well, so the next read
    (and in particular the line terminator check) still sees it.
  * End of stream sets the end-of-file state and closes the stream.
  * ``OSError`` while reading is recorded in the scanner's `DiagnosticLog` and
    treated as end of file; it is never raised to the caller.

Streams should be opened with ``newline=""`` so ``\r\n`` and bare ``\r`` reach
the scanner untranslated; translated input works too since ``\n`` alone is a
terminator.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING

from boundsquare.config.logging import get_logger
from boundsquare.diagnostic.model import DiagnosticLog
from boundsquare.scanner.checkers import TokenChecker, is_not_whitespace
from boundsquare.scanner.errors import EndOfInputError, LineExhaustedError
from boundsquare.scanner.integers import is_token_int, parse_token_int

if TYPE_CHECKING:
    from collections.abc import Iterator
    from os import PathLike
    from types import TracebackType

    from boundsquare.config.logging import BoundsquareLogger

logger: BoundsquareLogger = get_logger(__name__)


class LineScanner:
    """Whitespace-delimited token reader that respects line boundaries.

    Args:
        stream (IO[str]): Text stream to read from. The scanner owns it and closes it
            on end of file, on I/O error, or on `close`.
        checker (TokenChecker | None): Token-character classifier. Defaults to
            `is_not_whitespace`.
        diagnostics (DiagnosticLog | None): Log receiving I/O faults. A fresh log is
            created when omitted.

    Attributes:
        diagnostics (DiagnosticLog): Diagnostics recorded while reading.
    """

    def __init__(
        self,
        stream: IO[str],
        checker: TokenChecker | None = None,
        *,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self._stream: IO[str] = stream
        self._checker: TokenChecker = checker or is_not_whitespace
        self.diagnostics: DiagnosticLog = diagnostics if diagnostics is not None else DiagnosticLog()

        self._token: str = ""
        self._pushback: str | None = None
        self._eol: bool = False
        self._eof: bool = False
        self._closed: bool = False

    @classmethod
    def from_path(
        cls,
        path: str | PathLike[str],
        encoding: str = "utf-8",
        checker: TokenChecker | None = None,
        *,
        diagnostics: DiagnosticLog | None = None,
    ) -> LineScanner:
        """Open ``path`` as text and return a scanner over it.

        Raises:
            OSError: If the file cannot be opened.
            LookupError: If ``encoding`` is unknown.
        """
        logger.debug("Opening %s (encoding=%s)", path, encoding)
        stream: IO[str] = Path(path).open(encoding=encoding, newline="")  # noqa: SIM115
        return cls(stream, checker, diagnostics=diagnostics)

    def __enter__(self) -> LineScanner:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def at_end_of_line(self) -> bool:
        """True once the current line's terminator has been read."""
        return self._eol

    @property
    def at_end_of_file(self) -> bool:
        """True once the stream is exhausted (or failed)."""
        return self._eof

    @property
    def closed(self) -> bool:
        """True once the underlying stream has been released."""
        return self._closed

    # --- low level character access ---

    def _read_char(self) -> str:
        if self._pushback is not None:
            ch = self._pushback
            self._pushback = None
            return ch
        if self._closed:
            return ""
        return self._stream.read(1)

    def _unread(self, ch: str) -> None:
        self._pushback = ch

    def _read_token(self) -> str:
        """Return the buffered token, reading the next one if the buffer is empty.

        The empty string means the line (or the stream) has no further token.
        """
        if self._token or self._eol or self._eof:
            return self._token

        chars: list[str] = []
        try:
            while not self._eof and not self._eol:
                ch = self._read_char()
                if ch == "":
                    self._eof = True
                    self.close()
                elif ch == "\n":
                    self._eol = True
                elif ch == "\r":
                    following = self._read_char()
                    if following not in ("\n", ""):
                        self._unread(following)
                    self._eol = True
                elif self._checker(ch):
                    chars.append(ch)
                elif chars:
                    self._unread(ch)
                    break
        except OSError as exc:
            self._fail(exc)
            return self._token

        token = "".join(chars)
        logger.trace("Read token %r (eol=%s, eof=%s)", token, self._eol, self._eof)
        return token

    def _fail(self, exc: OSError) -> None:
        logger.error("I/O error while reading input: %s", exc)
        self.diagnostics.add_error(f"I/O error while reading input: {exc}")
        self._eof = True
        self.close()

    # --- public API ---

    def has_next_in_line(self) -> bool:
        """Return whether the current line holds another token.

        May advance the stream and set the end-of-line / end-of-file state.
        """
        self._token = self._read_token()
        return self._token != ""

    def has_next_int_in_line(self) -> bool:
        """Return whether the next token of the line is a 32-bit integer.

        Accepts signed decimal, or ``0x``-prefixed unsigned hexadecimal.
        """
        self._token = self._read_token()
        return is_token_int(self._token)

    def has_next_line(self) -> bool:
        """Return whether the stream has not reached end of file."""
        return not self._eof

    def _require_token(self) -> str:
        self._token = self._read_token()
        if not self._token:
            if self._eof:
                raise EndOfInputError()
            raise LineExhaustedError()
        return self._token

    def next_in_line(self) -> str:
        """Return and consume the next token of the current line.

        Raises:
            EndOfInputError: If the stream is exhausted.
            LineExhaustedError: If the current line has no more tokens and
                `go_to_next_line` has not been called.
        """
        token = self._require_token()
        self._token = ""
        return token

    def next_int_in_line(self) -> int:
        """Return and consume the next token of the line as a 32-bit integer.

        A token that fails to parse stays buffered. An exhausted line or stream
        yields the empty token, which is a format error here as well.

        Raises:
            TokenFormatError: If the token is neither a signed decimal nor a
                ``0x`` unsigned hexadecimal 32-bit integer.
        """
        self._token = self._read_token()
        value = parse_token_int(self._token)
        self._token = ""
        return value

    def go_to_next_line(self) -> None:
        """Allow token reads on the next line.

        Remaining tokens of the current line, if any, are not skipped: they are
        read as if they belonged to the next line.
        """
        self._eol = False

    def iter_line_tokens(self) -> Iterator[str]:
        """Yield the remaining tokens of the current line."""
        while self.has_next_in_line():
            yield self.next_in_line()

    def close(self) -> None:
        """Release the underlying stream. Further calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        try:
            self._stream.close()
        except OSError as exc:
            logger.error("I/O error while closing input: %s", exc)
            self.diagnostics.add_error(f"I/O error while closing input: {exc}")
