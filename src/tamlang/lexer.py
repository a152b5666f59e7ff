# src/tamlang/lexer.py
import logging
from contextlib import contextmanager

from .tam_token import (
    ID, KEYWORDS, NUMBER, ONE_CHAR_OPERATORS, TWO_CHAR_OPERATORS, UNKNOWN, Token,
)
from .error_reporter import ErrorReporter

logger = logging.getLogger("tamlang.lexer")

# Turkish letters are accepted in identifiers and keywords
_EXTENDED_LETTERS = "ğüşıöçĞÜŞİÖÇ"

_COMMENT = "//"


def physical_lines(text):
    """Split text into lines the way a text-mode file is read.

    Only ``\\n``, ``\\r`` and ``\\r\\n`` end a line; form feeds, U+2028 and
    the other separators ``str.splitlines`` honours stay inside the line.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class Lexer:
    """Line-buffered scanner.

    ``source`` is either the whole program as a string or any iterable of
    text lines, such as an open file. Tokens never span lines. Blank lines
    and lines whose first non-blank characters are ``//`` are skipped.
    ``next_token()`` returns ``None`` once the source is exhausted.
    """

    def __init__(self, source, filename="<stdin>", error_reporter=None):
        if isinstance(source, str):
            source = physical_lines(source)
        self._source = source
        self._lines = iter(source)
        self.filename = filename
        self.current_line = ""
        self.position = 0
        self.line = 0
        # Columns are reported against the untrimmed line
        self._indent = 0

        self.error_reporter = error_reporter if error_reporter is not None else ErrorReporter()

    def next_token(self):
        while True:
            if self.current_line is None:
                return None

            if self.position >= len(self.current_line):
                self.read_line()
                continue

            self.skip_whitespace()
            if self.position >= len(self.current_line):
                continue

            ch = self.current_line[self.position]
            start = self.position

            if self.is_digit(ch):
                return self._make(NUMBER, self.read_number(), start)

            if self.is_letter(ch):
                literal = self.read_identifier()
                return self._make(self.lookup_ident(literal), literal, start)

            return self.read_operator()

    def read_line(self):
        raw = next(self._lines, None)
        if raw is None:
            self.current_line = None
            logger.debug("%s: end of input after %d lines", self.filename, self.line)
            return

        raw = raw.rstrip("\r\n")
        self.line += 1
        self.position = 0
        self.error_reporter.register_line(self.filename, self.line, raw)

        stripped = raw.strip()
        if not stripped or stripped.startswith(_COMMENT):
            self.current_line = ""
            return

        self._indent = len(raw) - len(raw.lstrip())
        self.current_line = stripped
        logger.debug("%s:%d: %s", self.filename, self.line, stripped)

    def read_operator(self):
        start = self.position
        pair = self.current_line[start:start + 2]
        if pair in TWO_CHAR_OPERATORS:
            self.position += 2
            return self._make(TWO_CHAR_OPERATORS[pair], pair, start)

        ch = self.current_line[start]
        self.position += 1
        # A lone '!' has no meaning of its own and falls through to UNKNOWN
        return self._make(ONE_CHAR_OPERATORS.get(ch, UNKNOWN), ch, start)

    def read_identifier(self):
        start_position = self.position
        while self.position < len(self.current_line) and (
                self.is_letter(self.current_line[self.position])
                or self.is_digit(self.current_line[self.position])):
            self.position += 1
        return self.current_line[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.position < len(self.current_line) and self.is_digit(self.current_line[self.position]):
            self.position += 1
        return self.current_line[start_position:self.position]

    def lookup_ident(self, ident):
        return KEYWORDS.get(ident, ID)

    def is_letter(self, char):
        return char.isalpha() or char in _EXTENDED_LETTERS

    def is_digit(self, char):
        return '0' <= char <= '9'

    def skip_whitespace(self):
        while self.position < len(self.current_line) and self.current_line[self.position].isspace():
            self.position += 1

    def _make(self, kind, literal, start):
        return Token(kind, literal, self.line, self._indent + start + 1)

    def close(self):
        close = getattr(self._source, "close", None)
        if callable(close):
            close()

    def __iter__(self):
        while True:
            tok = self.next_token()
            if tok is None:
                return
            yield tok

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def tokenize(source, filename="<stdin>"):
    """Scan a whole source string into a list of tokens."""
    return list(Lexer(source, filename=filename))


@contextmanager
def open_lexer(path, encoding="utf-8", error_reporter=None):
    """Open *path* and yield a lexer over it; the file is closed on every exit path."""
    with open(path, "r", encoding=encoding) as handle:
        logger.debug("Opened %s", path)
        yield Lexer(handle, filename=str(path), error_reporter=error_reporter)
