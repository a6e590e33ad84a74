# Copyright 2026 Scanlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for scanlex sources.

Converts the text of one or more named sources into a single flat sequence
of tokens. Sources are registered with :meth:`Lexer.feed_file` (and extended
with :meth:`Lexer.feed`) and scanned in registration order by
:meth:`Lexer.lex`.
"""

import enum
from collections.abc import Iterable

from scanlex.lexer.tokens import OPERATORS, Token, TokenKind, match_identifier

# ###############
# Public Interface
# ###############


class LineTracking(enum.Enum):
    """How line and column numbers behave when the lexer moves to the next source.

    CONTINUOUS keeps counting across all sources as if they were one stream.
    PER_SOURCE restarts at line 1, column 1 for every source.
    """

    CONTINUOUS = "continuous"
    PER_SOURCE = "per-source"


class LexErrorKind(enum.Enum):
    """Classification of fatal lexing errors."""

    UNRECOGNIZED_TOKEN = "unrecognized-token"
    INVALID_LITERAL_BOUNDARY = "invalid-literal-boundary"
    UNTERMINATED_STRING_LITERAL = "unterminated-string-literal"
    FORBIDDEN_RAW_CONTROL_CHARACTER = "forbidden-raw-control-character"
    INVALID_ESCAPE_SEQUENCE = "invalid-escape-sequence"


class LexerError(Exception):
    """Raised when the scanner encounters input it cannot tokenize.

    Attributes:
        kind: The error classification.
        message: Human-readable description without location.
        source_name: Name of the source being scanned.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, kind: LexErrorKind, message: str, source_name: str, line: int, column: int) -> None:
        super().__init__(f"Lexing error (F: {source_name} L: {line}, C: {column}): {message}.")
        self.kind = kind
        self.message = message
        self.source_name = source_name
        self.line = line
        self.column = column


class LexerUsageError(Exception):
    """Raised when the Lexer API is called out of order."""


class Lexer:
    """Scanner state machine over a registry of named sources.

    A lexer is single use: register sources, call :meth:`lex` once, then read
    :attr:`tokens`.
    """

    def __init__(self, line_tracking: LineTracking = LineTracking.CONTINUOUS) -> None:
        self._line_tracking = line_tracking
        self._sources: list[tuple[str, str]] = []
        self._file_index = 0
        self._index = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []
        self._lexed = False

    @property
    def tokens(self) -> list[Token]:
        """All tokens produced so far, in source order."""
        return list(self._tokens)

    @property
    def sources(self) -> list[tuple[str, str]]:
        """The registered ``(name, text)`` pairs in lexing order."""
        return list(self._sources)

    @property
    def file_index(self) -> int:
        return self._file_index

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    def feed_file(self, name: str, text: str) -> None:
        """Register a new source. Empty text is allowed and yields no tokens."""
        self._sources.append((name, text))

    def feed(self, text: str) -> None:
        """Append *text* to the current source.

        The current source is the one at the lexer's file index: the first
        registered source before :meth:`lex` runs.

        Raises:
            LexerUsageError: If there is no current source, either because
                none has been registered or because all of them have
                already been scanned.
        """
        if self._file_index >= len(self._sources):
            raise LexerUsageError("feed() called without a current source; register one with feed_file() first")
        name, current = self._sources[self._file_index]
        self._sources[self._file_index] = (name, current + text)

    def lex(self) -> list[Token]:
        """Scan every registered source and return the combined token list.

        On error the partially built token list is discarded.

        Raises:
            LexerError: On the first piece of input that cannot be tokenized.
            LexerUsageError: If called a second time on the same lexer.
        """
        if self._lexed:
            raise LexerUsageError("lex() has already been called on this lexer")
        self._lexed = True
        try:
            while self._file_index < len(self._sources):
                self._lex_source()
                self._file_index += 1
        except LexerError:
            self._tokens.clear()
            raise
        return self.tokens

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def _lex_source(self) -> None:
        """Scan the source at the current file index to its end."""
        self._index = 0
        if self._line_tracking is LineTracking.PER_SOURCE:
            self._line = 1
            self._column = 1

        while self._index < len(self._text):
            ch = self._current()
            if ch == "\n":
                self._line += 1
                self._column = 1
                self._index += 1
            elif ch in _WHITESPACE:
                self._index += 1
                self._column += 1
            else:
                self._tokens.append(self._get_token())
                # Scanners stop on the last character of the lexeme.
                self._index += 1
                self._column += 1

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    @property
    def _text(self) -> str:
        return self._sources[self._file_index][1]

    def _current(self) -> str:
        return self._text[self._index]

    def _peek(self, offset: int = 1) -> str | None:
        """Return the character *offset* positions ahead without moving, or None past the end."""
        pos = self._index + offset
        if pos >= len(self._text):
            return None
        return self._text[pos]

    def _advance(self, offset: int = 1) -> str | None:
        """Move the cursor *offset* positions ahead and return the new current character.

        Past the end the cursor stays where it is and None is returned.
        """
        pos = self._index + offset
        if pos >= len(self._text):
            return None
        self._index = pos
        self._column += offset
        return self._text[pos]

    def _error(self, kind: LexErrorKind, message: str) -> LexerError:
        name = self._sources[self._file_index][0]
        return LexerError(kind, message, name, self._line, self._column)

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _get_token(self) -> Token:
        """Dispatch on the current character and scan one token."""
        ch = self._current()

        if ch in OPERATORS:
            return Token(ch, OPERATORS[ch])
        if _is_digit(ch):
            return self._scan_number(ch)
        if ch == '"':
            return self._scan_string()
        if ch == "_" or ch in _LETTERS:
            return self._scan_identifier(ch)
        raise self._error(LexErrorKind.UNRECOGNIZED_TOKEN, "unrecognizeable token")

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_number(self, first: str) -> Token:
        """Scan a run of decimal digits."""
        chars = [first]
        while _is_digit(self._peek()):
            self._advance()
            chars.append(self._current())
        self._expect_boundary("illegal character(s) found after number literal")
        return Token("".join(chars), TokenKind.NUM_LITERAL)

    def _scan_string(self) -> Token:
        """Scan a double-quoted string literal, decoding escape sequences.

        The cursor starts on the opening quote and ends on the closing quote.
        """
        chars: list[str] = []
        while True:
            ch = self._peek()
            if ch == '"':
                break
            if ch is None:
                raise self._error(LexErrorKind.UNTERMINATED_STRING_LITERAL, "missing terminating character")
            if ch == "\t":
                raise self._error(
                    LexErrorKind.FORBIDDEN_RAW_CONTROL_CHARACTER,
                    "use '\\t' instead of raw character",
                )
            if ch == "\n":
                raise self._error(
                    LexErrorKind.UNTERMINATED_STRING_LITERAL,
                    "missing terminating character (use '\\n' instead of raw character)",
                )
            if ch == "\\":
                chars.append(self._scan_escape())
            else:
                self._advance()
                chars.append(ch)
        self._advance()  # closing "
        self._expect_boundary("illegal character(s) found after string literal")
        return Token("".join(chars), TokenKind.STR_LITERAL)

    def _scan_escape(self) -> str:
        """Consume a backslash and its escape character, returning the decoded character."""
        self._advance()  # backslash
        esc = self._advance()
        if esc is None or esc in _BLANKS:
            raise self._error(LexErrorKind.INVALID_ESCAPE_SEQUENCE, "missing escape sequence")
        if esc not in _ESCAPES:
            raise self._error(LexErrorKind.INVALID_ESCAPE_SEQUENCE, "unrecognizeable escape sequence")
        return _ESCAPES[esc]

    def _scan_identifier(self, first: str) -> Token:
        """Scan an identifier and map it to a keyword kind if applicable."""
        chars = [first]
        while _is_identifier_char(self._peek()):
            self._advance()
            chars.append(self._current())
        self._expect_boundary("illegal character(s) found after identifier")
        raw = "".join(chars)
        return Token(raw, match_identifier(raw))

    def _expect_boundary(self, message: str) -> None:
        """Require that the character after the current lexeme may end a literal."""
        if not _literal_can_proceed(self._peek()):
            raise self._error(LexErrorKind.INVALID_LITERAL_BOUNDARY, message)


def tokenize(
    text: str,
    name: str = "<string>",
    line_tracking: LineTracking = LineTracking.CONTINUOUS,
) -> list[Token]:
    """Tokenize a single source.

    Args:
        text: The source text.
        name: Source name used in diagnostics.
        line_tracking: Line/column behavior across sources.

    Returns:
        The list of tokens.

    Raises:
        LexerError: If the text cannot be tokenized.
    """
    return tokenize_sources([(name, text)], line_tracking=line_tracking)


def tokenize_sources(
    sources: Iterable[tuple[str, str]],
    line_tracking: LineTracking = LineTracking.CONTINUOUS,
) -> list[Token]:
    """Tokenize several ``(name, text)`` sources into one combined token list."""
    lexer = Lexer(line_tracking=line_tracking)
    for name, text in sources:
        lexer.feed_file(name, text)
    return lexer.lex()


# ################
# Implementation
# ################

_WHITESPACE = frozenset(" \t\r")
_BLANKS = frozenset(" \t\n")
_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LITERAL_TERMINATORS = _BLANKS | frozenset(OPERATORS)

_ESCAPES: dict[str, str] = {
    "r": "\r",
    "n": "\n",
    "t": "\t",
    "\\": "\\",
}


def _is_digit(ch: str | None) -> bool:
    return ch is not None and ch in _DIGITS


def _is_identifier_char(ch: str | None) -> bool:
    return ch is not None and (ch == "_" or ch in _LETTERS or ch in _DIGITS)


def _literal_can_proceed(ch: str | None) -> bool:
    """Return True if *ch* may directly follow a number, string, or identifier."""
    return ch is None or ch in _LITERAL_TERMINATORS
