"""Scanner (tokenizer) for arithmetic expressions."""

from __future__ import annotations

from exprlib.core.tokens import Token, TokenKind
from exprlib.diagnostics.collector import DiagnosticCollector
from exprlib.diagnostics.location import SourceLocation

_WHITESPACE = " \t\n\r\v\f"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_identifier(ch: str) -> bool:
    return ch == "_" or _is_digit(ch) or "a" <= ch <= "z" or "A" <= ch <= "Z"


def _is_printable(ch: str) -> bool:
    return " " <= ch <= "~"


class Scanner:
    """Two-step lookahead token stream over one expression string.

    ``peek()`` scans the token at the cursor without moving it and remembers
    where that token ends; ``advance()`` jumps there. Every ``advance()``
    must be preceded by the ``peek()`` that produced the token being
    consumed.

    Malformed input never raises. Lexical errors come back as ``NONE``
    tokens and are reported to the diagnostic collector.
    """

    # Single-character tokens that need no lookahead.
    _SINGLE_CHAR: dict[str, TokenKind] = {
        "+": TokenKind.ADD,
        "-": TokenKind.MINUS,
        "*": TokenKind.MUL,
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
    }

    def __init__(
        self,
        source: str = "",
        filename: str = "<string>",
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._filename = filename
        self._diag = diagnostics if diagnostics is not None else DiagnosticCollector()
        self.reset(source)

    @property
    def diagnostics(self) -> DiagnosticCollector:
        return self._diag

    @property
    def cursor(self) -> int:
        return self._pos

    def reset(self, source: str) -> None:
        """Rebind the scanner to *source* and rewind to its start."""
        self._source = source
        self._pos = 0
        self._next_pos = 0
        self._peeked: Token | None = None
        self._peeked_at = -1

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _char(self, idx: int) -> str:
        """Return the character at *idx*, or '' past the end."""
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _loc(self, offset: int, length: int = 0) -> SourceLocation:
        return SourceLocation.at_offset(self._filename, offset, length)

    # ------------------------------------------------------------------
    # Token protocol
    # ------------------------------------------------------------------

    def peek(self) -> Token:
        """Return the token starting at the cursor without consuming it."""
        if self._peeked is not None and self._peeked_at == self._pos:
            return self._peeked
        token, end = self._scan(self._pos)
        self._peeked = token
        self._peeked_at = self._pos
        self._next_pos = end
        return token

    def advance(self) -> None:
        """Move the cursor past the most recently peeked token."""
        self._pos = self._next_pos

    def tokenize(self) -> list[Token]:
        """Drain the stream up to (not including) the first NONE token."""
        tokens: list[Token] = []
        while True:
            tok = self.peek()
            if tok.is_none:
                return tokens
            tokens.append(tok)
            self.advance()

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan(self, pos: int) -> tuple[Token, int]:
        """Scan one token at *pos*; return it with the offset just past it."""
        start = pos
        ch = self._char(pos)
        while ch and ch in _WHITESPACE:
            pos += 1
            ch = self._char(pos)

        if not ch:
            return Token(TokenKind.NONE, "", self._loc(pos)), start

        if not _is_printable(ch):
            self._diag.error(
                "Bad lexical analysis stream (no such printable character)",
                self._loc(pos),
                notes=(f"character {ch!r}",),
            )
            return Token(TokenKind.NONE, ch, self._loc(pos)), start

        if _is_digit(ch):
            return self._scan_integer(pos)

        kind = self._SINGLE_CHAR.get(ch)
        if kind is not None:
            return Token(kind, ch, self._loc(pos, 1)), pos + 1

        self._diag.error(f"Unexpected lexical analysis character {ch!r}", self._loc(pos))
        return Token(TokenKind.NONE, ch, self._loc(pos)), start

    def _scan_integer(self, begin: int) -> tuple[Token, int]:
        """Scan a digit run, skipping any identifier-like suffix glued to it."""
        end = begin
        while _is_digit(self._char(end)):
            end += 1
        token = Token(TokenKind.INTEGER, self._source[begin:end], self._loc(begin, end - begin))

        stop = end
        while _is_identifier(self._char(stop)) or self._char(stop) == ".":
            stop += 1
        if stop > end:
            self._diag.warning(
                "Skipping trailing characters for integer",
                self._loc(end, stop - end),
                notes=(f"ignored {self._source[end:stop]!r}",),
            )
        return token, stop
