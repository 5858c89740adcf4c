"""
  Tokenizer and recursive-descent parser for pilang source text.

Grammar:

    program    := list+
    list       := '[' element* ']'
    element    := INTEGER | IDENTIFIER | list

Forms are emitted as plain Python data:

    - integer literals -> int
    - identifiers      -> Identifier
    - lists            -> list

Only bracket balance is checked here. Whether a list's head names a known
command is decided at evaluation time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from pilang import SExpression
from pilang.errors import PiLexError, PiParseError
from pilang.types.identifier import Identifier


I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


class TokenType(Enum):
    INTEGER = "INTEGER"
    IDENTIFIER = "IDENTIFIER"
    LBRACKET = "["
    RBRACKET = "]"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    position: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"


WHITESPACE_RE = re.compile(r"[ \t\n\f\r]+")

# Tried in order; the first pattern matching at the current position wins.
TOKEN_PATTERNS: tuple[tuple[TokenType, re.Pattern], ...] = (
    (TokenType.INTEGER, re.compile(r"[0-9]+")),
    (TokenType.IDENTIFIER, re.compile(r"[a-zA-Z_][a-zA-Z_0-9]*")),
    (TokenType.LBRACKET, re.compile(r"\[")),
    (TokenType.RBRACKET, re.compile(r"\]")),
)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens, skipping whitespace."""
    pos = 0
    n = len(source)
    while True:
        ws = WHITESPACE_RE.match(source, pos)
        if ws:
            pos = ws.end()
        if pos >= n:
            return
        for token_type, pattern in TOKEN_PATTERNS:
            m = pattern.match(source, pos)
            if m:
                yield Token(token_type, m.group(), pos)
                pos = m.end()
                break
        else:
            raise PiLexError(source[pos:])


def tokenize(source: str) -> list[Token]:
    return list(lex(source))


class TokenStream:
    """Cursor over a token sequence with recursive-descent list parsing."""

    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0

    def peek(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def remaining(self) -> list[Token]:
        return self.tokens[self.pos:]

    def parse_list(self) -> list[SExpression]:
        """Parse one bracketed list starting at the cursor."""
        tok = self.peek()
        if tok is None or tok.type is not TokenType.LBRACKET:
            raise PiParseError("expected '[' at the beginning of the list")
        self.pos += 1

        children: list[SExpression] = []
        while (tok := self.peek()) is not None and tok.type is not TokenType.RBRACKET:
            if tok.type is TokenType.INTEGER:
                children.append(_integer_literal(tok))
                self.pos += 1
            elif tok.type is TokenType.IDENTIFIER:
                children.append(Identifier(tok.value))
                self.pos += 1
            elif tok.type is TokenType.LBRACKET:
                children.append(self.parse_list())
            else:
                raise PiParseError(f"unexpected token: {tok!r}")

        if tok is None:
            raise PiParseError("expected ']' at the end of the list")
        self.pos += 1
        return children

    def parse_program(self) -> list[list[SExpression]]:
        """Parse back-to-back top-level lists until the tokens run out."""
        forms: list[list[SExpression]] = []
        while (tok := self.peek()) is not None:
            if tok.type is not TokenType.LBRACKET:
                raise PiParseError(f"unexpected token outside brackets: {tok!r}")
            forms.append(self.parse_list())
        if not forms:
            raise PiParseError("program contains no lists")
        return forms


def _integer_literal(tok: Token) -> int:
    value = int(tok.value)
    if value > I64_MAX:
        raise PiParseError(f"integer literal out of range: {tok.value}")
    return value


def parse_one_list(tokens: Iterable[Token]) -> tuple[list[SExpression], list[Token]]:
    """Parse a single list; returns the form and the tokens left after it."""
    stream = TokenStream(tokens)
    form = stream.parse_list()
    return form, stream.remaining()


def parse_program(tokens: Iterable[Token]) -> list[list[SExpression]]:
    return TokenStream(tokens).parse_program()


def read(source: str) -> list[list[SExpression]]:
    """Tokenize and parse a whole program."""
    return parse_program(lex(source))


def unparse(form: SExpression) -> str:
    """Render a parsed form back in source syntax."""
    if isinstance(form, list):
        return "[" + " ".join(unparse(f) for f in form) + "]"
    return str(form)
