"""Line tokenizer for the .xcconfig format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kinds of tokens a line is split into."""

    TEXT = "text"
    SPACE = "space"
    STRING = "string"  # double-quoted, quotes included
    EQUALS = "equals"  # a standalone "="


@dataclass(frozen=True)
class Token:
    """A slice of a line with its kind."""

    kind: TokenKind
    text: str

    @property
    def unquoted(self) -> str:
        """Text without surrounding quotes (STRING tokens only)."""
        if self.kind is TokenKind.STRING:
            return self.text[1:-1]
        return self.text


def tokenize(line: str) -> list[Token]:
    """
    Split a line into TEXT, SPACE, STRING and EQUALS tokens.

    Concatenating the token texts reproduces the line exactly. A quote with no
    closing quote on the same line is treated as ordinary text.
    """
    tokens: list[Token] = []
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch.isspace():
            j = i + 1
            while j < n and line[j].isspace():
                j += 1
            tokens.append(Token(TokenKind.SPACE, line[i:j]))
        elif ch == '"':
            close = line.find('"', i + 1)
            if close == -1:
                j = n
                tokens.append(Token(TokenKind.TEXT, line[i:j]))
            else:
                j = close + 1
                tokens.append(Token(TokenKind.STRING, line[i:j]))
        else:
            j = i + 1
            while j < n and not line[j].isspace() and line[j] != '"':
                j += 1
            text = line[i:j]
            kind = TokenKind.EQUALS if text == "=" else TokenKind.TEXT
            tokens.append(Token(kind, text))
        i = j
    return tokens


def join_tokens(tokens: list[Token]) -> str:
    return "".join(t.text for t in tokens)
