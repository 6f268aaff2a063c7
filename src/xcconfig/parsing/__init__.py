"""Text parsing for the .xcconfig format (tokenizer and line matchers)."""

from .lines import (
    IncludeDirective,
    ParsedFile,
    SettingAssignment,
    match_include,
    match_setting,
    parse_text,
)
from .tokens import Token, TokenKind, tokenize

__all__ = [
    "IncludeDirective",
    "ParsedFile",
    "SettingAssignment",
    "Token",
    "TokenKind",
    "match_include",
    "match_setting",
    "parse_text",
    "tokenize",
]
