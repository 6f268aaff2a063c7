"""Line-shape matchers: include directives and setting assignments."""

from __future__ import annotations

from dataclasses import dataclass, field

from xcconfig.parsing.tokens import Token, TokenKind, join_tokens, tokenize

INCLUDE_DIRECTIVE = "#include"
XCCONFIG_EXTENSION = ".xcconfig"


@dataclass(frozen=True)
class IncludeDirective:
    """`#include "<path>"` line. path is the unquoted string as written."""

    path: str


@dataclass(frozen=True)
class SettingAssignment:
    """`<key> = <value>` line. value keeps its quotes, if any."""

    key: str
    value: str


@dataclass
class ParsedFile:
    """Structural content of one file's text, before includes are loaded."""

    includes: list[str] = field(default_factory=list)
    build_settings: dict[str, str] = field(default_factory=dict)


def _is_include_path(token: Token) -> bool:
    if token.kind is not TokenKind.STRING:
        return False
    path = token.unquoted
    return len(path) > len(XCCONFIG_EXTENSION) and path.lower().endswith(XCCONFIG_EXTENSION)


def match_include(line: str) -> IncludeDirective | None:
    """
    Return the include directive on line, or None.

    Matches `#include` (any case), whitespace, then a double-quoted path ending
    in .xcconfig. Only the first match on the line is used.
    """
    tokens = tokenize(line)
    for i in range(len(tokens) - 2):
        tok = tokens[i]
        if tok.kind is not TokenKind.TEXT or not tok.text.lower().endswith(INCLUDE_DIRECTIVE):
            continue
        if tokens[i + 1].kind is TokenKind.SPACE and _is_include_path(tokens[i + 2]):
            return IncludeDirective(path=tokens[i + 2].unquoted)
    return None


def match_setting(line: str) -> SettingAssignment | None:
    """
    Return the setting assignment on line, or None.

    The separator is the first standalone "=" with whitespace on both sides
    and a non-empty key before it.
    Everything after it (trailing whitespace stripped) is the value, so further
    "=" characters belong to the value.
    """
    tokens = tokenize(line)
    for i in range(1, len(tokens) - 1):
        if tokens[i].kind is not TokenKind.EQUALS:
            continue
        if tokens[i - 1].kind is not TokenKind.SPACE or tokens[i + 1].kind is not TokenKind.SPACE:
            continue
        key = join_tokens(tokens[: i - 1]).strip()
        value = join_tokens(tokens[i + 2 :]).rstrip()
        if not key:
            # Leading "=" belongs to the key; try the next separator
            continue
        if not value:
            return None
        return SettingAssignment(key=key, value=value)
    return None


def parse_text(text: str) -> ParsedFile:
    """
    Parse file text into include paths (in line order) and build settings.

    Both shapes are tried on every line independently; lines matching neither
    are skipped. A key assigned twice keeps its last value.
    """
    parsed = ParsedFile()
    for line in text.split("\n"):
        include = match_include(line)
        if include is not None:
            parsed.includes.append(include.path)
        setting = match_setting(line)
        if setting is not None:
            parsed.build_settings[setting.key] = setting.value
    return parsed
