from __future__ import annotations

import regex

# The Unicode White_Space property.
# str.isspace() is close, but also accepts U+001C-U+001F.
whitespaceChars = frozenset(
    chr(cp)
    for cp in (
        *range(0x9, 0xE),
        0x20,
        0x85,
        0xA0,
        0x1680,
        *range(0x2000, 0x200B),
        0x2028,
        0x2029,
        0x202F,
        0x205F,
        0x3000,
    )
)


def isWhitespace(ch: str) -> bool:
    return ch in whitespaceChars


# Unicode Alphabetic includes combining vowel signs (Other_Alphabetic) and
# letter numbers like U+216B, which str.isalpha() rejects.
alphaRe = regex.compile(r"\p{Alphabetic}")
alphanumRe = regex.compile(r"[\p{Alphabetic}\p{N}]")


def isAlpha(ch: str) -> bool:
    # "" never matches, so eof falls out naturally.
    return alphaRe.match(ch) is not None


def isAlphanum(ch: str) -> bool:
    return alphanumRe.match(ch) is not None


def isIdentifierStart(ch: str) -> bool:
    return isAlpha(ch)


def isIdentifierChar(ch: str) -> bool:
    return ch == "-" or isAlphanum(ch)


def isNotDoubleQuote(ch: str) -> bool:
    return ch != '"'
