from __future__ import annotations

from . import preds
from .combinators import left, mapValue, oneOrMore, pred, right, zeroOrMore
from .primitives import anyChar, matchLiteral

whitespaceChar = pred(anyChar, preds.isWhitespace)

# Only ever used as separators; callers throw the matched chars away.
oneOrMoreSpace = oneOrMore(whitespaceChar)
zeroOrMoreSpace = zeroOrMore(whitespaceChar)

# No escapes, so a value can never contain a double quote.
quotedString = mapValue(
    right(
        matchLiteral('"'),
        left(
            zeroOrMore(pred(anyChar, preds.isNotDoubleQuote)),
            matchLiteral('"'),
        ),
    ),
    "".join,
)
