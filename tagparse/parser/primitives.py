from __future__ import annotations

from .. import t
from . import preds
from .result import Err, Ok

if t.TYPE_CHECKING:
    from .result import ParserT, ResultT
    from .stream import Stream


def matchLiteral(expected: str) -> ParserT[None]:
    """
    Matches exactly `expected` at the cursor,
    producing nothing but the advanced index.
    """
    if not isinstance(expected, str):
        msg = f"matchLiteral() needs a string to match, got {expected!r}."
        raise TypeError(msg)
    length = len(expected)

    def parseLiteral(s: Stream, start: int) -> ResultT[None]:
        if s.startswith(expected, start):
            return Ok(None, start + length)
        return Err(start)

    parseLiteral.__qualname__ = f"matchLiteral({expected!r})"
    return parseLiteral


def anyChar(s: Stream, start: int) -> ResultT[str]:
    if s.eof(start):
        return Err(start)
    return Ok(s[start], start + 1)


def identifier(s: Stream, start: int) -> ResultT[str]:
    if not preds.isIdentifierStart(s[start]):
        return Err(start)
    end = start + 1
    while preds.isIdentifierChar(s[end]):
        end += 1
    return Ok(s.slice(start, end), end)
