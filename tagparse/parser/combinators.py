from __future__ import annotations

from .. import t
from .result import Err, Ok

if t.TYPE_CHECKING:
    from .result import ParserT, ResultT
    from .stream import Stream

    A = t.TypeVar("A")
    B = t.TypeVar("B")

# Backtracking is uneven here.
# pair() (and so left()/right()) reports failure at wherever
# its second half failed, *after* the first half's consumption.
# pred() and oneOrMore() report failure at their own start;
# zeroOrMore() never fails at all.


def mapValue(parser: ParserT[A], fn: t.Callable[[A], B]) -> ParserT[B]:
    def parseMapped(s: Stream, start: int) -> ResultT[B]:
        val, i, err = parser(s, start)
        if err:
            return Err(i)
        return Ok(fn(t.cast("A", val)), i)

    return parseMapped


def pair(parser1: ParserT[A], parser2: ParserT[B]) -> ParserT[tuple[A, B]]:
    def parsePair(s: Stream, start: int) -> ResultT[tuple[A, B]]:
        val1, i, err = parser1(s, start)
        if err:
            return Err(i)
        val2, i, err = parser2(s, i)
        if err:
            # No rollback to `start`.
            return Err(i)
        return Ok((t.cast("A", val1), t.cast("B", val2)), i)

    return parsePair


def left(parser1: ParserT[A], parser2: ParserT[B]) -> ParserT[A]:
    return mapValue(pair(parser1, parser2), _first)


def right(parser1: ParserT[A], parser2: ParserT[B]) -> ParserT[B]:
    return mapValue(pair(parser1, parser2), _second)


def _first(vals: tuple[A, B]) -> A:
    return vals[0]


def _second(vals: tuple[A, B]) -> B:
    return vals[1]


def pred(parser: ParserT[A], predicate: t.Callable[[A], bool]) -> ParserT[A]:
    def parsePred(s: Stream, start: int) -> ResultT[A]:
        val, i, err = parser(s, start)
        if not err and predicate(t.cast("A", val)):
            return Ok(t.cast("A", val), i)
        return Err(start)

    return parsePred


def oneOrMore(parser: ParserT[A]) -> ParserT[list[A]]:
    def parseOneOrMore(s: Stream, start: int) -> ResultT[list[A]]:
        val, i, err = parser(s, start)
        if err:
            return Err(start)
        vals = [t.cast("A", val)]
        if i == start:
            return Ok(vals, i)
        return Ok(*_repeat(parser, s, i, vals))

    return parseOneOrMore


def zeroOrMore(parser: ParserT[A]) -> ParserT[list[A]]:
    def parseZeroOrMore(s: Stream, start: int) -> ResultT[list[A]]:
        return Ok(*_repeat(parser, s, start, []))

    return parseZeroOrMore


def _repeat(parser: ParserT[A], s: Stream, start: int, vals: list[A]) -> tuple[list[A], int]:
    # Applies `parser` until it fails,
    # or until it succeeds without consuming anything
    # (which would otherwise repeat forever).
    i = start
    while True:
        val, nextI, err = parser(s, i)
        if err:
            return vals, i
        vals.append(t.cast("A", val))
        if nextI == i:
            return vals, i
        i = nextI
