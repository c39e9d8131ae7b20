from __future__ import annotations

from .. import t
from .. import messages as m
from .grammar import startElement
from .stream import Stream

if t.TYPE_CHECKING:
    from .nodes import Element
    from .result import ParserT, ResultT
    from .stream import ParseConfig

    ValT = t.TypeVar("ValT")


class ParseFailure(Exception):
    def __init__(self, remainder: str, context: str | None = None):
        self.remainder = remainder
        self.context = context
        msg = f"Parse failed at {abbreviate(remainder)!r}"
        if context is not None:
            msg += f" in {context}"
        super().__init__(msg)


def abbreviate(text: str, length: int = 20) -> str:
    # Only show the start of the leftovers, so messages stay one line.
    if len(text) <= length:
        return text
    return text[:length] + "…"


def parse(parser: ParserT[ValT], text: str, config: ParseConfig | None = None) -> tuple[Stream, ResultT[ValT]]:
    s = Stream(text, config=config)
    return s, parser(s, 0)


def parseText(parser: ParserT[ValT], text: str, config: ParseConfig | None = None) -> tuple[ValT, str]:
    # Same as parse(), but for callers that would rather catch than check.
    # Produces the value and the unparsed text.
    s, (val, i, err) = parse(parser, text, config)
    if err:
        raise ParseFailure(s.rest(i), s.context)
    return t.cast("ValT", val), s.rest(i)


def parseElementStart(text: str, config: ParseConfig | None = None) -> Element | None:
    s, (el, i, err) = parse(startElement, text, config)
    if err:
        m.die(f"Couldn't parse a start tag; got stuck at {abbreviate(s.rest(i))!r}.", context=s.context)
        return None
    assert el is not None
    seenNames: set[str] = set()
    for k, _ in el.attributes:
        if k in seenNames:
            m.warn(f"Attribute '{k}' appears more than once on <{el.name}>; the last one wins in html output.", context=s.context)
        seenNames.add(k)
    if not s.eof(i):
        m.say(f"Stopped after the <{el.name}> start tag, leaving {abbreviate(s.rest(i))!r} unparsed.")
    return el


def debugResult(s: Stream, res: ResultT) -> str:
    val, i, err = res
    if err:
        return f"Err remaining {s.rest(i)!r}"
    return f"Ok({val!r}) remaining {s.rest(i)!r}"
