from . import preds, result
from .combinators import (
    left,
    mapValue,
    oneOrMore,
    pair,
    pred,
    right,
    zeroOrMore,
)
from .grammar import (
    attributePair,
    attributes,
    elementStart,
    startElement,
)
from .lexical import (
    oneOrMoreSpace,
    quotedString,
    whitespaceChar,
    zeroOrMoreSpace,
)
from .main import (
    ParseFailure,
    debugResult,
    parse,
    parseElementStart,
    parseText,
)
from .nodes import (
    Element,
    escapeAttr,
    startTagStr,
)
from .primitives import (
    anyChar,
    identifier,
    matchLiteral,
)
from .result import (
    Err,
    Ok,
    isErr,
    isOk,
)
from .stream import (
    DEFAULT_PARSE_CONFIG,
    ParseConfig,
    Stream,
)
