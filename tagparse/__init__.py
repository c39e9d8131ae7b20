from __future__ import annotations

from . import (
    config,
    messages,
    parser,
)
from .cli import main
from .parser import (
    DEFAULT_PARSE_CONFIG,
    Element,
    Err,
    Ok,
    ParseConfig,
    ParseFailure,
    Stream,
    anyChar,
    attributePair,
    attributes,
    elementStart,
    identifier,
    isErr,
    isOk,
    left,
    mapValue,
    matchLiteral,
    oneOrMore,
    oneOrMoreSpace,
    pair,
    parse,
    parseElementStart,
    parseText,
    pred,
    quotedString,
    right,
    startElement,
    whitespaceChar,
    zeroOrMore,
    zeroOrMoreSpace,
)
