from __future__ import annotations

from .combinators import mapValue, pair, right, zeroOrMore
from .lexical import oneOrMoreSpace, quotedString
from .nodes import Element
from .primitives import identifier, matchLiteral

# name="value"
attributePair = pair(identifier, right(matchLiteral("="), quotedString))

# Each attribute needs at least one whitespace char in front of it.
attributes = zeroOrMore(right(oneOrMoreSpace, attributePair))

# <name attr="val" ...
# Stops there: self-closing and end tags aren't part of the grammar yet.
elementStart = right(matchLiteral("<"), pair(identifier, attributes))

startElement = mapValue(elementStart, Element.fromStart)
