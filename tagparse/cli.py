from __future__ import annotations

import argparse
import json
import os
import sys

import lxml.html

from . import config, t
from . import messages as m
from .parser import ParseConfig, debugResult, elementStart, parse, parseElementStart

if t.TYPE_CHECKING:
    from .parser import Element

OUTPUT_FORMATS = [
    "tag",
    "html",
    "json",
]


def main(argv: t.Sequence[str] | None = None) -> None:
    semver = config.semver()
    argparser = argparse.ArgumentParser(description=f"tagparse v{semver}: Parses the start tag of an element.")
    argparser.add_argument("--version", action="version", version=semver)
    argparser.add_argument(
        "text",
        help='The markup to parse, starting with its "<". Use "-" to read it from stdin.',
    )
    argparser.add_argument(
        "-q",
        "--quiet",
        dest="quiet",
        action="count",
        default=0,
        help="Silences one level of message, least-important first.",
    )
    argparser.add_argument(
        "-s",
        "--silent",
        dest="silent",
        action="store_true",
        help="Shorthand for 'as many -q as you need to shut it up'",
    )
    argparser.add_argument(
        "-f",
        "--force",
        dest="errorLevel",
        action="store_const",
        const="nothing",
        help="Force the parser to run to completion; fatal errors don't stop processing.",
    )
    argparser.add_argument(
        "-a",
        "--ascii-only",
        dest="asciiOnly",
        action="store_true",
        help="Force all messages to be ASCII-only.",
    )
    argparser.add_argument(
        "--print",
        dest="printMode",
        choices=m.PRINT_MODES,
        default=None,
        help="How messages are formatted. Options are 'plain' (just text), 'console' (text with console color codes), 'markup' (XML), and 'json' (JSON stream). Defaults to 'console'.",
    )
    argparser.add_argument(
        "--die-on",
        dest="errorLevel",
        choices=list(m.MESSAGE_LEVELS.keys()),
        help="Determines what sorts of errors cause the parser to die. Default is 'fatal'; the -f flag is a shorthand for 'nothing'",
    )
    argparser.add_argument(
        "--die-when",
        dest="errorTiming",
        choices=m.DEATH_TIMING,
        default="late",
        help="When a disallowed error should force the parser to stop. 'early' stops immediately; 'late' finishes first and stops at the end.",
    )
    argparser.add_argument(
        "--context",
        dest="context",
        default=None,
        help="A name for the input, used in messages.",
    )
    argparser.add_argument(
        "--format",
        dest="outputFormat",
        choices=OUTPUT_FORMATS,
        default="tag",
        help="How to print the parsed element. 'tag' reprints the start tag, 'html' serializes it as an HTML element, 'json' dumps its name and attributes.",
    )
    argparser.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        help="Also print the raw parse result.",
    )

    options = argparser.parse_args(argv)

    if options.silent:
        m.state.printOn = "nothing"
        m.state.silent = True
    else:
        m.state.printOn = m.MessagesState.categoryName(options.quiet)
    if options.errorLevel is not None:
        m.state.dieOn = options.errorLevel
    m.state.dieWhen = options.errorTiming
    m.state.asciiOnly = options.asciiOnly
    if options.printMode is None:
        if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
            m.state.printMode = "plain"
        else:
            m.state.printMode = "console"
    else:
        m.state.printMode = options.printMode

    handleParse(options)


def handleParse(options: argparse.Namespace) -> None:
    text = sys.stdin.read() if options.text == "-" else options.text
    parseConfig = ParseConfig(context=options.context)

    if options.debug:
        s, res = parse(elementStart, text, parseConfig)
        m.say(debugResult(s, res))

    el = parseElementStart(text, parseConfig)
    m.retroactivelyCheckErrorLevel(timing="late")
    if el is None:
        # Only reachable when fatal errors are being forced past.
        m.failure("No start tag to print.")
        sys.exit(1)

    try:
        output = formatElement(el, options.outputFormat)
    except ValueError as e:
        # lxml only takes XML names, which is narrower than what parses.
        m.die(f"Couldn't serialize <{el.name}> as {options.outputFormat}: {e}", context=parseConfig.context)
        m.retroactivelyCheckErrorLevel(timing="late")
        m.failure("Nothing to print.")
        sys.exit(1)
    sys.stdout.write(output + "\n")
    if el.attributes:
        names = [k for k, _ in el.attributes]
        m.success(f"Parsed <{el.name}> with {config.englishFromList(names, 'and')}.")
    else:
        m.success(f"Parsed <{el.name}>.")


def formatElement(el: Element, outputFormat: str) -> str:
    if outputFormat == "html":
        return lxml.html.tostring(el.toEtree(), encoding="unicode")
    if outputFormat == "json":
        return json.dumps(el.__json__())
    return str(el)
