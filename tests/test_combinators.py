"""Tests for the core combinators, including their backtracking behavior."""

import pytest

from tagparse.parser import (
    Stream,
    anyChar,
    identifier,
    left,
    mapValue,
    matchLiteral,
    oneOrMore,
    pair,
    pred,
    right,
    zeroOrMore,
)


def _run(parser, text: str):
    s = Stream(text)
    val, i, err = parser(s, 0)
    return val, s.rest(i), err


class TestMapValue:
    def test_transforms_value(self) -> None:
        parser = mapValue(identifier, str.upper)
        assert _run(parser, "div>") == ("DIV", ">", False)

    def test_failure_untouched(self) -> None:
        calls = []
        parser = mapValue(identifier, calls.append)
        assert _run(parser, "!x") == (None, "!x", True)
        assert calls == []

    def test_changes_type_not_consumption(self) -> None:
        parser = mapValue(matchLiteral("ab"), lambda _: 42)
        assert _run(parser, "abc") == (42, "c", False)


class TestPair:
    def test_both_succeed(self) -> None:
        tagOpener = pair(matchLiteral("<"), identifier)
        assert _run(tagOpener, "<my-first-element/>") == ((None, "my-first-element"), "/>", False)

    def test_first_fails(self) -> None:
        tagOpener = pair(matchLiteral("<"), identifier)
        assert _run(tagOpener, "oops") == (None, "oops", True)

    def test_second_fails_without_backtracking(self) -> None:
        tagOpener = pair(matchLiteral("<"), identifier)
        assert _run(tagOpener, "<!oops") == (None, "!oops", True)

    def test_second_failure_index(self) -> None:
        s = Stream("ab!")
        parser = pair(matchLiteral("ab"), matchLiteral("c"))
        assert parser(s, 0) == (None, 2, True)

    def test_nested_pairs_report_innermost_failure(self) -> None:
        parser = pair(matchLiteral("a"), pair(matchLiteral("b"), matchLiteral("c")))
        assert _run(parser, "abx") == (None, "x", True)


class TestLeftRight:
    def test_right(self) -> None:
        tagOpener = right(matchLiteral("<"), identifier)
        assert _run(tagOpener, "<test-element/>") == ("test-element", "/>", False)
        assert _run(tagOpener, "oops") == (None, "oops", True)
        assert _run(tagOpener, "<!oops") == (None, "!oops", True)

    def test_left(self) -> None:
        parser = left(identifier, matchLiteral("="))
        assert _run(parser, 'name="x"') == ("name", '"x"', False)

    def test_left_second_fails_without_backtracking(self) -> None:
        parser = left(identifier, matchLiteral("="))
        assert _run(parser, "name:x") == (None, ":x", True)


class TestPred:
    def test_holds(self) -> None:
        parser = pred(anyChar, lambda c: c == "o")
        assert _run(parser, "omg") == ("o", "mg", False)

    def test_fails_and_rolls_back(self) -> None:
        parser = pred(anyChar, lambda c: c == "o")
        assert _run(parser, "lol") == (None, "lol", True)

    def test_rolls_back_partial_consumption(self) -> None:
        # identifier consumed "abc", but the predicate rejects it.
        parser = pred(identifier, lambda name: name == "div")
        assert _run(parser, "abc def") == (None, "abc def", True)

    def test_rolls_back_inner_pair_failure(self) -> None:
        # pair alone would fail at "!", but pred restores its own start.
        parser = pred(pair(matchLiteral("<"), identifier), lambda _: True)
        assert _run(parser, "<!oops") == (None, "<!oops", True)

    def test_inner_failure(self) -> None:
        parser = pred(anyChar, lambda _: True)
        assert _run(parser, "") == (None, "", True)

    def test_from_middle(self) -> None:
        s = Stream("xyz")
        parser = pred(anyChar, lambda c: c == "z")
        assert parser(s, 1) == (None, 1, True)
        assert parser(s, 2) == ("z", 3, False)


class TestOneOrMore:
    def test_many(self) -> None:
        parser = oneOrMore(matchLiteral("ha"))
        assert _run(parser, "hahaha") == ([None, None, None], "", False)

    def test_none(self) -> None:
        parser = oneOrMore(matchLiteral("ha"))
        assert _run(parser, "ahah") == (None, "ahah", True)

    def test_empty(self) -> None:
        parser = oneOrMore(matchLiteral("ha"))
        assert _run(parser, "") == (None, "", True)

    def test_stops_at_first_failure(self) -> None:
        parser = oneOrMore(matchLiteral("ha"))
        assert _run(parser, "hahah") == ([None, None], "h", False)

    def test_collects_in_order(self) -> None:
        parser = oneOrMore(pred(anyChar, str.isdigit))
        assert _run(parser, "123x") == (["1", "2", "3"], "x", False)

    def test_total_failure_keeps_nothing(self) -> None:
        # The inner pair fails after consuming "<"; oneOrMore reports its own start.
        parser = oneOrMore(pair(matchLiteral("<"), identifier))
        assert _run(parser, "<!") == (None, "<!", True)

    def test_stops_before_partial_item(self) -> None:
        # A later failing pair leaves the remainder at the end of the last good item.
        parser = oneOrMore(pair(matchLiteral("<"), identifier))
        assert _run(parser, "<a<b<!") == ([(None, "a"), (None, "b")], "<!", False)

    def test_non_consuming_parser_terminates(self) -> None:
        parser = oneOrMore(matchLiteral(""))
        assert _run(parser, "abc") == ([None], "abc", False)

    @pytest.mark.parametrize("count", [1, 2, 5, 50])
    def test_length_matches_successes(self, count: int) -> None:
        parser = oneOrMore(matchLiteral("x"))
        val, rest, err = _run(parser, "x" * count + "y")
        assert not err
        assert len(val) == count
        assert rest == "y"


class TestZeroOrMore:
    def test_many(self) -> None:
        parser = zeroOrMore(matchLiteral("ha"))
        assert _run(parser, "hahaha") == ([None, None, None], "", False)

    def test_none(self) -> None:
        parser = zeroOrMore(matchLiteral("ha"))
        assert _run(parser, "ahah") == ([], "ahah", False)

    def test_empty(self) -> None:
        parser = zeroOrMore(matchLiteral("ha"))
        assert _run(parser, "") == ([], "", False)

    @pytest.mark.parametrize("text", ["", "x", "<!", "   ", "hahah"])
    def test_never_fails(self, text: str) -> None:
        for inner in (anyChar, identifier, matchLiteral("ha"), pair(matchLiteral("<"), identifier)):
            assert not _run(zeroOrMore(inner), text)[2]

    def test_rolls_back_partial_item(self) -> None:
        parser = zeroOrMore(pair(matchLiteral("<"), identifier))
        assert _run(parser, "<!") == ([], "<!", False)

    def test_non_consuming_parser_terminates(self) -> None:
        parser = zeroOrMore(zeroOrMore(matchLiteral("x")))
        assert _run(parser, "xxy") == ([[None, None], []], "y", False)

    def test_results_are_fresh_per_call(self) -> None:
        parser = zeroOrMore(anyChar)
        first, _, _ = _run(parser, "ab")
        second, _, _ = _run(parser, "cd")
        assert first == ["a", "b"]
        assert second == ["c", "d"]
