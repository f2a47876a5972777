# topmark:header:start
#
#   project      : PaddedCell
#   file         : test_generic_steps.py
#   file_relpath : tests/steps/test_generic_steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in generic steps."""

from __future__ import annotations

import json

import pytest

from paddedcell.steps import (
    IndentStep,
    IndentStyle,
    JsonStep,
    ReplaceRegexStep,
    ReplaceStep,
    TrimTrailingWhitespaceStep,
)


def test_trim_trailing_whitespace() -> None:
    step = TrimTrailingWhitespaceStep()
    assert step.apply("a  \nb\t\n  c \n") == "a\nb\n  c\n"
    assert step.apply(step.apply("x \n")) == "x\n"


@pytest.mark.parametrize(
    ("style", "width", "text", "expected"),
    [
        (IndentStyle.SPACES, 4, "\tx\n\t\ty\n", "    x\n        y\n"),
        (IndentStyle.SPACES, 2, "\t x\n", "   x\n"),
        (IndentStyle.TABS, 4, "        x\n", "\t\tx\n"),
        (IndentStyle.TABS, 4, "      x\n", "\t  x\n"),
        (IndentStyle.TABS, 2, "x\n", "x\n"),
    ],
)
def test_indent(style: IndentStyle, width: int, text: str, expected: str) -> None:
    assert IndentStep(style=style, width=width).apply(text) == expected


def test_indent_rejects_non_positive_width() -> None:
    with pytest.raises(ValueError):
        IndentStep(width=0)


def test_replace() -> None:
    assert ReplaceStep(search="foo", replacement="bar").apply("foo foo") == "bar bar"


def test_replace_requires_search() -> None:
    with pytest.raises(ValueError):
        ReplaceStep(search="")


def test_replace_regex_is_multiline() -> None:
    step = ReplaceRegexStep(pattern=r"^#\s*", replacement="# ")
    assert step.apply("#a\n#   b\n") == "# a\n# b\n"


def test_replace_regex_rejects_invalid_pattern() -> None:
    with pytest.raises(ValueError):
        ReplaceRegexStep(pattern="(")


def test_json_pretty_prints() -> None:
    step = JsonStep(indent=2, sort_keys=True)
    out: str = step.apply('{"b": 1, "a": [1, 2]}')

    assert out == '{\n  "a": [\n    1,\n    2\n  ],\n  "b": 1\n}'
    assert step.apply(out) == out


def test_json_keeps_non_ascii() -> None:
    assert JsonStep(indent=0).apply('{"k": "é"}') == '{\n"k": "é"\n}'


def test_json_invalid_input_raises() -> None:
    with pytest.raises(json.JSONDecodeError):
        JsonStep().apply("{not json")


def test_steps_have_value_semantics() -> None:
    assert ReplaceStep(search="a", replacement="b") == ReplaceStep(search="a", replacement="b")
    assert ReplaceStep(search="a", replacement="b") != ReplaceStep(search="a", replacement="c")
    assert IndentStep().identity == ("IndentStep", "indent", IndentStyle.SPACES, 4)
    described: str = ReplaceStep(search="a", replacement="b").describe()
    assert described == "replace(search='a', replacement='b')"
