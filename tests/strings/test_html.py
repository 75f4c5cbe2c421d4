import pytest
from dashkit.strings.html import escape, unescape

UNESCAPED = """&<>"'/&<>"'/"""
ESCAPED = "&amp;&lt;&gt;&quot;&#39;/&amp;&lt;&gt;&quot;&#39;/"


def test_escape_values():
    assert escape(UNESCAPED) == ESCAPED
    assert escape("fred, barney, & pebbles") == "fred, barney, &amp; pebbles"


@pytest.mark.parametrize("value", ["`", "/", "abc", "", "café \U0001f600"])
def test_escape_leaves_other_characters(value):
    assert escape(value) == value


def test_escape_returns_input_when_nothing_to_escape():
    value = "nothing to see here"
    assert escape(value) is value


def test_escape_is_not_entity_aware():
    assert escape("&amp;") == "&amp;amp;"


def test_unescape_values():
    assert unescape(ESCAPED) == UNESCAPED
    assert unescape("fred, barney, &amp; pebbles") == "fred, barney, & pebbles"


def test_unescape_returns_input_when_nothing_to_unescape():
    value = "abc"
    assert unescape(value) is value


def test_unescape_single_pass():
    assert unescape("&amp;lt;") == "&lt;"
    assert unescape("&amp;amp;") == "&amp;"


@pytest.mark.parametrize("value", ["&#39;", "&#039;", "&#000039;"])
def test_unescape_leading_zeros(value):
    assert unescape(value) == "'"


@pytest.mark.parametrize(
    "value", ["&#96;", "&#x2F;", "&#x27;", "&#390;", "&#3;", "&nbsp;", "&amp", "&"]
)
def test_unescape_ignores_unknown_references(value):
    assert unescape(value) == value


@pytest.mark.parametrize(
    "value",
    [
        UNESCAPED,
        "&amp;",
        "&#039;",
        "<a href='x'>\"q\" & more</a>",
        "plain text",
        "",
    ],
)
def test_escape_then_unescape_round_trips(value):
    assert unescape(escape(value)) == value


def test_escape_after_unescape_is_canonical():
    assert escape(unescape(ESCAPED)) == ESCAPED
    # Zero-padded references come back in canonical form.
    assert escape(unescape("&#039;")) == "&#39;"
