# tests/test_pattern_lang.py
"""Tests for the pattern DSL: tokenizer, parser and regex compilation."""

import pytest

from said.core.pattern_lang import (
    Literal, Alternation, OptionalPhrase, Capture, Wildcard, Sequence,
    MalformedPatternDefinition,
    tokenize_pattern, parse_pattern, format_pattern, compile_pattern,
)


# === Tokenizer ===

def test_tokenize_kinds_and_positions():
    tokens = tokenize_pattern("take [the] <item>")

    assert [t.kind for t in tokens] == [
        "word", "space", "lbracket", "word", "rbracket", "space", "capture",
    ]
    assert tokens[0].position == 0
    assert tokens[2].position == 5
    assert tokens[6].text == "item"
    assert tokens[6].position == 11


def test_tokenize_unterminated_capture():
    with pytest.raises(MalformedPatternDefinition, match="Unterminated capture") as exc:
        tokenize_pattern("take <item")
    assert exc.value.position == 5


def test_tokenize_stray_close_angle():
    with pytest.raises(MalformedPatternDefinition, match="Unbalanced '>'"):
        tokenize_pattern("take item>")


def test_tokenize_unexpected_character():
    with pytest.raises(MalformedPatternDefinition, match="Unexpected character"):
        tokenize_pattern("take #item")


# === Parser ===

def test_parse_all_element_kinds():
    seq = parse_pattern("get/take/grab [the] <item> *")

    assert seq == Sequence((
        Alternation(("get", "take", "grab")),
        OptionalPhrase((Literal("the"),)),
        Capture("item"),
        Wildcard(),
    ))
    assert seq.slots == ("item",)


def test_parse_casefolds_words():
    assert parse_pattern("Take THE Lamp") == Sequence((
        Literal("take"), Literal("the"), Literal("lamp"),
    ))


def test_parse_alternation_inside_optional():
    seq = parse_pattern("climb [up/down the] <object>")
    assert seq.elements[1] == OptionalPhrase((Alternation(("up", "down")), Literal("the")))


def test_format_pattern_normalizes_whitespace():
    seq = parse_pattern("  get/take   [the    a]  <item> ")
    assert format_pattern(seq) == "get/take [the a] <item>"


@pytest.mark.parametrize("source, message", [
    ("", "Empty pattern"),
    ("   ", "Empty pattern"),
    ("take [the", "Unbalanced '\\['"),
    ("take ] <item>", "Unbalanced '\\]'"),
    ("take [[the]] <item>", "cannot be nested"),
    ("take [<item>]", "Only words and alternations"),
    ("take [*]", "Only words and alternations"),
    ("take []", "Empty optional"),
    ("take <>", "Empty capture"),
    ("take <1st>", "Invalid capture name"),
    ("take/ <item>", "'/' must join two words"),
    ("take /drop <item>", "'/' must join two words"),
    ("<item>/drop", "Only bare words can be alternatives"),
    ("take<item>", "Expected whitespace"),
    ("put <item> in <item>", "Duplicate capture name <item>"),
    ("[the] *", "at least one word or capture"),
])
def test_malformed_patterns(source, message):
    with pytest.raises(MalformedPatternDefinition, match=message):
        parse_pattern(source)


def test_malformed_pattern_reports_column():
    with pytest.raises(MalformedPatternDefinition) as exc:
        parse_pattern("take ] <item>")

    assert exc.value.position == 5
    assert exc.value.pattern == "take ] <item>"
    assert "Column 5" in str(exc.value)


# === Matching ===

def test_alternation_and_optional():
    p = compile_pattern("get/take/grab [the] <item>", "TAKE")

    assert p.match("grab the lamp") == {"item": "lamp"}
    assert p.match("take lamp") == {"item": "lamp"}
    assert p.match("get the brass lamp") == {"item": "brass lamp"}
    assert p.match("take") is None
    assert p.match("drop the lamp") is None


def test_matching_ignores_case():
    p = compile_pattern("take [the] <item>", "TAKE")
    assert p.match("TAKE THE LAMP") == {"item": "LAMP"}


def test_match_is_anchored():
    p = compile_pattern("open [the] door", "OPEN")

    assert p.match("open the door") == {}
    assert p.match("open door") == {}
    assert p.match("open the door please") is None
    assert p.match("please open the door") is None


def test_leading_optional():
    p = compile_pattern("[please] take <item>", "TAKE")

    assert p.match("please take lamp") == {"item": "lamp"}
    assert p.match("take lamp") == {"item": "lamp"}


def test_wildcard_may_be_empty():
    p = compile_pattern("say * to <person>", "SAY_TO")

    assert p.match("say hello there to bob") == {"person": "bob"}
    assert p.match("say to bob") == {"person": "bob"}


def test_capture_stops_before_optional_preposition():
    p = compile_pattern("give [the] <item> [to] <character>", "GIVE")

    assert p.match("give the sword to wizard") == {"item": "sword", "character": "wizard"}
    assert p.match("give sword wizard") == {"item": "sword", "character": "wizard"}


def test_capture_before_required_literal():
    p = compile_pattern("put [the] <item> in [the] <container>", "INSERT")

    assert p.match("put the red ball in the box") == {"item": "red ball", "container": "box"}
    assert p.slots == ("item", "container")


def test_literals_are_canonicalized():
    synonyms = {"get": "take"}
    p = compile_pattern("get in [the] <vehicle>", "ENTER", canonicalize=lambda w: synonyms.get(w, w))

    assert p.match("take in the car") == {"vehicle": "car"}
    assert p.match("get in the car") is None


def test_match_spans():
    p = compile_pattern("take [the] <item>", "TAKE")
    assert p.match_spans("take the lamp") == {"item": (9, 13)}


def test_canonical_form():
    p = compile_pattern("GET/Take  [the]   <item>", "TAKE")
    assert p.canonical == "get/take [the] <item>"
