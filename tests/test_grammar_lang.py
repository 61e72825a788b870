# tests/test_grammar_lang.py
"""Tests for .grammar files and the built-in grammar."""

import logging

import pytest

from said.core.grammar_lang import (
    GrammarParseError,
    default_grammar, format_grammar, load_grammar, parse_grammar, split_phrases,
)
from said.core.interpreter import Interpreter
from said.core.library import PatternLibrary
from said.core.pattern_lang import MalformedPatternDefinition


SAMPLE = """
# A tiny grammar
verb take: get grab "pick up"
verb go: walk
verb lock:
direction north: n
abbrev n = go north
multiword pick up
articles the a
fillers please
error unknownVerb = Say what?

pattern TAKE: take [the] <item>
pattern GO: go <direction>
"""


# === Parsing ===

def test_split_phrases():
    assert split_phrases('get "pick up" grab') == ["get", "pick up", "grab"]


def test_parse_sections():
    doc = parse_grammar(SAMPLE)

    assert doc.verbs == {"take": ["get", "grab", "pick up"], "go": ["walk"], "lock": []}
    assert doc.directions == {"north": ["n"]}
    assert doc.abbreviations == {"n": "go north"}
    assert doc.multi_word_verbs == ["pick up"]
    assert doc.word_lists == {"articles": ["the", "a"], "fillers": ["please"]}
    assert doc.errors == {"unknownVerb": "Say what?"}


def test_patterns_keep_file_order():
    doc = parse_grammar(SAMPLE)
    assert doc.patterns() == [("take [the] <item>", "TAKE"), ("go <direction>", "GO")]


def test_interpreter_from_grammar():
    interpreter = Interpreter.from_grammar(parse_grammar(SAMPLE))

    assert interpreter.interpret("please grab the lamp").captures == {"item": "lamp"}
    assert interpreter.interpret("n").captures == {"direction": "north"}
    assert interpreter.explain(interpreter.interpret("xyzzy")) == "Say what?"


def test_unknown_directive():
    with pytest.raises(GrammarParseError) as exc:
        parse_grammar("verb take: get\nfrobnicate all the things")

    assert exc.value.line_num == 2
    assert "Unknown directive: frobnicate" in str(exc.value)


def test_malformed_abbreviation():
    with pytest.raises(GrammarParseError, match="Expected: abbrev"):
        parse_grammar("abbrev n")


def test_malformed_pattern_has_line_number():
    with pytest.raises(MalformedPatternDefinition, match="Line 2: Unbalanced"):
        parse_grammar("verb take: get\npattern TAKE: take [the")


# === Formatting ===

def test_format_round_trip():
    doc = parse_grammar(SAMPLE)
    assert parse_grammar(format_grammar(doc)) == doc


def test_format_quotes_phrases():
    text = format_grammar(parse_grammar(SAMPLE))

    assert 'verb take: get grab "pick up"' in text
    assert "verb lock:\n" in text
    assert "pattern GO: go <direction>" in text


# === Files ===

def test_load_grammar(tmp_path):
    path = tmp_path / "tiny.grammar"
    path.write_text(SAMPLE)

    doc = load_grammar(path)

    assert len(doc.patterns()) == 2


def test_load_grammar_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_grammar(tmp_path / "missing.grammar")


def test_load_grammar_warns_on_extension(tmp_path, caplog):
    path = tmp_path / "tiny.txt"
    path.write_text(SAMPLE)

    with caplog.at_level(logging.WARNING, logger="said.core.grammar_lang"):
        load_grammar(path)

    assert "Expected .grammar extension" in caplog.text


# === Built-in grammar ===

def test_default_grammar_is_consistent():
    doc = default_grammar()
    lexicon = doc.lexicon()

    assert lexicon.validate() == []
    library = PatternLibrary.build(doc.patterns(), lexicon, strict=True)
    assert library.dead_patterns == ()
    assert library.collisions == ()


def test_default_grammar_round_trip():
    doc = default_grammar()
    assert parse_grammar(format_grammar(doc)) == doc
