# src/said/core/grammar_lang.py
"""
A line-oriented DSL describing a whole command grammar: lexicon + patterns.

Syntax:
  verb <canonical>: <synonym> <synonym> "multi word" ...
  direction <canonical>: <synonym> ...
  abbrev <token> = <phrase>
  multiword <phrase>
  articles | fillers | prepositions | pronouns | all  <word> <word> ...
  error <key> = <template>
  pattern <ACTION>: <pattern>

Pattern lines are kept in file order; that order is the matching order.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from said.core.lexicon import Lexicon
from said.core.pattern_lang import MalformedPatternDefinition, parse_pattern

logger = logging.getLogger(__name__)

WORD_LISTS = ("articles", "fillers", "prepositions", "pronouns", "all")
PHRASE_RE = re.compile(r'"([^"]+)"|(\S+)')


@dataclass
class GrammarDocument:
    verbs: dict[str, list[str]] = field(default_factory=dict)
    directions: dict[str, list[str]] = field(default_factory=dict)
    abbreviations: dict[str, str] = field(default_factory=dict)
    multi_word_verbs: list[str] = field(default_factory=list)
    word_lists: dict[str, list[str]] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    pattern_sources: list[tuple[str, str]] = field(default_factory=list)  # (pattern, action)

    def lexicon(self) -> Lexicon:
        return Lexicon.from_tables(
            verbs=self.verbs,
            directions=self.directions,
            abbreviations=self.abbreviations,
            multi_word_verbs=self.multi_word_verbs,
            articles=self.word_lists.get("articles", []),
            fillers=self.word_lists.get("fillers", []),
            prepositions=self.word_lists.get("prepositions", []),
            pronouns=self.word_lists.get("pronouns", []),
            all_words=self.word_lists.get("all", []),
            errors=self.errors,
        )

    def patterns(self) -> list[tuple[str, str]]:
        return list(self.pattern_sources)


class GrammarParseError(Exception):
    def __init__(self, message: str, line_num: int, line: str):
        self.line_num = line_num
        self.line = line
        super().__init__(f"Line {line_num}: {message}\n  {line}")


def split_phrases(text: str) -> list[str]:
    """Split on whitespace, keeping "quoted phrases" together."""
    return [quoted or bare for quoted, bare in PHRASE_RE.findall(text)]


class GrammarParser:
    def __init__(self):
        self.doc = GrammarDocument()

    def parse(self, text: str) -> GrammarDocument:
        self.doc = GrammarDocument()

        for i, line in enumerate(text.splitlines(), 1):
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            try:
                self.parse_line(line)
            except MalformedPatternDefinition as e:
                raise MalformedPatternDefinition(f"Line {i}: {e.message}", e.pattern, e.position) from e
            except ValueError as e:
                raise GrammarParseError(str(e), i, line) from e

        return self.doc

    def parse_line(self, line: str):
        keyword, _, rest = line.partition(" ")
        rest = rest.strip()

        if keyword == "verb":
            self.parse_entry(rest, self.doc.verbs)
        elif keyword == "direction":
            self.parse_entry(rest, self.doc.directions)
        elif keyword == "abbrev":
            self.parse_abbrev(rest)
        elif keyword == "multiword":
            if not rest:
                raise ValueError("Expected: multiword <phrase>")
            self.doc.multi_word_verbs.append(rest)
        elif keyword in WORD_LISTS:
            self.doc.word_lists.setdefault(keyword, []).extend(rest.split())
        elif keyword == "error":
            self.parse_error(rest)
        elif keyword == "pattern":
            self.parse_pattern_line(rest)
        else:
            raise ValueError(f"Unknown directive: {keyword}")

    def parse_entry(self, rest: str, table: dict[str, list[str]]):
        """Parse: <canonical>: synonym synonym "multi word" ..."""
        match = re.match(r"([^\s:]+)\s*:\s*(.*)", rest)
        if not match:
            raise ValueError("Expected: <canonical>: <synonym> ...")

        canonical, synonyms = match.groups()
        table.setdefault(canonical, []).extend(split_phrases(synonyms))

    def parse_abbrev(self, rest: str):
        """Parse: <token> = <phrase>"""
        match = re.match(r"(\S+)\s*=\s*(.+)", rest)
        if not match:
            raise ValueError("Expected: abbrev <token> = <phrase>")

        token, phrase = match.groups()
        self.doc.abbreviations[token] = phrase.strip()

    def parse_error(self, rest: str):
        """Parse: <key> = <template>"""
        match = re.match(r"(\w+)\s*=\s*(.+)", rest)
        if not match:
            raise ValueError("Expected: error <key> = <template>")

        key, template = match.groups()
        self.doc.errors[key] = template.strip()

    def parse_pattern_line(self, rest: str):
        """Parse: <ACTION>: <pattern>"""
        match = re.match(r"(\w+)\s*:\s*(.+)", rest)
        if not match:
            raise ValueError("Expected: pattern <ACTION>: <pattern>")

        action, source = match.groups()
        source = source.strip()
        parse_pattern(source)  # fail here, with a line number, rather than at library build
        self.doc.pattern_sources.append((source, action))


def parse_grammar(text: str) -> GrammarDocument:
    parser = GrammarParser()
    return parser.parse(text)


def load_grammar(path: str | Path) -> GrammarDocument:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if p.suffix != ".grammar":
        logger.warning("Expected .grammar extension, got %s", p.suffix or "none")
    return parse_grammar(p.read_text())


@lru_cache(maxsize=1)
def default_grammar() -> GrammarDocument:
    from said.core.default_grammar import DEFAULT_GRAMMAR
    return parse_grammar(DEFAULT_GRAMMAR)


# === Formatting ===

def format_phrase(phrase: str) -> str:
    return f'"{phrase}"' if " " in phrase else phrase


def format_grammar(doc: GrammarDocument) -> str:
    lines = []

    if doc.verbs:
        lines.append("# Verbs")
        for canonical, synonyms in doc.verbs.items():
            lines.append(f"verb {canonical}: {' '.join(format_phrase(s) for s in synonyms)}".rstrip())
        lines.append("")

    if doc.directions:
        lines.append("# Directions")
        for canonical, synonyms in doc.directions.items():
            lines.append(f"direction {canonical}: {' '.join(format_phrase(s) for s in synonyms)}".rstrip())
        lines.append("")

    if doc.abbreviations:
        lines.append("# Abbreviations")
        for token, phrase in doc.abbreviations.items():
            lines.append(f"abbrev {token} = {phrase}")
        lines.append("")

    if doc.multi_word_verbs:
        lines.append("# Multi-word verbs")
        for phrase in doc.multi_word_verbs:
            lines.append(f"multiword {phrase}")
        lines.append("")

    if doc.word_lists:
        lines.append("# Word lists")
        for name in WORD_LISTS:
            if doc.word_lists.get(name):
                lines.append(f"{name} {' '.join(doc.word_lists[name])}")
        lines.append("")

    if doc.errors:
        lines.append("# Errors")
        for key, template in doc.errors.items():
            lines.append(f"error {key} = {template}")
        lines.append("")

    if doc.pattern_sources:
        lines.append("# Patterns (first match wins)")
        for source, action in doc.pattern_sources:
            lines.append(f"pattern {action}: {source}")

    return "\n".join(lines).rstrip() + "\n"
