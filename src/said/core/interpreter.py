# src/said/core/interpreter.py
"""
Interpretation pipeline: one raw input line -> MatchResult.

Stages:
  1. trim, collapse whitespace, case-fold
  2. whole-input abbreviation ("n" -> "go north")
  3. drop filler words ("please", "kindly", ...) when strip_fillers is on
  4. word-local synonym expansion (verbs, then directions)
  5. first matching pattern in library order

Failed parses are data, not exceptions: the result carries a hint saying
whether any verb was recognized so the caller can pick an error template.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Iterable

from said.core.lexicon import Lexicon
from said.core.library import LibraryMatch, PatternLibrary, ProbeResult

logger = logging.getLogger(__name__)


class MatchHint(str, Enum):
    NO_VERB_RECOGNIZED = "NoVerbRecognized"
    VERB_RECOGNIZED_NO_PATTERN_MATCH = "VerbRecognizedNoPatternMatch"


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of one interpret call.

    Captures hold the player's own words, case-folded, not their canonical
    synonyms: "go n" gives direction="n". command_from_match canonicalizes
    directions when building a Command.
    """

    matched: bool
    action: str | None = None
    captures: dict[str, str] = field(default_factory=dict)
    hint: MatchHint | None = None
    verb: str | None = None  # canonical verb recognized in the input, if any
    text: str = ""           # normalized, expanded input the library saw

    def to_dict(self) -> dict:
        return {
            "matched": self.matched,
            "action": self.action,
            "captures": dict(self.captures),
            "hint": self.hint.value if self.hint else None,
            "verb": self.verb,
            "text": self.text,
        }


class Interpreter:
    def __init__(self, lexicon: Lexicon, library: PatternLibrary, strip_fillers: bool = True):
        if library.lexicon is not lexicon:
            library = PatternLibrary._assemble(
                tuple(p.bind(lexicon.canonical_word) for p in library), lexicon, False
            )
        self.lexicon = lexicon
        self.library = library
        self.strip_fillers = strip_fillers

    @classmethod
    def from_sources(
        cls,
        lexicon: Lexicon,
        sources: Iterable[tuple[str, str]],
        strip_fillers: bool = True,
        strict: bool = False,
    ) -> "Interpreter":
        lexicon.warn_on_defects()
        library = PatternLibrary.build(sources, lexicon, strict=strict)
        return cls(lexicon, library, strip_fillers)

    @classmethod
    def from_grammar(cls, doc, strip_fillers: bool = True, strict: bool = False) -> "Interpreter":
        return cls.from_sources(doc.lexicon(), doc.patterns(), strip_fillers, strict)

    @classmethod
    def default(cls, strip_fillers: bool = True) -> "Interpreter":
        from said.core.grammar_lang import default_grammar
        return cls.from_grammar(default_grammar(), strip_fillers)

    def with_patterns(self, sources: Iterable[tuple[str, str]], strict: bool = False) -> "Interpreter":
        """A new interpreter with extra patterns; swap it in between calls."""
        return Interpreter(self.lexicon, self.library.extended(sources, strict), self.strip_fillers)

    # === Pipeline ===

    def surface_words(self, raw: str) -> list[str]:
        """Stages 1-3: the player's words, before synonym expansion."""
        text = " ".join((raw or "").split()).casefold()

        expansion = self.lexicon.expand_abbreviation(text) if text else None
        if expansion:
            text = expansion

        words = text.split()
        if self.strip_fillers:
            words = [w for w in words if not self.lexicon.is_filler(w)]
        return words

    def normalize(self, raw: str) -> list[str]:
        return self.lexicon.expand_words(self.surface_words(raw))

    def interpret(self, raw: str) -> MatchResult:
        surface = self.surface_words(raw)
        words = self.lexicon.expand_words(surface)
        text = " ".join(words)
        if not words:
            return MatchResult(matched=False, hint=MatchHint.NO_VERB_RECOGNIZED)

        verb = self.lexicon.find_verb(words)
        match = self.library.find_match(text, accept=self.complete_captures)
        if match is not None:
            captures = surface_captures(match.spans, text, surface)
            logger.debug("%r -> %s %s (pattern #%d)", raw, match.action, captures, match.index)
            return MatchResult(
                matched=True,
                action=match.action,
                captures=captures,
                verb=verb,
                text=text,
            )

        hint = MatchHint.VERB_RECOGNIZED_NO_PATTERN_MATCH if verb else MatchHint.NO_VERB_RECOGNIZED
        logger.debug("%r -> no match (%s)", raw, hint.value)
        return MatchResult(matched=False, hint=hint, verb=verb, text=text)

    def complete_captures(self, match: LibraryMatch) -> bool:
        """
        Reject matches whose noun phrases are not whole.

        A capture may not be a lone article ("give the wizard" is not
        item="the"), and a capture of several words may not end in a
        preposition ("unlock the door with" is not door="door with").
        A single-word capture such as "go in" is left alone.
        """
        for value in match.captures.values():
            words = value.split()
            if len(words) == 1 and words[0] in self.lexicon.articles:
                return False
            if len(words) > 1 and self.lexicon.is_preposition(words[-1]):
                return False
        return True

    def debug(self, raw: str) -> list[ProbeResult]:
        return self.library.probe(" ".join(self.normalize(raw)))

    def explain(self, result: MatchResult, **values) -> str | None:
        """Player-facing message for a failed parse; None when it matched."""
        if result.matched:
            return None

        if not result.text:
            return self.lexicon.format_error("noVerb", **values)

        if result.hint == MatchHint.NO_VERB_RECOGNIZED:
            return self.lexicon.format_error("unknownVerb", **values)

        values.setdefault("verb", result.verb)
        words = result.text.split()

        # "give the sword to": object named, indirect object missing
        if len(words) > 2 and self.lexicon.is_preposition(words[-1]):
            obj = [w for w in words[1:-1] if w not in self.lexicon.articles]
            if obj:
                values.setdefault("object", " ".join(obj))
                values.setdefault("preposition", words[-1])
                return self.lexicon.format_error("needIndirectObject", **values)

        rest = [w for w in words[1:] if w not in self.lexicon.articles]
        if not rest or self.lexicon.canonical_verb(result.text):
            return self.lexicon.format_error("needMoreInfo", **values)
        return self.lexicon.format_error("cantDoThat", **values)


@lru_cache(maxsize=1)
def default_interpreter() -> Interpreter:
    return Interpreter.default()


def interpret(raw: str) -> MatchResult:
    return default_interpreter().interpret(raw)


def surface_captures(spans: dict[str, tuple[int, int]], text: str, surface: list[str]) -> dict[str, str]:
    """
    Map capture spans over the expanded text back onto the player's words.

    Expansion is word-for-word and the text is single-spaced, so a span's
    word offset is the number of spaces before it.
    """
    captures = {}
    for name, (start, end) in spans.items():
        first = text.count(" ", 0, start)
        count = text.count(" ", start, end) + 1
        captures[name] = " ".join(surface[first:first + count])
    return captures
